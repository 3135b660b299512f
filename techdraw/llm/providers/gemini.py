"""Gemini provider — Google Gemini for circuit-to-instruction generation."""

from __future__ import annotations

import asyncio
import time

import google.generativeai as genai

from techdraw.llm.base import LLMProvider, LLMResponse


class GeminiProvider(LLMProvider):
    def __init__(self, api_key: str, model: str = "gemini-2.5-pro") -> None:
        self._api_key = api_key
        self._model_name = model
        self._configured = False

    def _ensure_configured(self) -> None:
        if not self._configured:
            genai.configure(api_key=self._api_key)
            self._configured = True

    async def complete(
        self,
        messages: list[dict],
        system_prompt: str = "",
        max_tokens: int = 1024,
        temperature: float = 0.3,
    ) -> LLMResponse:
        self._ensure_configured()
        model = genai.GenerativeModel(
            self._model_name,
            system_instruction=system_prompt or None,
        )
        prompt = "\n".join(msg.get("content", "") for msg in messages)

        gen_config = genai.types.GenerationConfig(max_output_tokens=max_tokens, temperature=temperature)
        start = time.monotonic()
        resp = await asyncio.to_thread(model.generate_content, prompt, generation_config=gen_config)
        latency_ms = int((time.monotonic() - start) * 1000)

        tokens_used = 0
        if hasattr(resp, "usage_metadata") and resp.usage_metadata:
            tokens_used = getattr(resp.usage_metadata, "total_token_count", 0)
        return LLMResponse(
            text=resp.text or "",
            model=self._model_name,
            provider="gemini",
            tokens_used=tokens_used,
            latency_ms=latency_ms,
        )

    def name(self) -> str:
        return "gemini"

    def is_available(self) -> bool:
        return bool(self._api_key)
