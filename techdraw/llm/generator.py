"""Natural-language → instruction text, via an injected LLM provider."""

from __future__ import annotations

import logging

from techdraw.errors import GenerationError
from techdraw.llm.base import LLMProvider
from techdraw.llm.prompts import SYSTEM_INSTRUCTION
from techdraw.script import strip_code_fences

logger = logging.getLogger(__name__)


async def generate_instructions(
    provider: LLMProvider,
    prompt: str,
    temperature: float = 0.2,
    max_tokens: int = 8000,
) -> str:
    """Ask the provider for TechDraw instructions describing ``prompt``.

    Raises GenerationError if the provider fails or returns nothing.
    """
    if not provider.is_available():
        raise GenerationError(f"{provider.name()} provider is not configured (missing API key)")

    try:
        response = await provider.generate(prompt, SYSTEM_INSTRUCTION, max_tokens, temperature)
    except Exception as e:
        logger.exception("%s API error", provider.name())
        raise GenerationError("Failed to generate schematic.") from e

    code = strip_code_fences(response.text)
    if not code:
        raise GenerationError("Model returned no instructions.")

    logger.info(
        "Generated %d instruction lines via %s/%s in %dms",
        len(code.splitlines()), response.provider, response.model, response.latency_ms,
    )
    return code
