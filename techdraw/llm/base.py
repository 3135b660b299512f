"""LLM provider abstraction for instruction generation.

A provider only has to implement ``complete``; the generator talks to it
through ``generate``, which sends one user turn.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, field


@dataclass
class LLMResponse:
    text: str
    model: str
    provider: str
    tokens_used: int = 0
    latency_ms: int = 0
    raw: dict | None = field(default=None, repr=False)


class LLMProvider(abc.ABC):
    """Base class for instruction-generation backends."""

    @abc.abstractmethod
    async def complete(
        self,
        messages: list[dict],
        system_prompt: str = "",
        max_tokens: int = 1024,
        temperature: float = 0.3,
    ) -> LLMResponse:
        """Send a chat completion request."""

    @abc.abstractmethod
    def name(self) -> str:
        """Provider identifier."""

    @abc.abstractmethod
    def is_available(self) -> bool:
        """True if credentials are configured."""

    async def generate(
        self,
        prompt: str,
        system_prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> LLMResponse:
        """Single-turn completion of a circuit description."""
        return await self.complete(
            [{"role": "user", "content": prompt}],
            system_prompt=system_prompt,
            max_tokens=max_tokens,
            temperature=temperature,
        )
