"""LLM port abstraction."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from ..domain.models import Message


class LLMPort(Protocol):
    """Abstract interface for chat completion.

    Implementations raise ``LLMError`` subclasses on any backend failure and
    return an empty string when the backend produced no content.
    """

    model_name: str

    def complete(
        self,
        messages: Sequence[Message],
        system_prompt: str,
        temperature: float = 0.7,
        max_tokens: int = 1000,
    ) -> str:  # pragma: no cover - protocol
        ...
