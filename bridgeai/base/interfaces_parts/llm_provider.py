"""LLMProvider Protocol (single-class module).

Defines the minimal chat interface contract for backend adapters.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import ChatRequest, ChatResponse


@runtime_checkable
class LLMProvider(Protocol):
    """Minimal interface for chat backends.

    Implementations map ``ChatRequest`` fields to their SDK parameters and
    normalize replies to ``ChatResponse`` (zero-filled usage, empty
    ``hash``). SDK failures must surface as ``ProviderError`` subclasses
    carrying the backend status so the retry policy can classify them.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"openai"`` or ``"claude"``."""
        ...

    async def chat(self, request: ChatRequest) -> ChatResponse:
        """Execute a single chat completion request."""
        ...
