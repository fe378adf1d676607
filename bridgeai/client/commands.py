"""Command objects accepted by :meth:`BridgeAIClient.send`."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..base.models import ChatRequest, ChatResponse
from .preprocess import coerce_request

if TYPE_CHECKING:  # pragma: no cover
    from .dispatcher import BridgeAIClient

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """A unit of work executed against a client."""

    @abstractmethod
    async def execute(self, client: "BridgeAIClient") -> T: ...


class ChatCommand(Command[ChatResponse]):
    """Run one ``chat`` call through the full pipeline (retry, fallback, post-processing)."""

    def __init__(self, request: ChatRequest | Any = None, **kwargs: Any) -> None:
        self.request = coerce_request(request, **kwargs)

    async def execute(self, client: "BridgeAIClient") -> ChatResponse:
        return await client.chat(self.request)


__all__ = ["Command", "ChatCommand"]
