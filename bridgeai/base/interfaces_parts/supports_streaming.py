"""SupportsStreaming Protocol (single-class module).

Capability marker for adapters that can stream incremental chunks.
"""

from __future__ import annotations

from typing import AsyncIterator, Protocol, runtime_checkable

from ..models import ChatRequest, StreamChunk


@runtime_checkable
class SupportsStreaming(Protocol):
    """Adapters yielding zero or more partial chunks and one terminal chunk.

    The returned iterator is an async generator; the client closes it with
    ``aclose()`` when the consumer stops early, so implementations release
    their SDK stream in a ``finally`` block or context manager.
    """

    def chat_stream(self, request: ChatRequest) -> AsyncIterator[StreamChunk]:  # pragma: no cover - interface
        ...
