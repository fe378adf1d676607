"""Deterministic mock adapter for offline use.

Purpose
-------
Implements the adapter contract without network traffic so higher layers
(retry, fallback, memory, streaming) can be exercised locally. Canned replies
are returned in order and cycled; with none configured the adapter echoes the
prompt (``"Mock response to: <prompt>"``).

Queued errors (``errors=[...]``) are raised by the next calls before any
canned reply is used, which makes transient-failure scenarios reproducible.
"""

from __future__ import annotations

import dataclasses
import threading
from collections import deque
from typing import Any, AsyncIterator, Deque, Iterable, List, Mapping, Optional, Sequence, Union

from ..base.adapter import BaseAdapter
from ..base.models import ChatRequest, ChatResponse, StreamChunk, TokenUsage, ToolCall

CannedReply = Union[ChatResponse, Mapping[str, Any], str]


class MockProvider(BaseAdapter):
    """Adapter returning canned responses instead of calling a backend."""

    provider_key = "mock"
    requires_api_key = False

    def __init__(
        self,
        responses: Optional[Sequence[CannedReply]] = None,
        errors: Optional[Iterable[BaseException]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._responses: List[CannedReply] = list(responses if responses is not None else self._extra.get("responses", ()))
        self._errors: Deque[BaseException] = deque(errors if errors is not None else self._extra.get("errors", ()))
        self._index = 0
        self._lock = threading.Lock()
        self.calls: List[ChatRequest] = []

    def set_responses(self, responses: Sequence[CannedReply]) -> None:
        """Replace the canned replies and restart the cycle."""
        with self._lock:
            self._responses = list(responses)
            self._index = 0

    def queue_error(self, exc: BaseException) -> None:
        with self._lock:
            self._errors.append(exc)

    def _next(self) -> Optional[CannedReply]:
        with self._lock:
            if self._errors:
                raise self._errors.popleft()
            if not self._responses:
                return None
            reply = self._responses[self._index]
            self._index = (self._index + 1) % len(self._responses)
            return reply

    async def chat(self, request: ChatRequest) -> ChatResponse:
        self.calls.append(request)
        model = self._resolve_model(request)
        reply = self._next()
        if isinstance(reply, ChatResponse):
            # fresh copy per call: the client assigns the hash exactly once
            return dataclasses.replace(reply, hash="", meta=dataclasses.replace(reply.meta))
        if isinstance(reply, str):
            return self.build_response(request, model=model, text=reply, tool_calls=[])
        if reply is None:
            text = f"Mock response to: {request.prompt_text()}"
            return self.build_response(request, model=model, text=text, tool_calls=[])
        usage = reply.get("usage")
        return self.build_response(
            request,
            model=model,
            text=reply.get("text", ""),
            usage=TokenUsage.from_counts(
                usage.get("prompt_tokens"), usage.get("completion_tokens"), usage.get("total_tokens")
            )
            if usage
            else None,
            tool_calls=[
                ToolCall(name=t["name"], arguments=dict(t.get("arguments") or {})) for t in reply.get("tool_calls") or ()
            ],
            raw=dict(reply),
        )

    async def chat_stream(self, request: ChatRequest) -> AsyncIterator[StreamChunk]:
        """Yield the reply word by word, then the terminal chunk."""
        self.calls.append(request)
        text = f"Mock stream response to: {request.prompt_text()}"
        for word in text.split(" "):
            yield StreamChunk(text=word + " ")
        yield StreamChunk.done()


__all__ = ["MockProvider", "CannedReply"]
