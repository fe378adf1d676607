"""Test doubles shared by the unit suite (imported as ``fakes``)."""

from __future__ import annotations

import json
import logging
from typing import Any, List, Sequence

from bridgeai.base.errors import ErrorCode, TerminalBackendError, TransientBackendError
from bridgeai.base.models import ChatRequest, ChatResponse, ProviderMetadata, StreamChunk, TokenUsage


class ScriptedAdapter:
    """Backend double replaying scripted outcomes.

    ``outcomes`` items are consumed one per ``chat`` call: exceptions are
    raised, strings become replies, ``ChatResponse`` objects are returned
    as-is. Once exhausted, replies are ``"<name> reply"``. ``chunks`` are
    streamed in order; exception items are raised mid-stream.
    """

    def __init__(self, name: str, outcomes: Sequence[Any] = (), chunks: Sequence[Any] = ()) -> None:
        self.name = name
        self.outcomes: List[Any] = list(outcomes)
        self.chunks: List[Any] = list(chunks)
        self.calls: List[ChatRequest] = []
        self.produced = 0
        self.closed = False

    @property
    def provider_name(self) -> str:
        return self.name

    async def chat(self, request: ChatRequest) -> ChatResponse:
        self.calls.append(request)
        outcome = self.outcomes.pop(0) if self.outcomes else f"{self.name} reply"
        if isinstance(outcome, BaseException):
            raise outcome
        if isinstance(outcome, ChatResponse):
            return outcome
        return ChatResponse(
            text=outcome,
            meta=ProviderMetadata(provider_name=self.name, model_name=request.model or "scripted-model"),
            usage=TokenUsage.from_counts(3, 4),
            cost=0.0,
        )

    async def chat_stream(self, request: ChatRequest):
        self.calls.append(request)
        try:
            for chunk in self.chunks:
                if isinstance(chunk, BaseException):
                    raise chunk
                self.produced += 1
                yield chunk
        finally:
            self.closed = True


def text_chunks(*parts: str, done: bool = True) -> List[StreamChunk]:
    chunks = [StreamChunk(text=p) for p in parts]
    if done:
        chunks.append(StreamChunk.done())
    return chunks


def transient(status: int = 503, provider: str = "primary") -> TransientBackendError:
    return TransientBackendError(code=ErrorCode.UNAVAILABLE, message="backend down", provider=provider, status=status)


def terminal(status: int = 400, provider: str = "primary") -> TerminalBackendError:
    return TerminalBackendError(code=ErrorCode.VALIDATION, message="bad request", provider=provider, status=status)


class ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())

    def events(self) -> List[dict]:
        return [json.loads(m) for m in self.messages if m.startswith("{")]

    def names(self) -> List[str]:
        return [e["event"] for e in self.events()]
