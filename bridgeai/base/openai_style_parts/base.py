"""Shared implementation for OpenAI-compatible Chat Completions backends.

Purpose:
- One adapter implementation for every backend speaking the Chat Completions
  protocol (OpenAI itself, DeepSeek, Perplexity). Backends differ only in their
  :class:`OpenAIStyleProfile` (identity, endpoint, capabilities).

External dependencies:
- ``openai.AsyncOpenAI``; the SDK client is created lazily on first use and
  reused for the adapter's lifetime.

Error semantics:
- SDK exceptions are converted at this boundary with ``to_provider_error`` so
  the status code (429, 5xx, ...) reaches the client's retry policy.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, ClassVar, Optional

from openai import AsyncOpenAI

from ..adapter import BaseAdapter
from ..constants import DEFAULT_HTTP_TIMEOUT
from ..models import ChatRequest, ChatResponse, StreamChunk
from .profile import OpenAIStyleProfile
from .style_helpers import (
    build_chat_params,
    extract_delta,
    extract_request_id,
    extract_text,
    extract_tool_calls,
    extract_usage,
)


class OpenAIStyleProvider(BaseAdapter):
    """Adapter for any backend described by an :class:`OpenAIStyleProfile`.

    Concrete backends bind a profile as the ``profile`` class attribute; all
    request translation, invocation and streaming lives here.
    """

    profile: ClassVar[OpenAIStyleProfile]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        profile = cls.__dict__.get("profile")
        if profile is not None:
            cls.provider_key = profile.provider_key

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if not self._base_url:
            self._base_url = self.profile.default_base_url
        self._sdk_client: Optional[Any] = None

    def _client(self) -> Any:
        if self._sdk_client is None:
            self._sdk_client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._extra.get("timeout", DEFAULT_HTTP_TIMEOUT),
            )
        return self._sdk_client

    def _params(self, request: ChatRequest, model: str) -> dict:
        return build_chat_params(
            model,
            request,
            self._system_prompt(request),
            include_tools=self.profile.supports_tools,
        )

    async def chat(self, request: ChatRequest) -> ChatResponse:
        model = self._resolve_model(request)
        params = self._params(request, model)
        started = self._clock()
        try:
            resp = await self._client().chat.completions.create(**params)
        except Exception as e:
            self._raise_backend_error(e, model)
        return self.build_response(
            request,
            model=model,
            text=extract_text(resp),
            usage=extract_usage(resp),
            tool_calls=extract_tool_calls(resp) if self.profile.supports_tools else None,
            raw=resp,
            started_at=started,
            request_id=extract_request_id(resp),
        )

    async def chat_stream(self, request: ChatRequest) -> AsyncIterator[StreamChunk]:
        """Stream deltas; the SDK stream is closed on completion or early exit."""
        model = self._resolve_model(request)
        params = self._params(request, model)
        params["stream"] = True
        try:
            stream = await self._client().chat.completions.create(**params)
        except Exception as e:
            self._raise_backend_error(e, model)
        try:
            async for chunk in stream:
                text, fragments = extract_delta(chunk)
                if text or fragments:
                    yield StreamChunk(text=text, tool_calls=fragments)
        except Exception as e:
            self._raise_backend_error(e, model)
        finally:
            await stream.close()
        yield StreamChunk.done()


__all__ = ["OpenAIStyleProvider"]
