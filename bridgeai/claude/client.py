"""ClaudeProvider adapter.

Implements the Anthropic integration on ``anthropic.AsyncAnthropic``:
``messages.create`` for single-shot chat and ``messages.stream`` for
streaming. Tool calls are only complete once the stream ends, so they are
reported on the terminal chunk.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Optional

from anthropic import AsyncAnthropic

from ..base.adapter import BaseAdapter
from ..base.constants import DEFAULT_HTTP_TIMEOUT
from ..base.models import ChatRequest, ChatResponse, StreamChunk
from .helpers import build_params, extract_text, extract_tool_calls, extract_usage


class ClaudeProvider(BaseAdapter):
    """Adapter for Anthropic's Claude models (default ``claude-3-5-sonnet-20240620``)."""

    provider_key = "claude"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._sdk_client: Optional[Any] = None

    def _client(self) -> Any:
        if self._sdk_client is None:
            self._sdk_client = AsyncAnthropic(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._extra.get("timeout", DEFAULT_HTTP_TIMEOUT),
            )
        return self._sdk_client

    async def chat(self, request: ChatRequest) -> ChatResponse:
        model = self._resolve_model(request)
        params = build_params(model, request, self._system_prompt(request))
        started = self._clock()
        try:
            resp = await self._client().messages.create(**params)
        except Exception as e:
            self._raise_backend_error(e, model)
        return self.build_response(
            request,
            model=model,
            text=extract_text(resp),
            usage=extract_usage(resp),
            tool_calls=extract_tool_calls(resp),
            raw=resp,
            started_at=started,
            request_id=getattr(resp, "id", None),
            extra={"stop_reason": getattr(resp, "stop_reason", None)},
        )

    async def chat_stream(self, request: ChatRequest) -> AsyncIterator[StreamChunk]:
        model = self._resolve_model(request)
        params = build_params(model, request, self._system_prompt(request))
        try:
            async with self._client().messages.stream(**params) as stream:
                async for text in stream.text_stream:
                    if text:
                        yield StreamChunk(text=text)
                final = await stream.get_final_message()
        except Exception as e:
            self._raise_backend_error(e, model)
        calls = [t.to_dict() for t in extract_tool_calls(final)]
        yield StreamChunk.done(tool_calls=calls)


__all__ = ["ClaudeProvider"]
