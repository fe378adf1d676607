"""GeminiProvider adapter.

Uses google-generativeai's ``GenerativeModel`` with a ``ChatSession`` so prior
turns travel as history; the prompt is sent with ``send_message_async``. JSON
requests set ``response_mime_type``; function calls are reported as tool
calls (on the terminal chunk when streaming).
"""

from __future__ import annotations

import contextlib
from typing import Any, AsyncIterator, Dict, List

import google.generativeai as genai

from ..base.adapter import BaseAdapter
from ..base.models import ChatRequest, ChatResponse, StreamChunk
from . import helpers


class GeminiProvider(BaseAdapter):
    """Adapter for Google Gemini models (default ``gemini-1.5-flash``)."""

    provider_key = "gemini"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        genai.configure(api_key=self._api_key)

    def _start_chat(self, model: str, request: ChatRequest):
        system = self._system_prompt(request)
        gen_model = genai.GenerativeModel(
            model_name=model,
            system_instruction=system or None,
            tools=helpers.tools(request),
            generation_config=helpers.generation_config(request),
        )
        return gen_model.start_chat(history=helpers.history(request))

    async def chat(self, request: ChatRequest) -> ChatResponse:
        model = self._resolve_model(request)
        started = self._clock()
        try:
            session = self._start_chat(model, request)
            resp = await session.send_message_async(helpers.message_content(request))
        except Exception as e:
            self._raise_backend_error(e, model)
        return self.build_response(
            request,
            model=model,
            text=helpers.extract_text(resp),
            usage=helpers.extract_usage(resp),
            tool_calls=helpers.extract_function_calls(resp),
            raw=resp,
            started_at=started,
        )

    async def chat_stream(self, request: ChatRequest) -> AsyncIterator[StreamChunk]:
        model = self._resolve_model(request)
        calls: List[Dict[str, Any]] = []
        try:
            session = self._start_chat(model, request)
            resp = await session.send_message_async(helpers.message_content(request), stream=True)
            # the SDK iterator is released on completion or early exit
            async with contextlib.aclosing(aiter(resp)) as chunks:
                async for chunk in chunks:
                    calls.extend(c.to_dict() for c in helpers.extract_function_calls(chunk))
                    text = helpers.extract_text(chunk)
                    if text:
                        yield StreamChunk(text=text)
        except Exception as e:
            self._raise_backend_error(e, model)
        yield StreamChunk.done(tool_calls=calls)


__all__ = ["GeminiProvider"]
