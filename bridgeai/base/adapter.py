"""Shared construction and response normalization for backend adapters.

Every concrete adapter receives the same initialization fields (see
``AdapterParams``) and produces ``ChatResponse`` objects of the same shape:
text, parsed JSON when requested, zero-filled usage, estimated cost and tool
calls. ``BaseAdapter`` keeps that logic in one place so adapters only
translate requests into SDK calls and SDK replies back into plain values.
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, NoReturn, Optional

from ..config import get_provider_config
from ..config.env import get_env_var_name
from .constants import MISSING_API_KEY_ERROR
from .errors import ConfigurationError, ErrorCode, TerminalBackendError, to_provider_error
from .logging import get_logger
from .models import ChatRequest, ChatResponse, ProviderMetadata, TokenUsage, ToolCall
from .utils import calculate_cost, parse_json_reply


class BaseAdapter:
    """Base class for adapters implementing ``LLMProvider``.

    Subclasses set ``provider_key`` and implement ``chat`` (and optionally
    ``chat_stream``). Model and base URL fall back to the provider section of
    the layered configuration when not passed explicitly.
    """

    provider_key: str = ""
    requires_api_key: bool = True

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        system_message: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        cfg = get_provider_config(self.provider_key)
        self._api_key = api_key
        self._model: str = model or cfg.get("model") or ""
        self._base_url = base_url or cfg.get("base_url")
        self._system_message = system_message if system_message is not None else cfg.get("system_message")
        self._extra: Dict[str, Any] = dict(extra or {})
        self._logger = get_logger(f"bridgeai.{self.provider_key}")
        if self.requires_api_key and not self._api_key:
            env_var = get_env_var_name(self.provider_key) or f"{self.provider_key.upper()}_API_KEY"
            raise ConfigurationError(
                MISSING_API_KEY_ERROR.format(provider=self.provider_key, env_var=env_var),
                provider=self.provider_key,
            )

    @property
    def provider_name(self) -> str:
        return self.provider_key

    def default_model(self) -> Optional[str]:
        return self._model or None

    def _resolve_model(self, request: ChatRequest) -> str:
        return request.model or self._model

    def _system_prompt(self, request: ChatRequest) -> Optional[str]:
        """Request-level system prompt wins over the adapter's pre-instructions."""
        return request.system_prompt or self._system_message or None

    def _raise_backend_error(self, exc: BaseException, model: Optional[str]) -> NoReturn:
        """Re-raise an SDK exception as a classified ``ProviderError``.

        Must be called from an ``except`` block. ``ProviderError`` instances
        are re-raised unchanged; anything else is converted and chained.
        """
        err = to_provider_error(exc, self.provider_key, model)
        if err is exc:
            raise exc
        raise err from exc

    @staticmethod
    def _clock() -> float:
        return time.perf_counter()

    def build_response(
        self,
        request: ChatRequest,
        *,
        model: str,
        text: Optional[str],
        usage: Optional[TokenUsage] = None,
        tool_calls: Optional[List[ToolCall]] = None,
        raw: Any = None,
        started_at: Optional[float] = None,
        request_id: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> ChatResponse:
        """Normalize extracted reply values into a ``ChatResponse``.

        Raises:
            TerminalBackendError: JSON was requested and the reply does not parse.
        """
        text = text or ""
        usage = usage or TokenUsage.zero()
        parsed: Any = None
        if request.wants_json:
            try:
                parsed = parse_json_reply(text)
            except ValueError as e:
                raise TerminalBackendError(
                    code=ErrorCode.MALFORMED_RESPONSE,
                    message=f"reply is not valid JSON: {e}",
                    provider=self.provider_key,
                    model=model,
                    raw=e,
                ) from e
        latency_ms = (self._clock() - started_at) * 1000.0 if started_at is not None else None
        meta = ProviderMetadata(
            provider_name=self.provider_key,
            model_name=model,
            request_id=request_id,
            latency_ms=latency_ms,
            extra=dict(extra or {}),
        )
        return ChatResponse(
            text=text,
            meta=meta,
            json=parsed,
            usage=usage,
            cost=calculate_cost(self.provider_key, model, usage.prompt_tokens, usage.completion_tokens),
            tool_calls=tool_calls,
            raw=raw,
        )


__all__ = ["BaseAdapter"]
