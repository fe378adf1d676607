"""Client configuration record.

``BridgeConfig`` is the construction-time option set of
:class:`bridgeai.client.BridgeAIClient`. Values are validated with pydantic;
unknown keys are rejected so typos (``fallback_provider``) fail loudly.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` / ``field_validator``.
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..base.encoding import CompactEncoder
from ..base.models import ResponseEvent
from ..base.resilience import RetryConfig
from ..config.defaults import (
    DEFAULT_PROVIDER,
    DEFAULT_RETRIES,
    DEFAULT_RETRY_FACTOR,
    DEFAULT_RETRY_MIN_TIMEOUT_MS,
)

ResponseObserver = Callable[[ResponseEvent], Union[None, Awaitable[None]]]


class RetryOptions(BaseModel):
    """Backoff parameters: ``retries`` extra attempts, delays ``min_timeout * factor**n`` ms."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    retries: int = Field(default=DEFAULT_RETRIES, ge=0)
    factor: float = Field(default=DEFAULT_RETRY_FACTOR, gt=0)
    min_timeout: float = Field(default=DEFAULT_RETRY_MIN_TIMEOUT_MS, ge=0)

    def to_retry_config(self, attempt_logger=None) -> RetryConfig:
        return RetryConfig(
            retries=self.retries,
            factor=self.factor,
            min_timeout_ms=self.min_timeout,
            attempt_logger=attempt_logger,
        )


class BridgeConfig(BaseModel):
    """Options for one client instance.

    Attributes
    ----------
    provider:
        Primary backend identifier (``openai``, ``gemini``, ``claude``,
        ``perplexity``, ``deepseek``, ``mock`` or a registered name).
    api_key:
        Explicit credential; when omitted it is resolved from configuration
        and the provider's environment variable.
    base_url:
        Endpoint override for the primary backend.
    pre_instructions:
        System prompt used when a request carries none.
    model:
        Default model (alias names are resolved through ``model_aliases``).
    max_tokens, temperature:
        Sampling defaults applied to requests that leave them unset.
    fallback_providers:
        Backends tried in order, once each, after the primary failed.
    retry:
        Backoff policy for the primary backend.
    model_aliases:
        Friendly name to concrete model id table.
    on_response:
        Observer called with a :class:`ResponseEvent` after each successful
        ``chat``; coroutine functions are awaited.
    compact_encoder:
        Encoder for structured content when a request asks for compact
        encoding; defaults to TOON.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    provider: str = DEFAULT_PROVIDER
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    pre_instructions: Optional[str] = None
    model: Optional[str] = None
    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = None
    fallback_providers: List[str] = Field(default_factory=list)
    retry: RetryOptions = Field(default_factory=RetryOptions)
    model_aliases: Dict[str, str] = Field(default_factory=dict)
    on_response: Optional[ResponseObserver] = None
    compact_encoder: Optional[CompactEncoder] = None

    @field_validator("provider")
    @classmethod
    def _normalize_provider(cls, v: str) -> str:
        v = (v or "").strip().lower()
        if not v:
            raise ValueError("provider must be non-empty")
        return v

    @field_validator("fallback_providers")
    @classmethod
    def _normalize_fallbacks(cls, v: List[str]) -> List[str]:
        return [p.strip().lower() for p in v if p and p.strip()]

    def resolve_model(self, name: Optional[str]) -> Optional[str]:
        """Substitute an alias; unknown names pass through unchanged."""
        if name is None:
            return None
        return self.model_aliases.get(name, name)


__all__ = ["BridgeConfig", "RetryOptions", "ResponseObserver"]
