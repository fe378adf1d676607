"""BridgeAI client: the single entry point for chat requests.

Purpose
-------
``BridgeAIClient`` owns the configuration (primary provider, credential,
default model, pre-instructions, retry policy, fallback list, alias table,
observer) and the conversation memory of one logical session.

``chat``:
    preprocess -> retry(primary adapter) -> fallback chain on failure ->
    post-process (hash, observer, memory) -> ``ChatResponse``.
    When every fallback fails the caller sees the primary error unchanged.

``chat_stream``:
    preprocess -> primary adapter stream. No retry, no fallback, no hash or
    cost; exactly one terminal chunk; the adapter stream is closed when the
    consumer stops early.

Concurrency: many ``chat`` calls may run concurrently on one client; memory
mutations are serialized by :class:`ConversationMemory`. Each call is a
single sequential task.
"""
from __future__ import annotations

import contextlib
import dataclasses
import logging
import time
from typing import Any, AsyncIterator, Optional, Tuple

from ..base.constants import MISSING_API_KEY_ERROR
from ..base.dto.adapter_params import AdapterParams
from ..base.encoding import CompactEncoder, default_compact_encoder
from ..base.errors import ConfigurationError, classify_exception, is_retryable
from ..base.factory import ProviderFactory
from ..base.interfaces import HasDefaultModel, LLMProvider, SupportsStreaming
from ..base.log_support import LogContext
from ..base.logging import get_logger, log_event, normalized_log_event
from ..base.memory import ConversationMemory
from ..base.models import ChatRequest, ChatResponse, Message, StreamChunk
from ..base.resilience import RetryConfig, run_fallback_chain, run_with_retry
from ..config import get_provider_config
from ..config.env import get_env_var_name
from .commands import Command
from .config import BridgeConfig
from .postprocess import finalize_response, prompt_digest
from .preprocess import coerce_request, prepare_request


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000.0, 3)


class BridgeAIClient:
    """Unified async chat client over multiple LLM backends.

    Parameters
    ----------
    config:
        A :class:`BridgeConfig`. Keyword ``options`` build one instead, or
        override fields of ``config`` when both are given.

    Raises
    ------
    ConfigurationError
        Unknown provider, or no credential resolvable for a provider that
        requires one.
    """

    def __init__(self, config: Optional[BridgeConfig] = None, **options: Any) -> None:
        if config is None:
            config = BridgeConfig(**options)
        elif options:
            config = BridgeConfig(**{**config.model_dump(), **options})
        self._config = config
        self._logger = get_logger("bridgeai.client")
        self._memory = ConversationMemory()
        self._encoder: CompactEncoder = config.compact_encoder or default_compact_encoder
        self._retry: RetryConfig = config.retry.to_retry_config()
        self._model = config.resolve_model(config.model)
        self._adapter = self._build_adapter(
            config.provider,
            api_key=config.api_key,
            base_url=config.base_url,
            model=self._model,
        )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    def _resolve_api_key(self, provider: str, explicit: Optional[str]) -> Optional[str]:
        """Explicit credential first, then configuration and environment."""
        requires = ProviderFactory.requires_api_key(provider)
        key = explicit or get_provider_config(provider).get("api_key")
        if requires and not key:
            env_var = get_env_var_name(provider) or f"{provider.upper()}_API_KEY"
            raise ConfigurationError(MISSING_API_KEY_ERROR.format(provider=provider, env_var=env_var), provider=provider)
        return key

    def _build_adapter(
        self,
        provider: str,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
    ) -> LLMProvider:
        params = AdapterParams(
            model=model,
            api_key=self._resolve_api_key(provider, api_key),
            base_url=base_url,
            system_message=self._config.pre_instructions,
        )
        return ProviderFactory.create(provider, params=params)

    def _build_fallback_adapter(self, provider: str) -> LLMProvider:
        # fallbacks resolve their own credential and default model
        return self._build_adapter(provider)

    # ------------------------------------------------------------------
    # Public surface
    # ------------------------------------------------------------------
    @property
    def config(self) -> BridgeConfig:
        return self._config

    @property
    def provider_name(self) -> str:
        return self._adapter.provider_name

    @property
    def model(self) -> Optional[str]:
        """Default model of the primary backend after alias resolution."""
        if self._model:
            return self._model
        if isinstance(self._adapter, HasDefaultModel):
            return self._adapter.default_model()
        return None

    @property
    def memory(self) -> Tuple[Message, ...]:
        """Snapshot of the stored conversation, oldest first."""
        return self._memory.snapshot()

    def clear_memory(self) -> None:
        self._memory.clear()

    async def send(self, command: Command[Any]) -> Any:
        """Execute a command object (e.g. :class:`ChatCommand`) against this client."""
        return await command.execute(self)

    def _context(self, request: ChatRequest) -> LogContext:
        return LogContext(
            provider=self.provider_name,
            model=self._config.resolve_model(request.model) or self.model,
            request_hash=prompt_digest(request),
        )

    def _log_chat_error(self, ctx: LogContext, error: BaseException, attempts: int, started: float) -> None:
        log_event(
            self._logger,
            "chat.error",
            ctx,
            level=logging.ERROR,
            error=str(error),
            error_code=classify_exception(error).value,
            attempts=attempts,
            latency_ms=_elapsed_ms(started),
        )

    async def chat(self, request: ChatRequest | Any = None, **kwargs: Any) -> ChatResponse:
        """Send one request through retry, fallback and post-processing.

        Accepts a :class:`ChatRequest`, or a prompt plus request fields as
        keywords (``client.chat("hi", memory=True)``).

        Raises
        ------
        ConfigurationError
            Invalid request options (e.g. compact encoding unavailable), or a
            configuration failure raised by the primary adapter; never retried
            and never handed to the fallback chain.
        ProviderError
            The primary backend's error when the primary and every fallback
            failed.
        """
        request = coerce_request(request, **kwargs)
        ctx = self._context(request)
        working = prepare_request(request, self._config, self._memory.snapshot(), self._encoder)
        started = time.perf_counter()
        log_event(
            self._logger,
            "chat.start",
            ctx,
            memory=request.memory.mode.value,
            turns=len(working.messages),
            fallbacks=len(self._config.fallback_providers),
        )

        attempts = 0

        def attempt_logger(*, attempt: int, max_attempts: int, delay: float | None, error: BaseException | None) -> None:
            nonlocal attempts
            attempts = attempt
            if error is None:
                return
            normalized_log_event(
                self._logger,
                "retry.attempt",
                ctx,
                phase="retry",
                attempt=attempt,
                error_code=classify_exception(error).value,
                level=logging.WARNING,
                max_attempts=max_attempts,
                will_retry=delay is not None and is_retryable(error),
                delay_ms=delay * 1000.0 if delay is not None else None,
                error=str(error),
            )

        policy = dataclasses.replace(self._retry, attempt_logger=attempt_logger)
        fallback_used = False
        try:
            response = await run_with_retry(lambda: self._adapter.chat(working), policy)
        except ConfigurationError as e:
            self._log_chat_error(ctx, e, attempts, started)
            raise
        except Exception as primary_error:
            try:
                result = await run_fallback_chain(
                    primary_error,
                    self._config.fallback_providers,
                    self._build_fallback_adapter,
                    working.evolve(model=None),
                    logger=self._logger,
                    ctx=ctx,
                )
            except Exception as e:
                self._log_chat_error(ctx, e, attempts, started)
                raise
            response = result.response
            fallback_used = True

        response.meta.attempts = attempts
        response.meta.fallback_used = fallback_used
        response = await finalize_response(
            response,
            request=request,
            working=working,
            memory=self._memory,
            observer=self._config.on_response,
            logger=self._logger,
            ctx=ctx,
        )
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx.with_provider(response.provider, response.meta.model_name),
            phase="finalize",
            attempt=attempts,
            tokens=response.usage,
            cost=response.cost,
            fallback_used=fallback_used,
            latency_ms=_elapsed_ms(started),
        )
        return response

    async def chat_stream(self, request: ChatRequest | Any = None, **kwargs: Any) -> AsyncIterator[StreamChunk]:
        """Stream the primary backend's reply as :class:`StreamChunk` values.

        The sequence is finite and ends with exactly one chunk whose
        ``is_done`` is True. Stopping iteration early (``break`` or
        ``aclose()``) closes the adapter stream; nothing is produced after
        that.

        Raises
        ------
        ConfigurationError
            The primary backend has no streaming capability.
        ProviderError
            Backend failures, immediately (no retry, no fallback).
        """
        request = coerce_request(request, **kwargs)
        if not isinstance(self._adapter, SupportsStreaming):
            raise ConfigurationError(
                f"provider '{self.provider_name}' does not support streaming", provider=self.provider_name
            )
        ctx = self._context(request)
        working = prepare_request(request, self._config, self._memory.snapshot(), self._encoder)
        log_event(self._logger, "stream.start", ctx, turns=len(working.messages))

        started = time.perf_counter()
        emitted = 0
        completed = False
        try:
            source = self._adapter.chat_stream(working)
            closer = contextlib.aclosing(source) if hasattr(source, "aclose") else contextlib.nullcontext(source)
            async with closer as stream:
                async for chunk in stream:
                    emitted += 1
                    completed = chunk.is_done
                    yield chunk
                    if completed:
                        break
            if not completed:
                emitted += 1
                completed = True
                yield StreamChunk.done()
        except Exception as e:
            log_event(
                self._logger,
                "stream.error",
                ctx,
                level=logging.ERROR,
                error=str(e),
                error_code=classify_exception(e).value,
            )
            raise
        finally:
            log_event(
                self._logger,
                "stream.end",
                ctx,
                chunks=emitted,
                completed=completed,
                latency_ms=_elapsed_ms(started),
            )


__all__ = ["BridgeAIClient"]
