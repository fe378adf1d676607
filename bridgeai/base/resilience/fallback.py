"""Ordered provider fallback for a failed primary call.

Purpose
-------
When the primary backend has failed (after its own retries), each configured
fallback provider is tried once, in order, with a freshly built adapter. The
first success wins. Failures along the chain are logged and absorbed; when
the chain is exhausted the caller sees the primary error, never an error
from a fallback provider.

Fallback calls are not retried and the chain is strictly sequential.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from ..errors import classify_exception
from ..interfaces import LLMProvider
from ..log_support import LogContext
from ..logging import normalized_log_event
from ..models import ChatRequest, ChatResponse

AdapterBuilder = Callable[[str], LLMProvider]


@dataclass(frozen=True)
class FallbackResult:
    """Reply produced by a fallback provider."""

    provider: str
    response: ChatResponse


async def run_fallback_chain(
    primary_error: BaseException,
    providers: Sequence[str],
    build_adapter: AdapterBuilder,
    request: ChatRequest,
    *,
    logger: logging.Logger,
    ctx: LogContext | None = None,
) -> FallbackResult:
    """Try ``providers`` in order after the primary failed with ``primary_error``.

    Parameters
    ----------
    primary_error:
        Error raised by the primary call; re-raised unchanged when every
        fallback fails or ``providers`` is empty.
    providers:
        Provider identifiers, tried left to right.
    build_adapter:
        Builds a fresh adapter for an identifier (credential resolution
        included). Construction errors count as a failed attempt.
    request:
        The already-preprocessed working request, sent as-is.

    Returns
    -------
    FallbackResult
        The first successful provider and its response.
    """
    base_ctx = ctx or LogContext()
    for position, name in enumerate(providers, start=1):
        attempt_ctx = base_ctx.with_provider(name)
        try:
            adapter = build_adapter(name)
            response = await adapter.chat(request)
        except Exception as e:
            normalized_log_event(
                logger,
                "fallback.attempt",
                attempt_ctx,
                phase="fallback",
                attempt=position,
                error_code=classify_exception(e).value,
                level=logging.WARNING,
                error=str(e),
                ok=False,
            )
            continue
        normalized_log_event(
            logger,
            "fallback.success",
            attempt_ctx,
            phase="fallback",
            attempt=position,
            tokens=response.usage,
            ok=True,
        )
        return FallbackResult(provider=name, response=response)

    normalized_log_event(
        logger,
        "fallback.exhausted",
        base_ctx,
        phase="fallback",
        attempt=len(providers),
        error_code=classify_exception(primary_error).value,
        level=logging.ERROR,
    )
    raise primary_error


__all__ = ["FallbackResult", "run_fallback_chain", "AdapterBuilder"]
