"""Post-processing of a successful ``chat`` reply.

Runs once per successful call, on the primary or the fallback path, in this
order: the prompt hash is assigned, the observer is invoked and awaited, then
the exchange is committed to memory (and pruned). An observer failure leaves
memory untouched. Streaming replies never pass through here.
"""
from __future__ import annotations

import inspect
import logging

from ..base.log_support import LogContext
from ..base.logging import log_event, normalized_log_event
from ..base.memory import ConversationMemory
from ..base.models import ChatRequest, ChatResponse, ResponseEvent
from ..base.utils import generate_hash
from .config import ResponseObserver


def prompt_digest(request: ChatRequest) -> str:
    """Digest of the caller's primary prompt text (structured prompts as canonical JSON)."""
    return generate_hash(request.prompt_text())


async def finalize_response(
    response: ChatResponse,
    *,
    request: ChatRequest,
    working: ChatRequest,
    memory: ConversationMemory,
    observer: ResponseObserver | None,
    logger: logging.Logger,
    ctx: LogContext,
) -> ChatResponse:
    """Attach the hash, notify the observer and update memory.

    ``request`` is the caller's original request (hashed); ``working`` is the
    preprocessed request whose prompt text is stored in memory.

    Raises
    ------
    Exception
        Whatever the observer raises, after an ``observer.error`` event.
        The exchange is not stored in that case.
    """
    digest = prompt_digest(request)
    response.assign_hash(digest)

    if observer is not None:
        event = ResponseEvent(prompt=request.prompt_text(), response=response, hash=digest)
        try:
            result = observer(event)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            log_event(logger, "observer.error", ctx, level=logging.ERROR, error=str(e), error_type=type(e).__name__)
            raise

    dropped = memory.append_exchange(working.prompt_text(), response.text, request.memory)
    if dropped:
        normalized_log_event(
            logger,
            "memory.prune",
            ctx,
            phase="postprocess",
            dropped=dropped,
            retained=len(memory),
            limit=request.memory.limit,
        )

    return response


__all__ = ["finalize_response", "prompt_digest"]
