"""
Error classification helpers used at the adapter boundary.

Implements HTTP status extraction, status-to-code mapping, message-based
heuristics for SDK errors without a status, and the conversion of arbitrary
SDK exceptions into :class:`TransientBackendError` or
:class:`TerminalBackendError`.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

from .error_code import ErrorCode
from .provider_error import (
    RETRYABLE_STATUS_CODES,
    ProviderError,
    TerminalBackendError,
    TransientBackendError,
)


def extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from a provider exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code`` (openai, anthropic)
    - ``exc.status``
    - ``exc.code`` (google api_core)
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status", "code"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and not isinstance(val, bool) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


_MESSAGE_PATTERNS = (
    (ErrorCode.TIMEOUT, ("timeout", "timed out")),
    (ErrorCode.AUTH, ("api key", "unauthorized", "forbidden", "authentication")),
    (ErrorCode.UNSUPPORTED, ("unsupported", "not supported")),
    (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
    (ErrorCode.UNAVAILABLE, ("unavailable", "temporarily down")),
    (ErrorCode.VALIDATION, ("validation", "invalid", "malformed")),
    (ErrorCode.SERVER_ERROR, ("server error", "internal error")),
)


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:
    """Substring heuristic mapping for exceptions that carry no status."""
    if "rate" in msg and "limit" in msg:
        return ErrorCode.RATE_LIMIT
    for code, patterns in _MESSAGE_PATTERNS:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Timeout exceptions (sync/async).
        3. HTTP status mapping.
        4. Substring heuristics.
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    status = extract_status(exc)
    if status is not None and status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


def is_retryable(exc: BaseException) -> bool:
    """Return True when ``exc`` carries a status in ``RETRYABLE_STATUS_CODES``."""
    return extract_status(exc) in RETRYABLE_STATUS_CODES


def to_provider_error(exc: BaseException, provider: str, model: Optional[str] = None) -> ProviderError:
    """Convert an SDK exception into the structured error taxonomy.

    ``ProviderError`` instances pass through unchanged. Anything else becomes a
    :class:`TransientBackendError` when its status is retryable and a
    :class:`TerminalBackendError` otherwise. The original exception is kept in
    ``raw``; callers should ``raise ... from exc`` to preserve the chain.
    """
    if isinstance(exc, ProviderError):
        return exc
    status = extract_status(exc)
    kind = TransientBackendError if status in RETRYABLE_STATUS_CODES else TerminalBackendError
    return kind(
        code=classify_exception(exc),
        message=str(exc) or exc.__class__.__name__,
        provider=provider,
        model=model,
        status=status,
        raw=exc if isinstance(exc, Exception) else None,
    )


__all__ = [
    "classify_exception",
    "extract_status",
    "is_retryable",
    "to_provider_error",
    "_HTTP_STATUS_MAP",
]
