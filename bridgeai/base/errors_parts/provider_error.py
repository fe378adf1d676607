"""
Structured error types raised by adapters, the registry, and the dispatcher.

Every failure that crosses the adapter boundary is expressed as a
:class:`ProviderError` subclass carrying a normalized :class:`ErrorCode` and,
when the backend reported one, the HTTP-style ``status``. The retry policy
reads ``status`` only; the subclass tells callers how the failure was
classified:

- :class:`ConfigurationError`: bad construction input (missing credential,
  unsupported provider, invalid memory directive). Never retried.
- :class:`TransientBackendError`: retryable status (429/500/502/503/504).
- :class:`TerminalBackendError`: any other backend failure, including
  malformed replies.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated (e.g., ``"openai"``).
        model: Optional model name associated with the failure.
        status: HTTP-style status code reported by the backend, if any.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    status: Optional[int] = None
    raw: Optional[Exception] = None

    @property
    def retryable(self) -> bool:
        """True when the carried status is one the retry policy retries."""
        return self.status in RETRYABLE_STATUS_CODES

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, status and message."""
        status = f" [{self.status}]" if self.status is not None else ""
        return f"{self.provider}:{self.model or '-'} {self.code.value}{status}: {self.message}"


class ConfigurationError(ProviderError):
    """Raised for unusable configuration: missing credential or unknown provider."""

    def __init__(self, message: str, provider: str = "unknown", *, model: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.CONFIGURATION, message=message, provider=provider, model=model)


class UnknownProviderError(ConfigurationError):
    """Raised when a provider identifier is not registered or cannot be built."""


class TransientBackendError(ProviderError):
    """Backend failure carrying a retryable status code."""


class TerminalBackendError(ProviderError):
    """Backend failure that must not be retried (fallback may still apply)."""


__all__ = [
    "RETRYABLE_STATUS_CODES",
    "ProviderError",
    "ConfigurationError",
    "UnknownProviderError",
    "TransientBackendError",
    "TerminalBackendError",
]
