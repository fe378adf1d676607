"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `bridgeai.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import (
    RETRYABLE_STATUS_CODES,
    ConfigurationError,
    ProviderError,
    TerminalBackendError,
    TransientBackendError,
    UnknownProviderError,
)
from .classification import classify_exception, extract_status, is_retryable, to_provider_error

__all__ = [
    "ErrorCode",
    "RETRYABLE_STATUS_CODES",
    "ProviderError",
    "ConfigurationError",
    "UnknownProviderError",
    "TransientBackendError",
    "TerminalBackendError",
    "classify_exception",
    "extract_status",
    "is_retryable",
    "to_provider_error",
]
