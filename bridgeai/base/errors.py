"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``bridgeai.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import (
    RETRYABLE_STATUS_CODES,
    ConfigurationError,
    ProviderError,
    TerminalBackendError,
    TransientBackendError,
    UnknownProviderError,
)
from .errors_parts.classification import (
    classify_exception,
    extract_status,
    is_retryable,
    to_provider_error,
)

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
