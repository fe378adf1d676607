"""Retry and fallback primitives used by the client.

The ``retry`` decorator lives in :mod:`bridgeai.base.resilience.retry`.
"""

from .retry import DEFAULT_RETRY_CONFIG, RetryConfig, run_with_retry
from .fallback import FallbackResult, run_fallback_chain

__all__ = [
    "DEFAULT_RETRY_CONFIG",
    "RetryConfig",
    "run_with_retry",
    "FallbackResult",
    "run_fallback_chain",
]
