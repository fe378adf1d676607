from __future__ import annotations

import asyncio
import functools
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterator, Protocol, TypeVar

from ..errors import is_retryable

T = TypeVar("T")

# patched in tests to avoid real waits
_sleep = asyncio.sleep


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        error: BaseException | None,
    ) -> None: ...


@dataclass(frozen=True)
class RetryConfig:
    """Exponential backoff policy.

    ``retries`` extra attempts follow the first one. The wait before retry
    ``n`` (1-indexed) is ``min_timeout_ms * factor ** (n - 1)`` milliseconds.
    Only errors whose status is in ``RETRYABLE_STATUS_CODES`` are retried.
    """

    retries: int = 2
    factor: float = 2.0
    min_timeout_ms: float = 1000.0
    attempt_logger: AttemptLogger | None = None

    def __post_init__(self) -> None:
        if self.retries < 0:
            raise ValueError("retries must be >= 0")
        if self.factor <= 0:
            raise ValueError("factor must be > 0")
        if self.min_timeout_ms < 0:
            raise ValueError("min_timeout_ms must be >= 0")

    @property
    def max_attempts(self) -> int:
        return self.retries + 1

    def delay_for(self, attempt: int) -> float:
        """Milliseconds to wait before retry ``attempt`` (1-indexed)."""
        if attempt < 1:
            raise ValueError("attempt must be >= 1")
        return self.min_timeout_ms * self.factor ** (attempt - 1)

    def delays(self) -> Iterator[float]:
        """Yield every retry delay in seconds."""
        for attempt in range(1, self.retries + 1):
            yield self.delay_for(attempt) / 1000.0


DEFAULT_RETRY_CONFIG = RetryConfig()


async def run_with_retry(call: Callable[[], Awaitable[T]], config: RetryConfig = DEFAULT_RETRY_CONFIG) -> T:
    """Await ``call()`` until it succeeds or the policy gives up.

    Attempts are strictly sequential and waits use ``asyncio.sleep``. A
    non-retryable error, or the error of the final attempt, is re-raised
    unchanged.
    """
    schedule = list(config.delays()) + [None]  # final attempt has delay None
    for attempt, delay in enumerate(schedule, start=1):
        try:
            result = await call()
        except Exception as e:
            if config.attempt_logger:
                config.attempt_logger(
                    attempt=attempt,
                    max_attempts=config.max_attempts,
                    delay=delay,
                    error=e,
                )
            if delay is None or not is_retryable(e):
                raise
            await _sleep(delay)
            continue
        if config.attempt_logger:
            config.attempt_logger(
                attempt=attempt,
                max_attempts=config.max_attempts,
                delay=None,
                error=None,
            )
        return result
    raise RuntimeError("retry: schedule exhausted without a result")  # pragma: no cover


def retry(config: RetryConfig = DEFAULT_RETRY_CONFIG):
    """Return a decorator applying the retry policy to a coroutine function."""

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            return await run_with_retry(lambda: func(*args, **kwargs), config)

        return wrapper

    return decorator


__all__ = [
    "AttemptLogger",
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
    "run_with_retry",
    "retry",
]
