"""
Per-request conversation memory directive.

The client surface accepts ``memory=True``, ``memory=False`` or
``memory={"strategy": "sliding-window", "limit": L}``. These are folded into a
tagged value so downstream code never inspects union-shaped options.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from ..errors import ConfigurationError

SLIDING_WINDOW = "sliding-window"


class MemoryMode(str, Enum):
    DISABLED = "disabled"
    ENABLED = "enabled"
    WINDOWED = "windowed"


@dataclass(frozen=True)
class MemoryDirective:
    """Memory behaviour for one request.

    Attributes:
        mode: Disabled, enabled (unbounded) or windowed.
        limit: Number of user/assistant pairs retained when windowed.
    """

    mode: MemoryMode = MemoryMode.DISABLED
    limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.mode is MemoryMode.WINDOWED:
            if not isinstance(self.limit, int) or isinstance(self.limit, bool) or self.limit < 1:
                raise ConfigurationError(f"sliding-window memory needs a positive integer limit, got {self.limit!r}")
        elif self.limit is not None:
            raise ConfigurationError("memory limit only applies to the sliding-window strategy")

    @property
    def enabled(self) -> bool:
        return self.mode is not MemoryMode.DISABLED

    @classmethod
    def disabled(cls) -> "MemoryDirective":
        return cls(MemoryMode.DISABLED)

    @classmethod
    def unbounded(cls) -> "MemoryDirective":
        return cls(MemoryMode.ENABLED)

    @classmethod
    def windowed(cls, limit: int) -> "MemoryDirective":
        return cls(MemoryMode.WINDOWED, limit)

    @classmethod
    def coerce(cls, value: Any) -> "MemoryDirective":
        """Fold ``None``/bool/mapping inputs into a directive.

        Raises:
            ConfigurationError: Unknown strategy or invalid limit.
        """
        if isinstance(value, MemoryDirective):
            return value
        if value is None or value is False:
            return cls.disabled()
        if value is True:
            return cls.unbounded()
        if isinstance(value, Mapping):
            strategy = value.get("strategy", SLIDING_WINDOW)
            if strategy != SLIDING_WINDOW:
                raise ConfigurationError(f"unsupported memory strategy: {strategy!r}")
            return cls.windowed(value.get("limit"))
        raise ConfigurationError(f"unsupported memory directive: {value!r}")


__all__ = ["MemoryDirective", "MemoryMode", "SLIDING_WINDOW"]
