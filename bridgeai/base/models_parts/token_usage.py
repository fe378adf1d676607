"""Token accounting DTO."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


def _coerce(value: Any) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        return 0
    return n if n >= 0 else 0


@dataclass(frozen=True)
class TokenUsage:
    """Prompt, completion and total token counts for one call."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @classmethod
    def zero(cls) -> "TokenUsage":
        return cls()

    @classmethod
    def from_counts(cls, prompt: Any, completion: Any, total: Optional[Any] = None) -> "TokenUsage":
        """Build usage from possibly-missing SDK counts.

        Missing or invalid values become ``0``; a missing total is derived as
        ``prompt + completion``.
        """
        p, c = _coerce(prompt), _coerce(completion)
        t = _coerce(total) if total is not None else p + c
        return cls(prompt_tokens=p, completion_tokens=c, total_tokens=t)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


__all__ = ["TokenUsage"]
