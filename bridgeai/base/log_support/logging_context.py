"""Structured logging context carried through one client call.

:class:`LogContext` holds the fields shared by every event of a call (provider,
model, prompt hash) so call sites only pass what is specific to the event.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Common fields merged into each structured log event."""

    provider: Optional[str] = None
    model: Optional[str] = None
    request_hash: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def with_provider(self, provider: str, model: Optional[str] = None) -> "LogContext":
        return replace(self, provider=provider, model=model, extra=dict(self.extra))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
