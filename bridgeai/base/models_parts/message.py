"""
Message DTO used across adapters and conversation memory.

Defines the `Message` dataclass and the `Role` literal representing the sender
role. Content may be plain text or any structured (JSON-serializable) value;
the dispatcher renders or compact-encodes structured content before it reaches
an adapter.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping

# Message roles accepted in prior turns.
Role = Literal["system", "user", "assistant"]

_ROLES = ("system", "user", "assistant")


def render_content(value: Any) -> str:
    """Return ``value`` as text: strings unchanged, anything else as canonical JSON.

    Canonical JSON uses sorted keys and compact separators so that equal
    values always render to the same string.
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True, ensure_ascii=False, separators=(",", ":"), default=str)


@dataclass(frozen=True)
class Message:
    """A single conversation turn.

    Attributes:
        role: ``"system"``, ``"user"`` or ``"assistant"``.
        content: Plain text or a structured value.

    Methods:
        is_structured: Returns True when content is not a string.
        text: Content rendered as text (see :func:`render_content`).
        from_mapping: Build a message from ``{"role": ..., "content": ...}``.
    """

    role: Role
    content: Any

    def __post_init__(self) -> None:
        if self.role not in _ROLES:
            raise ValueError(f"unsupported message role: {self.role!r}")

    def is_structured(self) -> bool:
        """Return True if the message content is not plain text."""
        return not isinstance(self.content, str)

    def text(self) -> str:
        """Return the content rendered as text."""
        return render_content(self.content)

    def to_dict(self) -> Dict[str, Any]:
        """Return the ``{"role", "content"}`` mapping most SDKs accept."""
        return {"role": self.role, "content": self.text()}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Message":
        """Construct a message from a role/content mapping."""
        return cls(role=data["role"], content=data.get("content", ""))


__all__ = [
    "Message",
    "Role",
    "render_content",
]
