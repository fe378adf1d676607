"""Tool call returned by a backend."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class ToolCall:
    """A structured function invocation requested by the model.

    Attributes:
        name: Tool name as declared in the request.
        arguments: Decoded arguments object.
    """

    name: str
    arguments: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "arguments": dict(self.arguments)}


__all__ = ["ToolCall"]
