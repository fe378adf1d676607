"""
ChatResponse DTO representing normalized backend replies.

Adapters fill every field except ``hash``; the client assigns the hash once,
after the backend reply succeeded and before the response is returned. The
``raw`` payload is kept for advanced callers but excluded from ``to_dict`` so
large SDK object graphs are never logged by accident.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .provider_metadata import ProviderMetadata
from .token_usage import TokenUsage
from .tool_call import ToolCall


@dataclass
class ChatResponse:
    """Provider-agnostic response from a chat invocation.

    Attributes:
        text: Assistant text (empty string when the reply had none).
        hash: Digest of the request prompt; empty until post-processing.
        json: Parsed JSON when a JSON response format was requested.
        usage: Token counts (zero-filled when the backend reports none).
        cost: Estimated cost in USD.
        tool_calls: Tool calls requested by the model; ``None`` when the
            backend has no tool-calling capability.
        raw: Backend-native reply object, for diagnostics.
        meta: Execution :class:`ProviderMetadata`.
    """

    text: str
    meta: ProviderMetadata
    hash: str = ""
    json: Any = None
    usage: Optional[TokenUsage] = None
    cost: Optional[float] = None
    tool_calls: Optional[List[ToolCall]] = None
    raw: Any = field(default=None, repr=False)

    @property
    def provider(self) -> str:
        return self.meta.provider_name

    def assign_hash(self, digest: str) -> None:
        """Set the content hash; allowed exactly once."""
        if self.hash:
            raise RuntimeError("response hash already assigned")
        self.hash = digest

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary excluding raw provider objects."""
        return {
            "text": self.text,
            "hash": self.hash,
            "json": self.json,
            "usage": self.usage.to_dict() if self.usage else None,
            "cost": self.cost,
            "tool_calls": [t.to_dict() for t in self.tool_calls] if self.tool_calls is not None else None,
            "meta": self.meta.to_dict(),
        }


__all__ = [
    "ChatResponse",
]
