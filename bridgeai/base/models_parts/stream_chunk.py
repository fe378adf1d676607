"""Incremental streaming unit."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class StreamChunk:
    """One increment of a streamed reply.

    A stream ends with exactly one chunk whose ``is_done`` is True; that
    terminal chunk may carry empty text and, for some backends, the complete
    tool calls.

    Attributes:
        text: Partial text.
        is_done: Terminal sentinel flag.
        tool_calls: Optional tool-call fragments.
    """

    text: str = ""
    is_done: bool = False
    tool_calls: Optional[List[Dict[str, Any]]] = None

    @classmethod
    def done(cls, tool_calls: Optional[List[Dict[str, Any]]] = None) -> "StreamChunk":
        return cls(text="", is_done=True, tool_calls=tool_calls or None)


__all__ = ["StreamChunk"]
