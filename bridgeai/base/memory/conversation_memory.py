"""In-process conversation memory.

Holds the ordered user/assistant turns accumulated by one client instance.
Entries are only ever appended in pairs and pruned from the oldest end, so the
store always starts on a user turn and alternates roles.

Thread safety: mutations and snapshots are serialized with a lock, so
concurrent calls on one client never interleave half-written exchanges.
Nothing is persisted; a new client starts empty.
"""

from __future__ import annotations

import threading
from typing import Any, List, Tuple

from ..models import MemoryDirective, MemoryMode, Message


class ConversationMemory:
    """Ordered, append-only list of conversation entries with window pruning."""

    def __init__(self) -> None:
        self._entries: List[Message] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def snapshot(self) -> Tuple[Message, ...]:
        """Return an ordered copy of the current entries."""
        with self._lock:
            return tuple(self._entries)

    def append_exchange(self, user_content: Any, assistant_content: str, directive: MemoryDirective) -> int:
        """Append one user/assistant pair, then prune per ``directive``.

        Returns
        -------
        int
            Number of entries dropped by pruning (0 when nothing was dropped).
        """
        if not directive.enabled:
            return 0
        pair = [Message(role="user", content=user_content), Message(role="assistant", content=assistant_content)]
        with self._lock:
            self._entries.extend(pair)
            if directive.mode is MemoryMode.WINDOWED:
                return self._prune_locked(directive.limit)
            return 0

    def prune(self, limit: int) -> int:
        """Keep only the most recent ``2 * limit`` entries; return how many were dropped."""
        if limit < 1:
            raise ValueError("limit must be >= 1")
        with self._lock:
            return self._prune_locked(limit)

    def _prune_locked(self, limit: int) -> int:
        overflow = len(self._entries) - 2 * limit
        if overflow <= 0:
            return 0
        del self._entries[:overflow]
        return overflow

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


__all__ = ["ConversationMemory"]
