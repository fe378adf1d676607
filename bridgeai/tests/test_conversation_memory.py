from __future__ import annotations

import threading

import pytest

from bridgeai.base.memory import ConversationMemory
from bridgeai.base.models import MemoryDirective, Message


def test_disabled_directive_does_not_store():
    mem = ConversationMemory()
    assert mem.append_exchange("q", "a", MemoryDirective.disabled()) == 0  # nosec B101
    assert len(mem) == 0  # nosec B101


def test_unbounded_memory_keeps_everything_in_order():
    mem = ConversationMemory()
    for i in range(5):
        mem.append_exchange(f"q{i}", f"a{i}", MemoryDirective.unbounded())
    snap = mem.snapshot()
    assert len(snap) == 10  # nosec B101
    assert snap[0] == Message(role="user", content="q0")  # nosec B101
    assert snap[-1] == Message(role="assistant", content="a4")  # nosec B101


def test_sliding_window_keeps_latest_pairs():
    mem = ConversationMemory()
    directive = MemoryDirective.windowed(2)
    dropped = [mem.append_exchange(f"q{i}", f"a{i}", directive) for i in range(4)]
    assert dropped == [0, 0, 2, 2]  # nosec B101
    assert [m.content for m in mem.snapshot()] == ["q2", "a2", "q3", "a3"]  # nosec B101


def test_prune_and_clear():
    mem = ConversationMemory()
    for i in range(3):
        mem.append_exchange(f"q{i}", f"a{i}", MemoryDirective.unbounded())
    assert mem.prune(1) == 4  # nosec B101
    assert [m.role for m in mem.snapshot()] == ["user", "assistant"]  # nosec B101
    with pytest.raises(ValueError):
        mem.prune(0)
    mem.clear()
    assert mem.snapshot() == ()  # nosec B101


def test_snapshot_is_a_copy():
    mem = ConversationMemory()
    mem.append_exchange("q", "a", MemoryDirective.unbounded())
    snap = mem.snapshot()
    mem.clear()
    assert len(snap) == 2  # nosec B101


def test_concurrent_appends_never_split_pairs():
    mem = ConversationMemory()
    directive = MemoryDirective.windowed(50)

    def worker(n: int) -> None:
        for i in range(100):
            mem.append_exchange(f"q{n}-{i}", f"a{n}-{i}", directive)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    snap = mem.snapshot()
    assert len(snap) == 100  # nosec B101
    for user, assistant in zip(snap[::2], snap[1::2]):
        assert user.role == "user" and assistant.role == "assistant"  # nosec B101
        assert user.content[1:] == assistant.content[1:]  # nosec B101
