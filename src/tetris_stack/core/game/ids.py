# src/tetris_stack/core/game/ids.py
from __future__ import annotations

import threading

from tetris_stack.core.game.constants import FIRST_PIECE_ID


class IdAllocator:
    """
    Monotonic piece id counter.

    next() has post-increment semantics: it returns the current value and
    then advances. One allocator may be shared by several sessions; the
    increment is lock-protected so ids stay unique.
    """

    def __init__(self, start: int = FIRST_PIECE_ID) -> None:
        if isinstance(start, bool) or not isinstance(start, int):
            raise TypeError(f"start must be an int, got {type(start)!r}")
        if start < 1:
            raise ValueError(f"start must be >= 1, got {start}")
        self._start = int(start)
        self._next = int(start)
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
        return value

    def peek(self) -> int:
        return self._next

    @property
    def issued(self) -> int:
        return self._next - self._start

    def __repr__(self) -> str:
        return f"IdAllocator(next={self._next})"


_DEFAULT_ALLOCATOR = IdAllocator()


def default_allocator() -> IdAllocator:
    """
    Process-wide id sequence used by every factory that is not handed its own.
    """
    return _DEFAULT_ALLOCATOR


__all__ = ["IdAllocator", "default_allocator"]
