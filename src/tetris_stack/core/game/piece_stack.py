# src/tetris_stack/core/game/piece_stack.py
from __future__ import annotations

from typing import Iterator, Optional

from tetris_stack.core.game.constants import EMPTY_TOP, STACK_CAPACITY
from tetris_stack.core.game.errors import CapacityExceeded, Underflow
from tetris_stack.core.game.types import Piece


class BoundedStack:
    """
    Fixed-capacity LIFO of reserved pieces.

    top is -1 when empty, otherwise the index of the most recent push;
    count == top + 1 at all times.
    """

    def __init__(self, capacity: int = STACK_CAPACITY) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {type(capacity)!r}")
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = int(capacity)
        self._slots: list[Optional[Piece]] = [None] * self._capacity
        self._top = EMPTY_TOP
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return self._count

    @property
    def top(self) -> int:
        return self._top

    def is_full(self) -> bool:
        return self._count == self._capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def push(self, piece: Piece) -> None:
        if self.is_full():
            raise CapacityExceeded(
                f"stack is full ({self._count}/{self._capacity}); cannot push {piece}",
                container="stack",
                capacity=self._capacity,
            )
        self._top += 1
        self._slots[self._top] = piece
        self._count += 1

    def pop(self) -> Piece:
        if self.is_empty():
            raise Underflow(
                "stack is empty; nothing to pop",
                container="stack",
                capacity=self._capacity,
            )
        piece = self._slot(self._top)
        self._slots[self._top] = None
        self._top -= 1
        self._count -= 1
        return piece

    def peek_top(self) -> Optional[Piece]:
        if self.is_empty():
            return None
        return self._slot(self._top)

    def snapshot_ordered(self) -> tuple[Piece, ...]:
        # most recently pushed first
        out: list[Piece] = []
        for i in range(self._top, EMPTY_TOP, -1):
            out.append(self._slot(i))
        return tuple(out)

    def _slot(self, index: int) -> Piece:
        piece = self._slots[index]
        if piece is None:
            raise RuntimeError(f"stack slot {index} is empty inside the live range (count={self._count})")
        return piece

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.snapshot_ordered())

    def __repr__(self) -> str:
        items = ", ".join(str(p) for p in self.snapshot_ordered())
        return f"BoundedStack([{items}], {self._count}/{self._capacity})"


__all__ = ["BoundedStack"]
