# src/tetris_stack/core/game/piece_queue.py
from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional

from tetris_stack.core.game.constants import QUEUE_CAPACITY
from tetris_stack.core.game.errors import CapacityExceeded, Underflow
from tetris_stack.core.game.types import Piece

if TYPE_CHECKING:
    from tetris_stack.core.game.factory import PieceFactory


class BoundedQueue:
    """
    Fixed-capacity FIFO of pieces backed by a circular buffer.

    Contracts:
      - count is the sole source of truth for full/empty; head == tail is
        ambiguous on its own.
      - head is the slot to dequeue next, tail is the slot written last.
      - storage never grows; enqueue/dequeue are O(1).
      - failed operations raise before mutating anything.
    """

    def __init__(self, capacity: int = QUEUE_CAPACITY) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {type(capacity)!r}")
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = int(capacity)
        self._slots: list[Optional[Piece]] = [None] * self._capacity
        self._head = 0
        # first enqueue advances tail onto slot 0
        self._tail = self._capacity - 1
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return self._count

    @property
    def head(self) -> int:
        return self._head

    @property
    def tail(self) -> int:
        return self._tail

    def is_full(self) -> bool:
        return self._count == self._capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def enqueue(self, piece: Piece) -> None:
        if self.is_full():
            raise CapacityExceeded(
                f"queue is full ({self._count}/{self._capacity}); cannot enqueue {piece}",
                container="queue",
                capacity=self._capacity,
            )
        self._tail = (self._tail + 1) % self._capacity
        self._slots[self._tail] = piece
        self._count += 1

    def dequeue(self) -> Piece:
        if self.is_empty():
            raise Underflow(
                "queue is empty; nothing to dequeue",
                container="queue",
                capacity=self._capacity,
            )
        piece = self._slot(self._head)
        self._slots[self._head] = None
        self._head = (self._head + 1) % self._capacity
        self._count -= 1
        return piece

    def peek_front(self) -> Optional[Piece]:
        if self.is_empty():
            return None
        return self._slot(self._head)

    def initialize_full(self, factory: "PieceFactory") -> None:
        """
        Reset and fill to capacity with freshly minted pieces, oldest at head.
        """
        self._slots = [None] * self._capacity
        self._head = 0
        self._tail = self._capacity - 1
        self._count = 0
        for _ in range(self._capacity):
            self.enqueue(factory.create())

    def snapshot_ordered(self) -> tuple[Piece, ...]:
        out: list[Piece] = []
        for i in range(self._count):
            out.append(self._slot((self._head + i) % self._capacity))
        return tuple(out)

    def _slot(self, index: int) -> Piece:
        piece = self._slots[index]
        if piece is None:
            raise RuntimeError(f"queue slot {index} is empty inside the live range (count={self._count})")
        return piece

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.snapshot_ordered())

    def __repr__(self) -> str:
        items = ", ".join(str(p) for p in self.snapshot_ordered())
        return f"BoundedQueue([{items}], {self._count}/{self._capacity})"


__all__ = ["BoundedQueue"]
