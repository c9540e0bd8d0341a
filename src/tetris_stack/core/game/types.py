# src/tetris_stack/core/game/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Shape(Enum):
    I = "I"  # noqa: E741
    O = "O"  # noqa: E741
    T = "T"
    L = "L"

    @classmethod
    def kinds(cls) -> tuple["Shape", ...]:
        # declaration order is the canonical kind-index order
        return tuple(cls)


@dataclass(frozen=True)
class Piece:
    shape: Shape
    id: int

    def __post_init__(self) -> None:
        if not isinstance(self.shape, Shape):
            raise TypeError(f"shape must be a Shape, got {type(self.shape)!r}")
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError(f"id must be an int, got {type(self.id)!r}")
        if self.id < 1:
            raise ValueError(f"id must be >= 1, got {self.id}")

    def __str__(self) -> str:
        return f"{self.shape.value}{self.id}"


@dataclass(frozen=True)
class SessionStats:
    played: int = 0
    reserved: int = 0
    used: int = 0
    generated: int = 0


@dataclass(frozen=True)
class SessionState:
    """
    Render-facing snapshot of one session.

    Ordering contract:
      - queue is FIFO order (queue[0] is the next piece to play)
      - stack is top first (stack[0] is the next reserved piece to use)
    """

    queue: tuple[Piece, ...]
    stack: tuple[Piece, ...]
    queue_capacity: int
    stack_capacity: int
    next_id: int
    stats: SessionStats

    @property
    def front(self) -> Piece | None:
        return self.queue[0] if self.queue else None

    @property
    def reserved_top(self) -> Piece | None:
        return self.stack[0] if self.stack else None


__all__ = ["Shape", "Piece", "SessionStats", "SessionState"]
