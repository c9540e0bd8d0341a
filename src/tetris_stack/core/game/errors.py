# src/tetris_stack/core/game/errors.py
from __future__ import annotations


class PieceContainerError(Exception):
    """
    Base class for bounded container failures.

    Raised before any mutation, so the container that raised it is unchanged.
    `container` names the side that failed ("queue" | "stack").
    """

    def __init__(self, message: str, *, container: str, capacity: int) -> None:
        super().__init__(message)
        self.container = str(container)
        self.capacity = int(capacity)


class CapacityExceeded(PieceContainerError):
    """Insertion into a full container."""


class Underflow(PieceContainerError):
    """Removal from an empty container."""


__all__ = ["PieceContainerError", "CapacityExceeded", "Underflow"]
