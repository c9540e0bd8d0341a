# src/tetris_stack/core/game/__init__.py
from __future__ import annotations

from tetris_stack.core.game.errors import CapacityExceeded, PieceContainerError, Underflow
from tetris_stack.core.game.factory import PieceFactory, make_piece_factory
from tetris_stack.core.game.ids import IdAllocator
from tetris_stack.core.game.piece_queue import BoundedQueue
from tetris_stack.core.game.piece_stack import BoundedStack
from tetris_stack.core.game.session import StackSession
from tetris_stack.core.game.transfer import (
    generate_into_queue,
    play_front,
    reserve_from_queue,
    use_reserved,
)
from tetris_stack.core.game.types import Piece, SessionState, SessionStats, Shape

__all__ = [
    "Shape",
    "Piece",
    "SessionStats",
    "SessionState",
    "PieceContainerError",
    "CapacityExceeded",
    "Underflow",
    "IdAllocator",
    "PieceFactory",
    "make_piece_factory",
    "BoundedQueue",
    "BoundedStack",
    "play_front",
    "reserve_from_queue",
    "use_reserved",
    "generate_into_queue",
    "StackSession",
]
