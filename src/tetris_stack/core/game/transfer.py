# src/tetris_stack/core/game/transfer.py
from __future__ import annotations

from tetris_stack.core.game.errors import CapacityExceeded, Underflow
from tetris_stack.core.game.factory import PieceFactory
from tetris_stack.core.game.piece_queue import BoundedQueue
from tetris_stack.core.game.piece_stack import BoundedStack
from tetris_stack.core.game.types import Piece

"""
Commands that move pieces between the queue and the reserve stack.

Every precondition is checked before the first mutation, so a failed command
leaves both containers exactly as they were.

Refill rule: after a piece leaves the queue, one replacement is minted only if
the queue is not full. With a positive capacity a successful dequeue always
leaves room, so in practice the refill always happens.
"""


def _refill(queue: BoundedQueue, factory: PieceFactory) -> Piece | None:
    if queue.is_full():
        return None
    piece = factory.create()
    queue.enqueue(piece)
    return piece


def play_front(queue: BoundedQueue, factory: PieceFactory) -> Piece:
    """
    Play the front piece and refill the queue.

    Raises:
      Underflow: queue is empty.
    """
    played = queue.dequeue()
    _refill(queue, factory)
    return played


def reserve_from_queue(queue: BoundedQueue, stack: BoundedStack, factory: PieceFactory) -> Piece:
    """
    Move the front piece onto the reserve stack and refill the queue.

    Queue emptiness is checked before stack fullness: when both hold, the
    caller sees Underflow, never CapacityExceeded.
    """
    if queue.is_empty():
        raise Underflow(
            "queue is empty; nothing to reserve",
            container="queue",
            capacity=queue.capacity,
        )
    if stack.is_full():
        raise CapacityExceeded(
            f"reserve stack is full ({stack.count}/{stack.capacity})",
            container="stack",
            capacity=stack.capacity,
        )
    piece = queue.dequeue()
    stack.push(piece)
    _refill(queue, factory)
    return piece


def use_reserved(stack: BoundedStack) -> Piece:
    """
    Pop and return the most recently reserved piece. The queue is not touched.
    """
    return stack.pop()


def generate_into_queue(queue: BoundedQueue, factory: PieceFactory) -> Piece:
    """
    Mint one piece into the queue.

    Fullness is checked before minting so a failed call does not consume an id.
    """
    if queue.is_full():
        raise CapacityExceeded(
            f"queue is full ({queue.count}/{queue.capacity}); cannot generate",
            container="queue",
            capacity=queue.capacity,
        )
    piece = factory.create()
    queue.enqueue(piece)
    return piece


__all__ = ["play_front", "reserve_from_queue", "use_reserved", "generate_into_queue"]
