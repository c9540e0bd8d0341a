# src/tetris_stack/core/game/session.py
from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Optional

from tetris_stack.core.game.constants import QUEUE_CAPACITY, STACK_CAPACITY
from tetris_stack.core.game.factory import PieceFactory, make_piece_factory
from tetris_stack.core.game.ids import IdAllocator
from tetris_stack.core.game.piece_queue import BoundedQueue
from tetris_stack.core.game.piece_stack import BoundedStack
from tetris_stack.core.game.transfer import (
    generate_into_queue,
    play_front,
    reserve_from_queue,
    use_reserved,
)
from tetris_stack.core.game.types import Piece, SessionState, SessionStats

if TYPE_CHECKING:
    from tetris_stack.core.config.root import SessionConfig


class StackSession:
    """
    One player's queue + reserve stack, driven by commands.

    Contracts:
      - each session owns its own containers; only the id allocator may be
        shared (pass the same factory allocator to several sessions)
      - commands either succeed and return the moved piece, or raise a
        PieceContainerError and leave the session unchanged
      - no I/O besides DEBUG logging; rendering reads state()
    """

    def __init__(
            self,
            factory: PieceFactory,
            *,
            queue_capacity: int = QUEUE_CAPACITY,
            stack_capacity: int = STACK_CAPACITY,
            logger: Optional[logging.Logger] = None,
    ) -> None:
        self.factory = factory
        self.queue = BoundedQueue(queue_capacity)
        self.stack = BoundedStack(stack_capacity)
        self._log = logger or logging.getLogger("tetris_stack.session")
        self._stats = SessionStats()

    @classmethod
    def from_config(
            cls,
            cfg: "SessionConfig",
            *,
            allocator: Optional[IdAllocator] = None,
            logger: Optional[logging.Logger] = None,
    ) -> "StackSession":
        game = cfg.game
        session = cls(
            make_piece_factory(game, allocator=allocator),
            queue_capacity=int(game.queue_capacity),
            stack_capacity=int(game.stack_capacity),
            logger=logger,
        )
        session.reset()
        return session

    @property
    def stats(self) -> SessionStats:
        return self._stats

    def reset(self) -> SessionState:
        while not self.stack.is_empty():
            self.stack.pop()
        self.queue.initialize_full(self.factory)
        self._stats = SessionStats(generated=self.queue.count)
        self._log.debug("session reset: queue=%s", self._fmt(self.queue.snapshot_ordered()))
        return self.state()

    def play(self) -> Piece:
        before = self.queue.count
        piece = play_front(self.queue, self.factory)
        self._stats = replace(
            self._stats,
            played=self._stats.played + 1,
            generated=self._stats.generated + self._refilled(before),
        )
        self._log.debug("played %s; queue=%s", piece, self._fmt(self.queue.snapshot_ordered()))
        return piece

    def reserve(self) -> Piece:
        before = self.queue.count
        piece = reserve_from_queue(self.queue, self.stack, self.factory)
        self._stats = replace(
            self._stats,
            reserved=self._stats.reserved + 1,
            generated=self._stats.generated + self._refilled(before),
        )
        self._log.debug("reserved %s; stack=%s", piece, self._fmt(self.stack.snapshot_ordered()))
        return piece

    def use_reserved(self) -> Piece:
        piece = use_reserved(self.stack)
        self._stats = replace(self._stats, used=self._stats.used + 1)
        self._log.debug("used reserved %s; stack=%s", piece, self._fmt(self.stack.snapshot_ordered()))
        return piece

    def generate(self) -> Piece:
        piece = generate_into_queue(self.queue, self.factory)
        self._stats = replace(self._stats, generated=self._stats.generated + 1)
        self._log.debug("generated %s; queue=%s", piece, self._fmt(self.queue.snapshot_ordered()))
        return piece

    def state(self) -> SessionState:
        return SessionState(
            queue=self.queue.snapshot_ordered(),
            stack=self.stack.snapshot_ordered(),
            queue_capacity=self.queue.capacity,
            stack_capacity=self.stack.capacity,
            next_id=self.factory.allocator.peek(),
            stats=self._stats,
        )

    def _refilled(self, count_before: int) -> int:
        # one piece left the queue; equal count means a replacement went in
        return 1 if self.queue.count == count_before else 0

    @staticmethod
    def _fmt(pieces: tuple[Piece, ...]) -> str:
        return "[" + " ".join(str(p) for p in pieces) + "]"


__all__ = ["StackSession"]
