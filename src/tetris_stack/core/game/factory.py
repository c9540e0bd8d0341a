# src/tetris_stack/core/game/factory.py
from __future__ import annotations

from typing import Optional

import numpy as np

from tetris_stack.core.game.config import GameConfig
from tetris_stack.core.game.ids import IdAllocator, default_allocator
from tetris_stack.core.game.piece_rules import PieceRule, UniformPieceRule, make_piece_rule
from tetris_stack.core.game.types import Piece, Shape


class PieceFactory:
    """
    Mints pieces: shape from the piece rule, id from the allocator.

    Without an explicit allocator every factory draws from the process-wide
    default sequence, so ids never repeat within a run.

    create() never fails and advances the allocator by exactly one.
    """

    def __init__(
            self,
            rng: Optional[np.random.Generator] = None,
            *,
            allocator: Optional[IdAllocator] = None,
            rule: Optional[PieceRule] = None,
    ) -> None:
        self._rng: np.random.Generator = rng if rng is not None else np.random.default_rng()
        self.allocator = allocator if allocator is not None else default_allocator()
        self._rule: PieceRule = rule or UniformPieceRule()
        self._rule.reset(rng=self._rng, kinds=Shape.kinds())

    def create(self) -> Piece:
        shape = self._rule.next_shape()
        return Piece(shape=shape, id=self.allocator.next())


def make_piece_factory(
        cfg: GameConfig,
        *,
        allocator: Optional[IdAllocator] = None,
) -> PieceFactory:
    """
    Build a factory from GameConfig.

    seed=None draws fresh OS entropy.

    Id sequence, first match wins:
      - allocator passed in (sessions sharing one sequence)
      - cfg.first_id set: a fresh allocator starting there
      - otherwise the process-wide default sequence
    """
    rng = np.random.default_rng(cfg.seed)
    if allocator is not None:
        alloc = allocator
    elif cfg.first_id is not None:
        alloc = IdAllocator(start=int(cfg.first_id))
    else:
        alloc = default_allocator()
    rule = make_piece_rule(cfg.piece_rule, bag_copies=int(cfg.bag_copies))
    return PieceFactory(rng, allocator=alloc, rule=rule)


__all__ = ["PieceFactory", "make_piece_factory"]
