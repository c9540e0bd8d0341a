# src/tetris_stack/core/game/piece_rules.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from tetris_stack.core.game.types import Shape


class PieceRule(ABC):
    """
    Shape selector used by PieceFactory.

    The factory calls reset() once with its RNG and the shape set, then
    next_shape() once per minted piece. Rules draw only from the injected
    RNG so a seeded factory is reproducible.
    """

    @abstractmethod
    def reset(self, *, rng: np.random.Generator, kinds: Sequence[Shape]) -> None:
        raise NotImplementedError

    @abstractmethod
    def next_shape(self) -> Shape:
        raise NotImplementedError


@dataclass
class UniformPieceRule(PieceRule):
    """
    Default rule: every shape is equally likely on every draw.
    """

    _rng: np.random.Generator | None = None
    _shapes: tuple[Shape, ...] = ()

    def reset(self, *, rng: np.random.Generator, kinds: Sequence[Shape]) -> None:
        shapes = tuple(kinds)
        if not shapes:
            raise ValueError("UniformPieceRule needs at least one shape")
        self._rng = rng
        self._shapes = shapes

    def next_shape(self) -> Shape:
        if self._rng is None:
            raise RuntimeError("UniformPieceRule.next_shape() called before reset()")
        return self._shapes[int(self._rng.integers(len(self._shapes)))]


@dataclass
class BagPieceRule(PieceRule):
    """
    Opt-in alternative to the uniform rule (game.piece_rule: bag).

    Deals shapes from a shuffled bag holding bag_copies of each shape; a new
    bag is shuffled once the current one runs out. Every shape therefore
    appears exactly bag_copies times per len(shapes) * bag_copies draws.
    """

    bag_copies: int = 1

    _rng: np.random.Generator | None = None
    _shapes: tuple[Shape, ...] = ()
    _bag: list[Shape] = field(default_factory=list)

    def reset(self, *, rng: np.random.Generator, kinds: Sequence[Shape]) -> None:
        shapes = tuple(kinds)
        if not shapes:
            raise ValueError("BagPieceRule needs at least one shape")
        if int(self.bag_copies) < 1:
            raise ValueError(f"BagPieceRule.bag_copies must be >= 1, got {self.bag_copies}")
        self._rng = rng
        self._shapes = shapes
        self._bag = []

    def next_shape(self) -> Shape:
        if self._rng is None:
            raise RuntimeError("BagPieceRule.next_shape() called before reset()")
        if not self._bag:
            self._bag = list(self._shapes) * int(self.bag_copies)
            self._rng.shuffle(self._bag)
        return self._bag.pop()


def make_piece_rule(name: str, *, bag_copies: int = 1) -> PieceRule:
    n = str(name).strip().lower()
    if n == "uniform":
        return UniformPieceRule()
    if n == "bag":
        return BagPieceRule(bag_copies=int(bag_copies))
    raise ValueError(f"unknown piece rule {name!r} (expected 'uniform'|'bag')")


__all__ = ["PieceRule", "UniformPieceRule", "BagPieceRule", "make_piece_rule"]
