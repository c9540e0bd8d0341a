# tests/test_piece_factory.py
from __future__ import annotations

import numpy as np
import pytest

from tetris_stack.core.game.config import GameConfig
from tetris_stack.core.game.factory import PieceFactory, make_piece_factory
from tetris_stack.core.game.ids import IdAllocator, default_allocator
from tetris_stack.core.game.piece_rules import BagPieceRule, UniformPieceRule, make_piece_rule
from tetris_stack.core.game.types import Piece, Shape


def test_id_allocator_post_increment() -> None:
    alloc = IdAllocator()
    assert alloc.peek() == 1
    assert alloc.next() == 1
    assert alloc.next() == 2
    assert alloc.peek() == 3
    assert alloc.issued == 2


def test_id_allocator_rejects_non_positive_start() -> None:
    with pytest.raises(ValueError, match=">= 1"):
        IdAllocator(start=0)


def test_factory_ids_are_unique_and_strictly_increasing(factory: PieceFactory) -> None:
    ids = [factory.create().id for _ in range(200)]
    assert ids == list(range(1, 201))


def test_factory_advances_allocator_once_per_piece() -> None:
    alloc = IdAllocator(start=10)
    f = PieceFactory(np.random.default_rng(0), allocator=alloc)
    f.create()
    f.create()
    assert alloc.peek() == 12


def test_factories_sharing_an_allocator_never_collide() -> None:
    alloc = IdAllocator()
    a = PieceFactory(np.random.default_rng(1), allocator=alloc)
    b = PieceFactory(np.random.default_rng(2), allocator=alloc)
    ids = [a.create().id, b.create().id, a.create().id, b.create().id]
    assert ids == [1, 2, 3, 4]


def test_uniform_rule_covers_all_shapes(factory: PieceFactory) -> None:
    seen = {factory.create().shape for _ in range(400)}
    assert seen == set(Shape)


def test_same_seed_same_shapes() -> None:
    a = PieceFactory(np.random.default_rng(99))
    b = PieceFactory(np.random.default_rng(99))
    assert [a.create().shape for _ in range(20)] == [b.create().shape for _ in range(20)]


def test_bag_rule_deals_each_shape_bag_copies_times_per_bag() -> None:
    f = PieceFactory(np.random.default_rng(5), rule=BagPieceRule(bag_copies=2))
    shapes = [f.create().shape for _ in range(8)]
    for s in Shape:
        assert shapes.count(s) == 2


def test_rule_requires_reset() -> None:
    with pytest.raises(RuntimeError, match="reset"):
        UniformPieceRule().next_shape()


def test_make_piece_rule_rejects_unknown_name() -> None:
    with pytest.raises(ValueError, match="unknown piece rule"):
        make_piece_rule("bag7")


def test_piece_is_immutable_value() -> None:
    p = Piece(shape=Shape.T, id=7)
    assert str(p) == "T7"
    assert p == Piece(shape=Shape.T, id=7)
    with pytest.raises(AttributeError):
        p.id = 8  # type: ignore[misc]


def test_piece_rejects_non_positive_id() -> None:
    with pytest.raises(ValueError):
        Piece(shape=Shape.I, id=0)


def test_factories_without_allocator_share_the_process_sequence() -> None:
    a = PieceFactory()
    b = PieceFactory()
    assert a.allocator is b.allocator is default_allocator()
    ids = [a.create().id, b.create().id, a.create().id, b.create().id]
    assert len(set(ids)) == 4
    assert ids == sorted(ids)


def test_make_piece_factory_defaults_to_process_sequence() -> None:
    f = make_piece_factory(GameConfig(seed=1))
    g = make_piece_factory(GameConfig(seed=1))
    assert f.allocator is g.allocator is default_allocator()
    assert f.create().id != g.create().id


def test_make_piece_factory_first_id_starts_fresh_sequence() -> None:
    f = make_piece_factory(GameConfig(seed=1, first_id=50))
    assert f.allocator is not default_allocator()
    assert f.create().id == 50
