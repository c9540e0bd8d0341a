# tests/test_transfer.py
from __future__ import annotations

import pytest

from tetris_stack.core.game.errors import CapacityExceeded, Underflow
from tetris_stack.core.game.factory import PieceFactory
from tetris_stack.core.game.piece_queue import BoundedQueue
from tetris_stack.core.game.piece_stack import BoundedStack
from tetris_stack.core.game.transfer import (
    generate_into_queue,
    play_front,
    reserve_from_queue,
    use_reserved,
)
from tetris_stack.core.game.types import Piece, Shape


def _ids(pieces: tuple[Piece, ...]) -> list[int]:
    return [p.id for p in pieces]


@pytest.fixture
def full_queue(factory: PieceFactory) -> BoundedQueue:
    q = BoundedQueue()
    q.initialize_full(factory)
    return q


def test_play_front_refills_with_new_id_at_tail(full_queue: BoundedQueue, factory: PieceFactory) -> None:
    played = play_front(full_queue, factory)
    assert played.id == 1
    assert full_queue.is_full()
    assert _ids(full_queue.snapshot_ordered()) == [2, 3, 4, 5, 6]


def test_play_front_on_empty_queue(factory: PieceFactory) -> None:
    q = BoundedQueue()
    with pytest.raises(Underflow):
        play_front(q, factory)
    assert q.is_empty()
    assert factory.allocator.peek() == 1


def test_play_front_on_partial_queue_keeps_count(factory: PieceFactory) -> None:
    q = BoundedQueue()
    q.enqueue(factory.create())
    q.enqueue(factory.create())
    played = play_front(q, factory)
    assert played.id == 1
    assert _ids(q.snapshot_ordered()) == [2, 3]


def test_reserve_then_use_end_to_end(factory: PieceFactory) -> None:
    q = BoundedQueue()
    s = BoundedStack()
    assert q.is_empty()
    q.initialize_full(factory)
    assert _ids(q.snapshot_ordered()) == [1, 2, 3, 4, 5]

    reserved = reserve_from_queue(q, s, factory)
    assert reserved.id == 1
    assert s.peek_top() == reserved
    assert _ids(s.snapshot_ordered()) == [1]
    assert _ids(q.snapshot_ordered()) == [2, 3, 4, 5, 6]

    used = use_reserved(s)
    assert used == reserved
    assert s.is_empty()


def test_reserve_on_full_stack_leaves_queue_untouched(full_queue: BoundedQueue, factory: PieceFactory) -> None:
    s = BoundedStack()
    for i in (101, 102, 103):
        s.push(Piece(shape=Shape.I, id=i))
    before = full_queue.snapshot_ordered()

    with pytest.raises(CapacityExceeded) as ei:
        reserve_from_queue(full_queue, s, factory)

    assert ei.value.container == "stack"
    assert full_queue.snapshot_ordered() == before
    assert _ids(s.snapshot_ordered()) == [103, 102, 101]
    assert factory.allocator.peek() == 6


def test_reserve_reports_queue_underflow_before_stack_full(factory: PieceFactory) -> None:
    q = BoundedQueue()
    s = BoundedStack()
    for i in (101, 102, 103):
        s.push(Piece(shape=Shape.O, id=i))

    with pytest.raises(Underflow) as ei:
        reserve_from_queue(q, s, factory)

    assert ei.value.container == "queue"
    assert s.count == 3


def test_use_reserved_on_empty_stack() -> None:
    s = BoundedStack()
    with pytest.raises(Underflow) as ei:
        use_reserved(s)
    assert ei.value.container == "stack"


def test_generate_into_full_queue_does_not_consume_an_id(full_queue: BoundedQueue, factory: PieceFactory) -> None:
    with pytest.raises(CapacityExceeded):
        generate_into_queue(full_queue, factory)
    assert factory.allocator.peek() == 6
    assert _ids(full_queue.snapshot_ordered()) == [1, 2, 3, 4, 5]


def test_generate_into_queue_appends_at_tail(factory: PieceFactory) -> None:
    q = BoundedQueue()
    q.enqueue(factory.create())
    piece = generate_into_queue(q, factory)
    assert piece.id == 2
    assert _ids(q.snapshot_ordered()) == [1, 2]


def test_capacity_invariant_under_mixed_commands(full_queue: BoundedQueue, factory: PieceFactory) -> None:
    s = BoundedStack()
    commands = [
        lambda: play_front(full_queue, factory),
        lambda: reserve_from_queue(full_queue, s, factory),
        lambda: use_reserved(s),
        lambda: generate_into_queue(full_queue, factory),
        lambda: full_queue.dequeue(),
    ]
    seen: set[int] = set()
    for step in range(300):
        try:
            piece = commands[(step * 7 + step // 3) % len(commands)]()
        except (CapacityExceeded, Underflow):
            pass
        else:
            seen.add(piece.id)
        assert 0 <= full_queue.count <= 5
        assert 0 <= s.count <= 3
        live = _ids(full_queue.snapshot_ordered()) + _ids(s.snapshot_ordered())
        assert len(live) == len(set(live))
