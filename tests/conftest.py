# tests/conftest.py
from __future__ import annotations

import numpy as np
import pytest

from tetris_stack.core.game.factory import PieceFactory
from tetris_stack.core.game.ids import IdAllocator


@pytest.fixture
def factory() -> PieceFactory:
    # own sequence so ids start at 1 regardless of test order
    return PieceFactory(np.random.default_rng(1234), allocator=IdAllocator())
