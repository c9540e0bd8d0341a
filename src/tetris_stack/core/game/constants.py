# src/tetris_stack/core/game/constants.py
from __future__ import annotations

# Container capacities
QUEUE_CAPACITY: int = 5
STACK_CAPACITY: int = 3

# Piece ids start at 1 so counts read naturally for players
FIRST_PIECE_ID: int = 1

# Stack top index when empty
EMPTY_TOP: int = -1
