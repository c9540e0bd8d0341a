# src/tetris_stack/core/game/config.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator

from tetris_stack.core.config.base import ConfigBase
from tetris_stack.core.game.constants import QUEUE_CAPACITY, STACK_CAPACITY

PieceRuleName = Literal["uniform", "bag"]


def _as_int(value: object, *, where: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{where} must be an int, got bool")
    if not isinstance(value, (int, float, str, bytes, bytearray)):
        raise TypeError(f"{where} must be an int-like value, got {type(value)!r}")
    try:
        return int(value)
    except Exception as e:
        raise TypeError(f"{where} must be an int-like value, got {type(value)!r}") from e


class GameConfig(ConfigBase):
    """
    Session-level game config.

      - seed: None draws OS entropy, an int makes piece shapes reproducible
      - first_id: None shares the process-wide id sequence, an int starts a
        fresh sequence there
      - piece_rule: "uniform" (default) | "bag"
      - capacities default to the classic 5-piece queue and 3-slot reserve
    """

    seed: Optional[int] = Field(default=None, ge=0)
    piece_rule: PieceRuleName = "uniform"
    bag_copies: int = Field(default=1, ge=1)
    first_id: Optional[int] = Field(default=None, ge=1)
    queue_capacity: int = Field(default=QUEUE_CAPACITY, ge=1)
    stack_capacity: int = Field(default=STACK_CAPACITY, ge=1)

    @field_validator("seed", mode="before")
    @classmethod
    def _seed_int(cls, v: object) -> Optional[int]:
        if v is None:
            return None
        return _as_int(v, where="game.seed")

    @field_validator("piece_rule", mode="before")
    @classmethod
    def _piece_rule_lower(cls, v: object) -> str:
        return str(v).strip().lower()


__all__ = ["GameConfig", "PieceRuleName"]
