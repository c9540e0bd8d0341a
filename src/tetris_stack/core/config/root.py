# src/tetris_stack/core/config/root.py
from __future__ import annotations

from pydantic import field_validator

from tetris_stack.core.config.base import ConfigBase
from tetris_stack.core.game.config import GameConfig

_LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}


class SessionConfig(ConfigBase):
    log_level: str = "info"
    use_rich: bool = True
    game: GameConfig = GameConfig()

    @field_validator("log_level", mode="before")
    @classmethod
    def _log_level_known(cls, v: object) -> str:
        s = str(v).strip().lower()
        if s not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {v!r}")
        return s


__all__ = ["SessionConfig"]
