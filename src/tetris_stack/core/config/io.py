# src/tetris_stack/core/config/io.py
from __future__ import annotations

from pathlib import Path
from typing import Any

from omegaconf import OmegaConf
from pydantic import BaseModel

from tetris_stack.core.config.root import SessionConfig


def to_plain_dict(cfg: BaseModel) -> dict[str, Any]:
    if not isinstance(cfg, BaseModel):
        raise TypeError(f"unsupported config type: {type(cfg).__name__}")
    return cfg.model_dump(mode="json")


def load_yaml(path: Path) -> dict[str, Any]:
    cfg_path = Path(path)
    cfg = OmegaConf.load(cfg_path)
    data = OmegaConf.to_container(cfg, resolve=True)
    if not isinstance(data, dict):
        raise TypeError(f"config({path}) must be a mapping")
    return {str(k): v for k, v in data.items()}


def load_session_config(path: Path) -> SessionConfig:
    return SessionConfig.model_validate(load_yaml(path))


__all__ = ["to_plain_dict", "load_yaml", "load_session_config"]
