"""Shared filesystem paths for ConvoKeep."""

from __future__ import annotations

import os
from pathlib import Path


def _xdg_path(env_var: str, fallback: Path) -> Path:
    raw = os.environ.get(env_var)
    if raw:
        return Path(raw).expanduser()
    return fallback


def config_home() -> Path:
    return _xdg_path("XDG_CONFIG_HOME", Path.home() / ".config") / "convokeep"


def data_home() -> Path:
    return _xdg_path("XDG_DATA_HOME", Path.home() / ".local/share") / "convokeep"


def default_store_path() -> Path:
    return data_home() / "convokeep.db"


__all__ = [
    "config_home",
    "data_home",
    "default_store_path",
]
