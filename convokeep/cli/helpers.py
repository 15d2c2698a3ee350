"""Shared CLI helpers."""

from __future__ import annotations

import os
import sys
from typing import NoReturn

from convokeep.config import Config, load_config
from convokeep.errors import ConfigError

from .types import AppEnv


def fail(command: str, message: str) -> NoReturn:
    raise SystemExit(f"{command}: {message}")


def should_use_plain(*, plain: bool) -> bool:
    if plain:
        return True
    env_force = os.environ.get("CONVOKEEP_FORCE_PLAIN")
    if env_force and env_force.lower() not in {"0", "false", "no"}:
        return True
    return not (sys.stdout.isatty() and sys.stderr.isatty())


def load_effective_config(env: AppEnv, command: str) -> Config:
    try:
        return load_config(env.config_path)
    except ConfigError as exc:
        fail(command, str(exc))
