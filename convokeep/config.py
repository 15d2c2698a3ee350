from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

from .errors import ConfigError
from .lib.json import JSONDecodeError, loads
from .paths import config_home, default_store_path

CONFIG_VERSION = 1
DEFAULT_CONFIG_NAME = "config.json"
CONFIG_ENV_VAR = "CONVOKEEP_CONFIG"

_ALLOWED_KEYS = {"version", "store_path", "export_dir", "pretty_export"}


@dataclass
class Config:
    path: Path
    store_path: Path
    export_dir: Path
    pretty_export: bool = True
    version: int = CONFIG_VERSION


def config_path(explicit: Optional[Path] = None) -> Path:
    if explicit:
        return explicit.expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return config_home() / DEFAULT_CONFIG_NAME


def default_config(path: Optional[Path] = None) -> Config:
    return Config(
        path=config_path(path),
        store_path=default_store_path(),
        export_dir=Path.cwd(),
    )


def _ensure_keys(data: dict, *, allowed: Iterable[str]) -> None:
    unknown = set(data.keys()) - set(allowed)
    if unknown:
        keys = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown config key(s): {keys}")


def _parse_path(raw: dict[str, Any], key: str, fallback: Path) -> Path:
    value = raw.get(key)
    if value is None:
        return fallback
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{key}' must be a non-empty path string")
    return Path(value).expanduser()


def load_config(path: Optional[Path] = None) -> Config:
    """Load the config file, falling back to defaults when it does not exist."""
    target = config_path(path)
    config = default_config(target)
    if not target.exists():
        return config
    try:
        raw = loads(target.read_bytes())
    except JSONDecodeError as exc:
        raise ConfigError(f"Config file {target} is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {target}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {target} must contain a JSON object")
    _ensure_keys(raw, allowed=_ALLOWED_KEYS)

    version = raw.get("version", CONFIG_VERSION)
    if version != CONFIG_VERSION:
        raise ConfigError(f"Unsupported config version {version!r} (expected {CONFIG_VERSION})")
    pretty = raw.get("pretty_export", True)
    if not isinstance(pretty, bool):
        raise ConfigError("'pretty_export' must be true or false")

    config.store_path = _parse_path(raw, "store_path", config.store_path)
    config.export_dir = _parse_path(raw, "export_dir", config.export_dir)
    config.pretty_export = pretty
    return config


__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_VERSION",
    "Config",
    "ConfigError",
    "config_path",
    "default_config",
    "load_config",
]
