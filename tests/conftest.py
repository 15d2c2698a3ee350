from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

import pytest
import structlog

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tests.factories import make_conversation  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def workspace_env(tmp_path, monkeypatch) -> dict[str, Path]:
    """Point every XDG root and the config path at a temp directory."""
    roots = {
        "config": tmp_path / "config",
        "data": tmp_path / "data",
    }
    for root in roots.values():
        root.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(roots["config"]))
    monkeypatch.setenv("XDG_DATA_HOME", str(roots["data"]))
    monkeypatch.setenv("CONVOKEEP_FORCE_PLAIN", "1")

    config_path = roots["config"] / "convokeep" / "config.json"
    config_path.parent.mkdir(parents=True, exist_ok=True)
    store_path = roots["data"] / "convokeep" / "convokeep.db"
    export_dir = tmp_path / "exports"
    export_dir.mkdir()
    config_path.write_text(
        json.dumps(
            {
                "version": 1,
                "store_path": str(store_path),
                "export_dir": str(export_dir),
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("CONVOKEEP_CONFIG", str(config_path))
    return {
        "config_path": config_path,
        "store_path": store_path,
        "export_dir": export_dir,
        **roots,
    }


@pytest.fixture
def sample_backup() -> dict[str, Any]:
    return {
        "version": "1.0",
        "source": "convokeep",
        "exported_at": "2024-05-01T12:00:00Z",
        "conversation_count": 2,
        "schema_version": 2,
        "conversations": [
            make_conversation(
                "c1",
                "Planning",
                created_at="2024-04-01T09:00:00Z",
                source="chatgpt",
                messages=[
                    {"role": "user", "content": "Plan my week"},
                    {"role": "assistant", "content": "Sure."},
                ],
            ),
            make_conversation("c2", "Recipes", created_at="2024-04-02T09:00:00Z"),
        ],
    }


@pytest.fixture
def write_json(tmp_path) -> Callable[..., Path]:
    """Write a payload (dict or raw text) to a file under tmp_path."""

    def _write(payload: Any, name: str = "backup.json") -> Path:
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
