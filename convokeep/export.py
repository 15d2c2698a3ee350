"""Write conversations out as a ConvoKeep backup.

The backup envelope holds conversations in the native schema, so a file
written here imports back without any transformation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Sequence

from .core.log import get_logger
from .errors import ExportError
from .lib.json import dumps
from .schemas.backup import BACKUP_VERSION, NATIVE_SOURCE, SCHEMA_VERSION

logger = get_logger(__name__)


@dataclass
class ExportResult:
    path: Path
    conversation_count: int
    size_bytes: int


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def build_backup(
    conversations: Sequence[dict[str, Any]],
    *,
    exported_at: Optional[datetime] = None,
) -> dict[str, Any]:
    """Wrap conversations in the backup envelope."""
    moment = exported_at or _utc_now()
    return {
        "version": BACKUP_VERSION,
        "source": NATIVE_SOURCE,
        "exported_at": moment.isoformat().replace("+00:00", "Z"),
        "conversation_count": len(conversations),
        "schema_version": SCHEMA_VERSION,
        "conversations": list(conversations),
    }


def backup_filename(moment: datetime) -> str:
    return f"convokeep-backup-{moment.date().isoformat()}.json"


def write_backup(
    conversations: Sequence[dict[str, Any]],
    destination: Path,
    *,
    pretty: bool = True,
    exported_at: Optional[datetime] = None,
) -> ExportResult:
    """Write a backup file.

    ``destination`` may be a directory, in which case the file is named
    after the export date.
    """
    if not conversations:
        raise ExportError("No conversations to export")

    moment = exported_at or _utc_now()
    target = destination / backup_filename(moment) if destination.is_dir() else destination
    payload = dumps(build_backup(conversations, exported_at=moment), pretty=pretty).encode("utf-8")
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(payload)
    except OSError as exc:
        raise ExportError(f"Cannot write backup to {target}: {exc}") from exc

    logger.info("backup_exported", path=str(target), conversations=len(conversations))
    return ExportResult(path=target, conversation_count=len(conversations), size_bytes=len(payload))


__all__ = ["ExportResult", "backup_filename", "build_backup", "write_backup"]
