"""Readable inputs for the backup importer.

A backup source is anything with a ``name`` and an async ``read()`` that
returns the complete contents. Read failures surface as ReadError.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

import aiofiles

from convokeep.errors import ReadError, UnsupportedFileTypeError

BACKUP_SUFFIX = ".json"


@runtime_checkable
class BackupSource(Protocol):
    """Contract for an uploaded or on-disk backup.

    Implementations must read the whole payload in one call and raise
    ReadError if that is not possible.
    """

    @property
    def name(self) -> str:
        ...

    async def read(self) -> str | bytes:
        ...


def check_backup_filename(name: str) -> None:
    """Reject files that cannot be a JSON backup based on their extension."""
    if Path(name).suffix.lower() != BACKUP_SUFFIX:
        raise UnsupportedFileTypeError(
            "Invalid file type. Please select a ConvoKeep backup file (.json)."
        )


@dataclass(frozen=True)
class FileBackupSource:
    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    async def read(self) -> bytes:
        try:
            async with aiofiles.open(self.path, "rb") as handle:
                return await handle.read()
        except OSError as exc:
            raise ReadError(f"Failed to read file {self.path}: {exc.strerror or exc}") from exc

    @classmethod
    def for_path(cls, path: Path, *, check_suffix: bool = True) -> FileBackupSource:
        if check_suffix:
            check_backup_filename(path.name)
        return cls(path=path)


@dataclass(frozen=True)
class MemoryBackupSource:
    """In-memory payload, e.g. the body of an upload request."""

    name: str
    data: str | bytes

    async def read(self) -> str | bytes:
        return self.data


__all__ = [
    "BACKUP_SUFFIX",
    "BackupSource",
    "FileBackupSource",
    "MemoryBackupSource",
    "check_backup_filename",
]
