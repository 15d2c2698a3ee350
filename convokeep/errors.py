"""ConvoKeep error hierarchy.

All project exceptions inherit from ConvokeepError, enabling:
- ``except ConvokeepError`` at top-level boundaries (CLI)
- Fine-grained catches deeper in the stack (``except ParseError``)

Hierarchy:
    ConvokeepError
    ├── ConfigError                         # config.py
    ├── BackupError
    │   ├── ReadError                       # source could not be read
    │   ├── ParseError                      # not valid JSON
    │   ├── InvalidBackupError              # parsed, failed validation
    │   └── UnsupportedFileTypeError        # not a .json file
    ├── StoreError                          # storage/store.py
    └── ExportError                         # export.py
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from convokeep.validation.backup_validator import ValidationReport


class ConvokeepError(Exception):
    """Base class for all ConvoKeep errors."""


class ConfigError(ConvokeepError):
    """Configuration file is missing required values or has invalid ones."""


class BackupError(ConvokeepError):
    """Base class for backup import failures."""


class ReadError(BackupError):
    """The backup source could not be read to completion."""


class ParseError(BackupError):
    """The backup contents are not syntactically valid JSON."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to parse JSON: {detail}")


class InvalidBackupError(BackupError):
    """The backup parsed but does not match the native schema.

    The full report is kept so callers can present every defect at once.
    """

    def __init__(self, report: ValidationReport) -> None:
        self.report = report
        super().__init__(f"Invalid ConvoKeep backup: {'; '.join(report.errors)}")

    @property
    def errors(self) -> list[str]:
        return list(self.report.errors)


class UnsupportedFileTypeError(BackupError):
    """The selected file is not a JSON backup."""


class StoreError(ConvokeepError):
    """Base class for conversation store errors."""


class ExportError(ConvokeepError):
    """A backup could not be exported."""


__all__ = [
    "BackupError",
    "ConfigError",
    "ConvokeepError",
    "ExportError",
    "InvalidBackupError",
    "ParseError",
    "ReadError",
    "StoreError",
    "UnsupportedFileTypeError",
]
