"""ConvoKeep backup tooling.

Validates ConvoKeep backup files, extracts their conversations, and keeps
them in a local store that can be exported back to a backup.

Example usage:

    import asyncio
    from pathlib import Path

    from convokeep import ConversationExtractor, FileBackupSource

    source = FileBackupSource.for_path(Path("convokeep-backup-2024-05-01.json"))
    conversations = asyncio.run(ConversationExtractor().import_backup(source))
"""

__version__ = "0.3.0"

from convokeep.errors import (
    BackupError,
    ConvokeepError,
    InvalidBackupError,
    ParseError,
    ReadError,
    UnsupportedFileTypeError,
)
from convokeep.importers import (
    BackupSource,
    ConversationExtractor,
    DocumentLoader,
    FileBackupSource,
    MemoryBackupSource,
    import_backup,
    is_native_backup,
)
from convokeep.validation import SchemaValidator, ValidationReport, validate_backup

__all__ = [
    "BackupError",
    "BackupSource",
    "ConversationExtractor",
    "ConvokeepError",
    "DocumentLoader",
    "FileBackupSource",
    "InvalidBackupError",
    "MemoryBackupSource",
    "ParseError",
    "ReadError",
    "SchemaValidator",
    "UnsupportedFileTypeError",
    "ValidationReport",
    "__version__",
    "import_backup",
    "is_native_backup",
    "validate_backup",
]
