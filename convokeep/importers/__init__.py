"""Importer package for ConvoKeep backup files."""

from .extractor import ConversationExtractor, import_backup, is_native_backup
from .loader import DocumentLoader
from .sources import BackupSource, FileBackupSource, MemoryBackupSource, check_backup_filename

__all__ = [
    "BackupSource",
    "ConversationExtractor",
    "DocumentLoader",
    "FileBackupSource",
    "MemoryBackupSource",
    "check_backup_filename",
    "import_backup",
    "is_native_backup",
]
