"""Record types for ConvoKeep backup documents."""

from convokeep.schemas.backup import (
    BACKUP_VERSION,
    NATIVE_SOURCE,
    SCHEMA_VERSION,
    BackupEnvelope,
    ConversationFields,
)

__all__ = [
    "BACKUP_VERSION",
    "BackupEnvelope",
    "ConversationFields",
    "NATIVE_SOURCE",
    "SCHEMA_VERSION",
]
