"""Turn a backup source into the list of conversations it contains.

ConvoKeep backups are written in the same schema the store uses, so a
validated backup is imported as-is: no remapping, no defaults.
"""

from __future__ import annotations

from typing import Any, Optional

from convokeep.core.log import get_logger
from convokeep.errors import InvalidBackupError
from convokeep.schemas.backup import NATIVE_SOURCE
from convokeep.validation.backup_validator import SchemaValidator

from .loader import DocumentLoader
from .sources import BackupSource

logger = get_logger(__name__)


def is_native_backup(document: Any) -> bool:
    """Cheap check that a parsed document claims to be a ConvoKeep backup."""
    return (
        isinstance(document, dict)
        and document.get("source") == NATIVE_SOURCE
        and isinstance(document.get("conversations"), list)
    )


class ConversationExtractor:
    """Load, validate, and extract conversations from a backup.

    Read and parse failures from the loader propagate unchanged; a failed
    validation becomes InvalidBackupError. Either way nothing is returned
    unless the whole document is valid.
    """

    def __init__(
        self,
        loader: Optional[DocumentLoader] = None,
        validator: Optional[SchemaValidator] = None,
    ) -> None:
        self.loader = loader or DocumentLoader()
        self.validator = validator or SchemaValidator()

    async def import_backup(self, source: BackupSource) -> list[Any]:
        document = await self.loader.load(source)
        conversations = self.extract(document, name=source.name)
        logger.info("backup_imported", source=source.name, conversations=len(conversations))
        return conversations

    def extract(self, document: Any, *, name: str = "<memory>") -> list[Any]:
        """Validate an already parsed document and return its conversations."""
        report = self.validator.validate(document)
        if not report.is_valid:
            logger.warning("backup_rejected", source=name, error_count=len(report.errors))
            raise InvalidBackupError(report)
        return document["conversations"]


async def import_backup(source: BackupSource) -> list[Any]:
    """Convenience function using the default loader and validator."""
    return await ConversationExtractor().import_backup(source)


__all__ = ["ConversationExtractor", "import_backup", "is_native_backup"]
