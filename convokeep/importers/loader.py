"""Read a backup source and parse it into a generic JSON tree."""

from __future__ import annotations

from typing import Any

from convokeep.core.log import get_logger
from convokeep.errors import ParseError, ReadError
from convokeep.lib.json import JSONDecodeError, loads

from .sources import BackupSource

logger = get_logger(__name__)


class DocumentLoader:
    """Stateless: one instance may serve concurrent loads."""

    async def load(self, source: BackupSource) -> Any:
        """Read ``source`` completely and parse it.

        Raises:
            ReadError: the source could not be read
            ParseError: the contents are not valid JSON
        """
        try:
            raw = await source.read()
        except ReadError:
            logger.warning("backup_read_failed", source=source.name)
            raise
        except OSError as exc:
            logger.warning("backup_read_failed", source=source.name, error=str(exc))
            raise ReadError(f"Failed to read file {source.name}: {exc}") from exc

        return self.parse(raw, name=source.name)

    def parse(self, raw: str | bytes, *, name: str = "<memory>") -> Any:
        try:
            document = loads(raw)
        except JSONDecodeError as exc:
            logger.warning("backup_parse_failed", source=name, error=str(exc))
            raise ParseError(str(exc)) from exc
        logger.debug("backup_parsed", source=name, size=len(raw))
        return document


__all__ = ["DocumentLoader"]
