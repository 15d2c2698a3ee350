from __future__ import annotations

import hashlib
import sqlite3
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import orjson
from pydantic import BaseModel, ValidationError, field_validator

from convokeep.core.log import get_logger
from convokeep.errors import StoreError
from convokeep.lib.json import dumps, dumps_bytes, loads

logger = get_logger(__name__)

SCHEMA_VERSION = 1

# Reentrant: writers hold it across _connect, which may apply the schema
_WRITE_LOCK = threading.RLock()


class StoredConversation(BaseModel):
    conversation_id: str
    title: str
    created_at: str | None = None
    updated_at: str | None = None
    content_hash: str
    payload: str

    @field_validator("conversation_id", "title", "content_hash")
    @classmethod
    def non_empty_string(cls, v: str) -> str:
        if not v:
            raise ValueError("Field cannot be empty")
        return v

    @classmethod
    def from_conversation(cls, conversation: dict[str, Any]) -> StoredConversation:
        created_at = conversation.get("created_at")
        updated_at = conversation.get("updated_at")
        return cls(
            conversation_id=str(conversation["conversation_id"]),
            title=str(conversation["title"]),
            created_at=created_at if isinstance(created_at, str) else None,
            updated_at=updated_at if isinstance(updated_at, str) else None,
            content_hash=_content_hash(conversation),
            payload=dumps(conversation),
        )


@dataclass
class StoreResult:
    new_conversations: int = 0
    updated_conversations: int = 0
    unchanged_conversations: int = 0

    @property
    def total(self) -> int:
        return self.new_conversations + self.updated_conversations + self.unchanged_conversations


def _content_hash(conversation: dict[str, Any]) -> str:
    canonical = dumps_bytes(conversation, option=orjson.OPT_SORT_KEYS)
    return hashlib.sha256(canonical).hexdigest()


def _apply_schema(conn: sqlite3.Connection) -> None:
    conn.executescript(
        """
        CREATE TABLE IF NOT EXISTS conversations (
            conversation_id TEXT PRIMARY KEY,
            title TEXT NOT NULL,
            created_at TEXT,
            updated_at TEXT,
            content_hash TEXT NOT NULL,
            payload TEXT NOT NULL
        );

        CREATE INDEX IF NOT EXISTS idx_conversations_created
        ON conversations(created_at);
        """
    )
    conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")
    conn.commit()


def _ensure_schema(conn: sqlite3.Connection) -> None:
    row = conn.execute("PRAGMA user_version").fetchone()
    version = row[0] if row else 0
    if version == 0:
        with _WRITE_LOCK:
            _apply_schema(conn)
        return
    if version != SCHEMA_VERSION:
        raise StoreError(f"Unsupported store schema version {version} (expected {SCHEMA_VERSION})")


class ConversationStore:
    """SQLite-backed store of conversations in the native schema.

    Conversations are kept verbatim as JSON, keyed by ``conversation_id``.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.path)
        except (OSError, sqlite3.Error) as exc:
            raise StoreError(f"Cannot open store {self.path}: {exc}") from exc
        conn.row_factory = sqlite3.Row
        try:
            _ensure_schema(conn)
            yield conn
        except sqlite3.Error as exc:
            conn.rollback()
            raise StoreError(f"Store operation failed: {exc}") from exc
        finally:
            conn.close()

    def store_conversations(self, conversations: Sequence[dict[str, Any]]) -> StoreResult:
        """Insert or update conversations in a single transaction."""
        try:
            records = [StoredConversation.from_conversation(conversation) for conversation in conversations]
        except (KeyError, ValidationError) as exc:
            raise StoreError(f"Conversation cannot be stored: {exc}") from exc
        result = StoreResult()
        with _WRITE_LOCK, self._connect() as conn:
            for record in records:
                row = conn.execute(
                    "SELECT content_hash FROM conversations WHERE conversation_id = ?",
                    (record.conversation_id,),
                ).fetchone()
                if row is None:
                    result.new_conversations += 1
                elif row["content_hash"] == record.content_hash:
                    result.unchanged_conversations += 1
                    continue
                else:
                    result.updated_conversations += 1
                conn.execute(
                    """
                    INSERT INTO conversations (
                        conversation_id,
                        title,
                        created_at,
                        updated_at,
                        content_hash,
                        payload
                    ) VALUES (?, ?, ?, ?, ?, ?)
                    ON CONFLICT(conversation_id) DO UPDATE SET
                        title = excluded.title,
                        created_at = excluded.created_at,
                        updated_at = excluded.updated_at,
                        content_hash = excluded.content_hash,
                        payload = excluded.payload
                    """,
                    (
                        record.conversation_id,
                        record.title,
                        record.created_at,
                        record.updated_at,
                        record.content_hash,
                        record.payload,
                    ),
                )
            # Commit inside lock to keep the batch atomic
            conn.commit()
        logger.info(
            "conversations_stored",
            new=result.new_conversations,
            updated=result.updated_conversations,
            unchanged=result.unchanged_conversations,
        )
        return result

    def list_conversations(self) -> list[dict[str, Any]]:
        """All conversations, oldest first."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT payload FROM conversations ORDER BY created_at IS NULL, created_at, rowid"
            ).fetchall()
        return [loads(row["payload"]) for row in rows]

    def count(self) -> int:
        with self._connect() as conn:
            row = conn.execute("SELECT COUNT(*) FROM conversations").fetchone()
        return int(row[0])

    def clear(self) -> None:
        with _WRITE_LOCK, self._connect() as conn:
            conn.execute("DELETE FROM conversations")
            conn.commit()
        logger.info("store_cleared", path=str(self.path))


__all__ = [
    "ConversationStore",
    "StoreResult",
    "StoredConversation",
]
