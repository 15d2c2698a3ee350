"""Pydantic record types for untrusted ConvoKeep backup documents.

Every field is typed ``Any`` and optional: these models only give the
untrusted JSON a fixed set of named slots. Whether a slot holds an
acceptable value is decided by the validator, which can then report every
problem instead of stopping at the first pydantic error.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

NATIVE_SOURCE = "convokeep"
BACKUP_VERSION = "1.0"
SCHEMA_VERSION = 2


class ConversationFields(BaseModel):
    """Required slots of one conversation in the native schema."""

    conversation_id: Any = None
    title: Any = None
    messages: Any = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    @classmethod
    def from_raw(cls, raw: Any) -> ConversationFields:
        if not isinstance(raw, dict):
            return cls()
        return cls.model_validate(raw)


class BackupEnvelope(BaseModel):
    """Top-level slots of a backup file.

    ``conversation_count`` is checked when the key is present at all, so
    callers must use ``declares_count`` rather than testing the value.
    """

    source: Any = None
    version: Any = None
    conversations: Any = None
    conversation_count: Any = None
    exported_at: Any = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    @classmethod
    def from_raw(cls, raw: Any) -> BackupEnvelope:
        if not isinstance(raw, dict):
            return cls()
        return cls.model_validate(raw)

    @property
    def declares_count(self) -> bool:
        return "conversation_count" in self.model_fields_set

    @property
    def has_conversation_list(self) -> bool:
        return isinstance(self.conversations, list)


__all__ = [
    "BACKUP_VERSION",
    "BackupEnvelope",
    "ConversationFields",
    "NATIVE_SOURCE",
    "SCHEMA_VERSION",
]
