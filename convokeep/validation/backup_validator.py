"""Validation of ConvoKeep backup documents against the native schema.

Every rule is checked and every violation is recorded, so a user fixing a
broken backup sees all of its problems in one pass.

Usage:
    report = SchemaValidator().validate(document)

    if not report.is_valid:
        for error in report.errors:
            print(error)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from convokeep.errors import InvalidBackupError
from convokeep.lib.json import dumps
from convokeep.schemas.backup import NATIVE_SOURCE, BackupEnvelope, ConversationFields


class IssueCode(str, Enum):
    INVALID_SOURCE = "invalid_source"
    MISSING_VERSION = "missing_version"
    INVALID_CONVERSATIONS = "invalid_conversations"
    COUNT_MISMATCH = "count_mismatch"
    MISSING_CONVERSATION_ID = "missing_conversation_id"
    MISSING_TITLE = "missing_title"
    INVALID_MESSAGES = "invalid_messages"


@dataclass(frozen=True)
class ValidationIssue:
    """One violated rule."""

    code: IssueCode
    message: str
    index: Optional[int] = None
    """Position of the offending conversation, None for top-level rules."""


@dataclass(frozen=True)
class ValidationReport:
    """Result of checking a backup document.

    ``is_valid`` is derived from ``issues`` so the two can never disagree.
    The echo fields are filled in even for invalid documents.
    """

    issues: tuple[ValidationIssue, ...] = ()
    conversation_count: int = 0
    version: Any = None
    exported_at: Any = None

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def errors(self) -> list[str]:
        """Error messages in the order the rules were checked."""
        return [issue.message for issue in self.issues]

    def raise_if_invalid(self) -> None:
        """Raise InvalidBackupError carrying this report if validation failed."""
        if not self.is_valid:
            raise InvalidBackupError(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": self.errors,
            "conversation_count": self.conversation_count,
            "version": self.version,
            "exported_at": self.exported_at,
        }


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _describe(value: Any) -> str:
    try:
        return dumps(value)
    except TypeError:
        # orjson rejects integers beyond 64 bits
        return repr(value)


@dataclass
class _IssueCollector:
    issues: list[ValidationIssue] = field(default_factory=list)

    def add(self, code: IssueCode, message: str, index: Optional[int] = None) -> None:
        self.issues.append(ValidationIssue(code=code, message=message, index=index))


class SchemaValidator:
    """Checks parsed documents against the ConvoKeep backup schema.

    Holds no per-document state; ``validate`` never raises and never
    mutates its input.
    """

    def __init__(self, expected_source: str = NATIVE_SOURCE) -> None:
        self.expected_source = expected_source

    def validate(self, document: Any) -> ValidationReport:
        envelope = BackupEnvelope.from_raw(document)
        collector = _IssueCollector()

        self._check_envelope(envelope, collector)

        conversations: list[Any] = envelope.conversations if envelope.has_conversation_list else []
        for index, raw in enumerate(conversations):
            self._check_conversation(index, ConversationFields.from_raw(raw), collector)

        return ValidationReport(
            issues=tuple(collector.issues),
            conversation_count=len(conversations),
            version=envelope.version,
            exported_at=envelope.exported_at,
        )

    def _check_envelope(self, envelope: BackupEnvelope, collector: _IssueCollector) -> None:
        if envelope.source != self.expected_source:
            collector.add(
                IssueCode.INVALID_SOURCE,
                f'Missing or invalid "source" field (expected "{self.expected_source}")',
            )

        if not envelope.version:
            collector.add(IssueCode.MISSING_VERSION, 'Missing "version" field')

        if not envelope.has_conversation_list:
            collector.add(IssueCode.INVALID_CONVERSATIONS, 'Missing or invalid "conversations" array')
            return

        if envelope.declares_count:
            declared = envelope.conversation_count
            actual = len(envelope.conversations)
            if not (_is_number(declared) and declared == actual):
                collector.add(
                    IssueCode.COUNT_MISMATCH,
                    f"Conversation count mismatch: expected {_describe(declared)}, found {actual}",
                )

    def _check_conversation(self, index: int, conversation: ConversationFields, collector: _IssueCollector) -> None:
        if not conversation.conversation_id:
            collector.add(
                IssueCode.MISSING_CONVERSATION_ID,
                f"Conversation {index}: missing conversation_id",
                index,
            )
        if not conversation.title:
            collector.add(IssueCode.MISSING_TITLE, f"Conversation {index}: missing title", index)
        if not isinstance(conversation.messages, list):
            collector.add(
                IssueCode.INVALID_MESSAGES,
                f"Conversation {index}: missing or invalid messages array",
                index,
            )


def validate_backup(document: Any) -> ValidationReport:
    """Convenience function to validate a parsed backup document."""
    return SchemaValidator().validate(document)


__all__ = [
    "IssueCode",
    "SchemaValidator",
    "ValidationIssue",
    "ValidationReport",
    "validate_backup",
]
