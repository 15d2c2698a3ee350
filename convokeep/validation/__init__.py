"""Validation utilities for ConvoKeep backups."""

from convokeep.validation.backup_validator import (
    IssueCode,
    SchemaValidator,
    ValidationIssue,
    ValidationReport,
    validate_backup,
)

__all__ = [
    "IssueCode",
    "SchemaValidator",
    "ValidationIssue",
    "ValidationReport",
    "validate_backup",
]
