"""Hypothesis strategies for ConvoKeep property-based testing.

Usage:
    from hypothesis import given
    from tests.strategies import native_backup_strategy

    @given(native_backup_strategy())
    def test_backup_validates(backup):
        ...
"""

from tests.strategies.backups import (
    conversation_strategy,
    damaged_conversation_strategy,
    json_value_strategy,
    message_strategy,
    native_backup_strategy,
)

__all__ = [
    "conversation_strategy",
    "damaged_conversation_strategy",
    "json_value_strategy",
    "message_strategy",
    "native_backup_strategy",
]
