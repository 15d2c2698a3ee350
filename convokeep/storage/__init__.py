"""Persistent conversation storage."""

from convokeep.storage.store import ConversationStore, StoredConversation, StoreResult

__all__ = ["ConversationStore", "StoreResult", "StoredConversation"]
