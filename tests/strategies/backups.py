"""Hypothesis strategies for ConvoKeep backup documents.

Valid strategies produce documents that must pass validation; the damaged
conversation strategy knocks out required fields at random so tests can
count the expected errors.
"""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

_INT64 = st.integers(min_value=-(2**63), max_value=2**63 - 1)

_scalars = st.one_of(
    st.none(),
    st.booleans(),
    _INT64,
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=40),
)


def json_value_strategy() -> st.SearchStrategy[Any]:
    """Arbitrary JSON-compatible values (what orjson can round-trip)."""
    return st.recursive(
        _scalars,
        lambda children: st.one_of(
            st.lists(children, max_size=4),
            st.dictionaries(st.text(max_size=10), children, max_size=4),
        ),
        max_leaves=12,
    )


@st.composite
def message_strategy(draw: st.DrawFn) -> dict[str, Any]:
    """Messages are opaque to the importer; any JSON object will do."""
    message: dict[str, Any] = {
        "role": draw(st.sampled_from(["user", "assistant", "system", "tool"])),
        "content": draw(st.text(max_size=200)),
    }
    extra = draw(st.dictionaries(st.sampled_from(["timestamp", "metadata", "model"]), json_value_strategy(), max_size=2))
    message.update(extra)
    return message


@st.composite
def conversation_strategy(draw: st.DrawFn) -> dict[str, Any]:
    """A conversation that satisfies every native-schema rule."""
    return {
        "conversation_id": draw(st.uuids()).hex,
        "title": draw(st.text(min_size=1, max_size=80)),
        "created_at": draw(st.datetimes()).isoformat(),
        "source": draw(st.sampled_from(["chatgpt", "claude", "convokeep"])),
        "messages": draw(st.lists(message_strategy(), max_size=5)),
        "metadata": draw(st.dictionaries(st.text(max_size=10), json_value_strategy(), max_size=3)),
    }


_MISSING = object()

_falsy_identifiers = st.sampled_from([_MISSING, None, "", 0, False])
_bad_messages = st.sampled_from([_MISSING, None, "messages", {}, 0, {"role": "user"}])


@st.composite
def damaged_conversation_strategy(draw: st.DrawFn) -> dict[str, Any]:
    """A conversation whose required fields are each independently valid or broken."""
    conversation: dict[str, Any] = {}
    fields = {
        "conversation_id": st.one_of(st.uuids().map(lambda value: value.hex), _falsy_identifiers),
        "title": st.one_of(st.text(min_size=1, max_size=40), _falsy_identifiers),
        "messages": st.one_of(st.lists(message_strategy(), max_size=2), _bad_messages),
    }
    for name, strategy in fields.items():
        value = draw(strategy)
        if value is not _MISSING:
            conversation[name] = value
    return conversation


@st.composite
def native_backup_strategy(
    draw: st.DrawFn,
    min_conversations: int = 0,
    max_conversations: int = 5,
) -> dict[str, Any]:
    """A complete, valid backup envelope."""
    conversations = draw(
        st.lists(conversation_strategy(), min_size=min_conversations, max_size=max_conversations)
    )
    backup: dict[str, Any] = {
        "source": "convokeep",
        "version": draw(st.sampled_from(["1.0", "1.1", "2", 1])),
        "conversations": conversations,
    }
    if draw(st.booleans()):
        backup["conversation_count"] = len(conversations)
    if draw(st.booleans()):
        backup["exported_at"] = draw(st.datetimes()).isoformat()
    if draw(st.booleans()):
        backup["schema_version"] = 2
    return backup
