from __future__ import annotations

from typing import Any

from pandastate.models import Action, Entry, Message
from pandastate.state.ordering import order_entries, relevant_entries
from pandastate.state.policy import initial_fields, merge_fields

SCHEMA = "venues_0020c65567ae37efea293e34a9c7d13f8f2bf23dbdc3b5c7b9ab46293111c48fc78b"


def _entry(seq_num: int, entry_hash: str, fields: dict[str, Any] | None = None) -> Entry:
    message = None
    if fields is not None:
        message = Message(action=Action.CREATE, schema_id=SCHEMA, fields=fields)
    return Entry(seq_num=seq_num, author="panda", hash=entry_hash, message=message)


def test_order_entries_sorts_by_seq_num() -> None:
    entries = [_entry(3, "c"), _entry(1, "a"), _entry(2, "b")]

    assert [e.seq_num for e in order_entries(entries)] == [1, 2, 3]


def test_order_entries_is_stable_for_equal_seq_num() -> None:
    entries = [_entry(2, "second-in"), _entry(1, "first"), _entry(2, "third-in")]

    assert [e.hash for e in order_entries(entries)] == ["first", "second-in", "third-in"]


def test_order_entries_does_not_mutate_input() -> None:
    entries = [_entry(2, "b"), _entry(1, "a")]

    order_entries(entries)

    assert [e.hash for e in entries] == ["b", "a"]


def test_relevant_entries_drops_message_less_entries() -> None:
    entries = [_entry(1, "a", {"x": 1}), _entry(2, "b"), _entry(3, "c", {"y": 2})]

    assert [e.hash for e in relevant_entries(entries)] == ["a", "c"]


def test_merge_is_shallow_overwrite() -> None:
    current = {"a": 1, "nested": {"keep": True, "x": 1}}

    merged = merge_fields(current, {"nested": {"x": 2}, "b": 3})

    # Nested values are replaced wholesale, never deep-merged.
    assert merged == {"a": 1, "nested": {"x": 2}, "b": 3}


def test_merge_keeps_absent_fields_and_returns_new_dict() -> None:
    current = {"a": 1, "b": 2}

    merged = merge_fields(current, {"b": 20})

    assert merged == {"a": 1, "b": 20}
    assert current == {"a": 1, "b": 2}
    assert merged is not current


def test_merge_with_no_incoming_fields() -> None:
    assert merge_fields({"a": 1}, None) == {"a": 1}
    assert merge_fields({"a": 1}, {}) == {"a": 1}


def test_merged_values_do_not_alias_incoming() -> None:
    incoming = {"tags": ["a"]}

    merged = initial_fields(incoming)
    incoming["tags"].append("b")

    assert merged == {"tags": ["a"]}
