from __future__ import annotations

from pandastate import filter_instances, materialize_entries
from pandastate.models import Action, Entry, Instance, Message

VENUES = "venues_0020aa"
EVENTS = "events_0020bb"


def _entry(seq_num: int, action: Action, entry_hash: str, *, author: str = "panda", schema: str = VENUES) -> Entry:
    fields = None if action is Action.DELETE else {"seq": seq_num}
    return Entry(
        seq_num=seq_num,
        author=author,
        hash=entry_hash,
        message=Message(action=action, schema_id=schema, fields=fields),
    )


def _instances() -> dict[str, Instance]:
    return materialize_entries(
        [
            _entry(1, Action.CREATE, "0020cafe"),
            _entry(2, Action.CREATE, "0020gig", schema=EVENTS),
            _entry(3, Action.CREATE, "0020zoo", author="penguin"),
            _entry(4, Action.DELETE, "0020cafe"),
        ]
    )


def test_filter_by_schema() -> None:
    assert list(filter_instances(_instances(), schema=VENUES)) == ["0020cafe", "0020zoo"]


def test_filter_by_author() -> None:
    assert list(filter_instances(_instances(), author="penguin")) == ["0020zoo"]


def test_filter_live_only() -> None:
    assert list(filter_instances(_instances(), include_deleted=False)) == ["0020gig", "0020zoo"]


def test_filters_combine() -> None:
    live_venues = filter_instances(_instances(), schema=VENUES, include_deleted=False)
    assert list(live_venues) == ["0020zoo"]


def test_no_criteria_returns_copy() -> None:
    instances = _instances()
    result = filter_instances(instances)

    assert result == instances
    assert result is not instances
