"""Replay ordering and relevance filtering."""

from __future__ import annotations

from collections.abc import Iterable
from operator import attrgetter

from pandastate.models.entry import Entry


def order_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Return a new list sorted by ascending ``seq_num``.

    ``sorted`` is stable, so entries sharing a ``seq_num`` keep their input order.
    """
    return sorted(entries, key=attrgetter("seq_num"))


def relevant_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Drop log bookkeeping entries that carry no message."""
    return [entry for entry in entries if entry.message is not None]
