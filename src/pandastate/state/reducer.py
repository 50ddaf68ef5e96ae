"""Instance state machine.

Each object id moves through ``absent -> live -> deleted``; deleted is
terminal. :func:`apply_entry` is the pure transition function and
:func:`fold_entries` threads an explicit accumulator through it.

Objects are keyed by the hash of the entry *currently being folded*, not
by a reference back to the originating create entry. Updates and deletes
therefore only reach an instance when they carry the same hash as its
create entry.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import reduce

from pandastate._redact import redact_for_log, short_id
from pandastate.config import MaterializerConfig
from pandastate.exceptions import SchemaMismatchError, UnknownInstanceError, UnsupportedActionError
from pandastate.models.entry import Action, Entry, Message, parse_action
from pandastate.models.instance import Instance, InstanceMeta
from pandastate.state.policy import initial_fields, is_terminal, merge_fields

_logger = logging.getLogger(__name__)


def _create(entry: Entry, message: Message) -> Instance:
    return Instance(
        fields=initial_fields(message.fields),
        meta=InstanceMeta(
            author=entry.author,
            schema_id=message.schema_id,
            hash=entry.hash,
            entries=(entry,),
        ),
    )


def apply_entry(current: Instance | None, entry: Entry, *, enforce_schema: bool = False) -> Instance | None:
    """Return the instance state after applying *entry* to *current*.

    *current* is never mutated; a changed state is a new :class:`Instance`.
    Tombstones and message-less entries return *current* unchanged.
    """
    message = entry.message
    if message is None:
        return current

    # Checked before any state lookup: an unknown action fails for absent, live and deleted ids alike.
    try:
        action = parse_action(message.action)
    except UnsupportedActionError:
        raise UnsupportedActionError(message.action, seq_num=entry.seq_num, entry_hash=entry.hash) from None

    if is_terminal(current):
        return current

    if action is Action.CREATE:
        # A create on a live id starts over; prior history is dropped.
        return _create(entry, message)

    if current is None:
        raise UnknownInstanceError(entry.hash, action=action, seq_num=entry.seq_num)

    if enforce_schema and message.schema_id != current.meta.schema_id:
        raise SchemaMismatchError(
            current.id,
            expected=current.meta.schema_id,
            actual=message.schema_id,
            seq_num=entry.seq_num,
        )

    history = (*current.meta.entries, entry)
    if action is Action.UPDATE:
        return current.model_copy(
            update={
                "fields": merge_fields(current.fields, message.fields),
                "meta": current.meta.model_copy(update={"edited": True, "entries": history}),
            }
        )
    return current.model_copy(
        update={
            "fields": {},
            "meta": current.meta.model_copy(update={"deleted": True, "entries": history}),
        }
    )


def _trace(before: Instance | None, after: Instance | None, entry: Entry, config: MaterializerConfig) -> None:
    action = entry.action
    if after is before:
        _logger.debug(
            "Ignoring %s seq=%d for deleted instance %s",
            action,
            entry.seq_num,
            short_id(entry.hash),
        )
        return
    fields = after.fields if after is not None else {}
    _logger.debug(
        "Applied %s seq=%d instance=%s author=%s fields=%s",
        action,
        entry.seq_num,
        short_id(entry.hash),
        short_id(entry.author),
        redact_for_log(fields, max_string=config.log_max_string),
    )


def fold_entries(entries: Iterable[Entry], *, config: MaterializerConfig | None = None) -> dict[str, Instance]:
    """Fold ordered, relevant entries into an ``id -> Instance`` mapping.

    The first failing entry aborts the fold; no partial mapping escapes.
    """
    cfg = config or MaterializerConfig()

    def step(acc: dict[str, Instance], entry: Entry) -> dict[str, Instance]:
        before = acc.get(entry.hash)
        after = apply_entry(before, entry, enforce_schema=cfg.enforce_schema)
        if cfg.trace_enabled:
            _trace(before, after, entry, cfg)
        if after is not None:
            acc[entry.hash] = after
        return acc

    return reduce(step, entries, {})
