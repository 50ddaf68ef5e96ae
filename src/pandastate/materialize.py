"""Materialization entry point.

This module centralizes the pipeline every caller goes through:

- coerce incoming records into typed :class:`~pandastate.models.Entry` values
- order them by ``seq_num``
- drop entries without a message
- fold the rest into an ``id -> Instance`` mapping

Each call recomputes the projection from scratch; nothing survives between
calls, so the same entries always yield the same mapping.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from pandastate.config import MaterializerConfig
from pandastate.exceptions import MalformedEntryError, MalformedMessageError
from pandastate.models.entry import Entry
from pandastate.models.instance import Instance
from pandastate.state.ordering import order_entries, relevant_entries
from pandastate.state.query import filter_instances
from pandastate.state.reducer import fold_entries

_logger = logging.getLogger(__name__)

EntryLike = Entry | Mapping[str, Any]


def coerce_entry(record: EntryLike) -> Entry:
    """Return *record* as an :class:`Entry`, validating mappings.

    Pydantic validation failures are re-raised as :class:`MalformedMessageError`
    when they concern the message payload, otherwise as :class:`MalformedEntryError`.
    """
    if isinstance(record, Entry):
        return record
    try:
        return Entry.model_validate(record)
    except ValidationError as exc:
        errors = exc.errors()
        in_message = bool(errors) and all(err["loc"][:1] == ("message",) for err in errors)
        error_cls = MalformedMessageError if in_message else MalformedEntryError
        raise error_cls(f"Invalid entry record: {exc.error_count()} validation error(s): {errors[0]['msg']}") from exc


def materialize_entries(
    entries: Iterable[EntryLike],
    *,
    config: MaterializerConfig | None = None,
) -> dict[str, Instance]:
    """Fold a collection of entries into instances keyed by object id.

    Raises a :class:`~pandastate.exceptions.MaterializationError` subclass for the
    whole call on the first unsupported action, unknown instance or malformed record.
    """
    cfg = config or MaterializerConfig()
    typed = [coerce_entry(record) for record in entries]
    _logger.debug("Materialising %d entries", len(typed))

    instances = fold_entries(relevant_entries(order_entries(typed)), config=cfg)
    if not cfg.include_deleted:
        instances = filter_instances(instances, include_deleted=False)

    _logger.debug("Materialisation yields %d instances", len(instances))
    return instances


def materialize_records(
    entries: Iterable[EntryLike],
    *,
    config: MaterializerConfig | None = None,
) -> dict[str, dict[str, Any]]:
    """Like :func:`materialize_entries`, returning flat ``{...fields, "_meta": ...}`` records."""
    return {
        instance_id: instance.to_record()
        for instance_id, instance in materialize_entries(entries, config=config).items()
    }
