"""Log entry and message records.

Entries arrive already decoded and already verified by the caller: this
module only checks structural shape. Action strings are parsed into
:class:`Action` here, at the boundary, so nothing downstream ever
dispatches on a raw string.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import Field, model_validator

from pandastate.exceptions import MalformedEntryError, MalformedMessageError, UnsupportedActionError
from pandastate.models._base import PandaBaseModel, is_blank


class Action(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


def parse_action(value: Any) -> Action:
    """Parse a wire action string, raising :class:`UnsupportedActionError` for anything else."""
    if isinstance(value, Action):
        return value
    try:
        return Action(value)
    except ValueError:
        raise UnsupportedActionError(value) from None


class Message(PandaBaseModel):
    """Mutation payload carried by an entry."""

    action: Action
    schema_id: str = Field(alias="schema")
    """Identifier of the object's data shape."""

    fields: dict[str, Any] | None = None
    """Field values; always ``None`` for deletes."""

    @model_validator(mode="before")
    @classmethod
    def _check_structure(cls, values: Any) -> Any:
        if not isinstance(values, Mapping):
            return values
        working = dict(values)

        if "action" not in working:
            raise MalformedMessageError("Message has no action")
        action = parse_action(working["action"])
        working["action"] = action

        schema = working.get("schema", working.get("schema_id"))
        if is_blank(schema) or not isinstance(schema, str):
            raise MalformedMessageError(f"{action} message has no schema")

        if action is Action.DELETE:
            working["fields"] = None
        else:
            fields = working.get("fields")
            if not isinstance(fields, Mapping):
                raise MalformedMessageError(f"{action} message requires a fields mapping")
            if not fields:
                raise MalformedMessageError(f"{action} message has empty fields")
            working["fields"] = dict(fields)
        return working


class Entry(PandaBaseModel):
    """One sequence-numbered unit of an author's append-only log."""

    seq_num: int
    author: str
    hash: str
    """Content-derived identifier of this entry."""

    message: Message | None = None
    log_id: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _lift_encoded(cls, values: Any) -> Any:
        """Accept node records that nest author and hash under ``encoded``."""
        if not isinstance(values, Mapping):
            return values
        working = dict(values)
        encoded = working.pop("encoded", None)
        if isinstance(encoded, Mapping):
            if is_blank(working.get("author")):
                working["author"] = encoded.get("author")
            if is_blank(working.get("hash")):
                working["hash"] = encoded.get("entryHash", encoded.get("entry_hash"))

        for key in ("author", "hash"):
            if is_blank(working.get(key)):
                raise MalformedEntryError(f"Entry has no {key}")
        return working

    @model_validator(mode="after")
    def _check_seq_num(self) -> Entry:
        if self.seq_num < 0:
            raise MalformedEntryError(
                f"Entry seq_num must be non-negative, got {self.seq_num}",
                seq_num=self.seq_num,
                entry_hash=self.hash,
            )
        return self

    @property
    def action(self) -> Action | None:
        """Action of the carried message, ``None`` for bookkeeping entries."""
        return self.message.action if self.message is not None else None
