"""Materialized instance records."""

from __future__ import annotations

import copy
from typing import Any

from pydantic import Field

from pandastate.models._base import PandaBaseModel
from pandastate.models.entry import Entry


class InstanceMeta(PandaBaseModel):
    """Identity and history of one materialized object."""

    author: str
    schema_id: str = Field(alias="schema")
    hash: str
    """Identity of the object; the mapping key it is stored under."""

    deleted: bool = False
    edited: bool = False
    entries: tuple[Entry, ...] = ()
    """Entries that contributed to this instance, in ``seq_num`` order."""


class Instance(PandaBaseModel):
    """Current field values of one object plus its metadata."""

    fields: dict[str, Any] = Field(default_factory=dict)
    meta: InstanceMeta = Field(alias="_meta")

    @property
    def id(self) -> str:
        return self.meta.hash

    @property
    def schema_id(self) -> str:
        return self.meta.schema_id

    @property
    def author(self) -> str:
        return self.meta.author

    @property
    def is_deleted(self) -> bool:
        return self.meta.deleted

    @property
    def is_edited(self) -> bool:
        return self.meta.edited

    def to_record(self) -> dict[str, Any]:
        """Flatten into the client record shape: field values plus a ``_meta`` key.

        ``_meta`` wins over a user field of the same name.
        """
        record = copy.deepcopy(self.fields)
        record["_meta"] = self.meta.model_dump(by_alias=True, mode="json")
        return record
