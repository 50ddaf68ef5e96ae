"""Base model shared by all pandastate records.

Every record inherits from :class:`PandaBaseModel` which provides:

* ``alias_generator=to_camel`` so camelCase keys from node JSON
  (``seqNum``, ``logId``) map automatically to snake_case fields.
* ``frozen=True``; records are treated as immutable once handed to
  the materializer.
* ``populate_by_name=True`` so tests and callers can construct records
  with plain keyword arguments.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PandaBaseModel(BaseModel):
    """Base for entry, message and instance records."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump using the camelCase wire names."""
        return self.model_dump(by_alias=True, mode="json")


def is_blank(value: Any) -> bool:
    """Return ``True`` for ``None`` and whitespace-only strings."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()
