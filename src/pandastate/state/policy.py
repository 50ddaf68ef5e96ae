"""Deterministic field merge policy.

This module intentionally contains *no* action dispatch. The reducer
decides whether an entry applies; the policy only decides how field
values combine.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from pandastate.models.instance import Instance


def merge_fields(current: Mapping[str, Any], incoming: Mapping[str, Any] | None) -> dict[str, Any]:
    """Shallow-overwrite *current* with *incoming* into a new dict.

    Keys in *incoming* replace prior values wholesale, nested values
    included; keys it omits keep their prior value. Incoming values are
    deep-copied so the result never aliases a retained entry.
    """
    merged = dict(current)
    if incoming:
        merged.update(copy.deepcopy(dict(incoming)))
    return merged


def initial_fields(incoming: Mapping[str, Any] | None) -> dict[str, Any]:
    """Field values for a freshly created instance."""
    return merge_fields({}, incoming)


def is_terminal(instance: Instance | None) -> bool:
    """Tombstones accept no further entries."""
    return instance is not None and instance.meta.deleted
