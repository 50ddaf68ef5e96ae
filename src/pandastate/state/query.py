"""Read-only projections over a materialized instance mapping."""

from __future__ import annotations

from collections.abc import Mapping

from pandastate.models.instance import Instance


def filter_instances(
    instances: Mapping[str, Instance],
    *,
    schema: str | None = None,
    author: str | None = None,
    include_deleted: bool = True,
) -> dict[str, Instance]:
    """Return the instances matching every given criterion, in input order."""
    return {
        instance_id: instance
        for instance_id, instance in instances.items()
        if (schema is None or instance.schema_id == schema)
        and (author is None or instance.author == author)
        and (include_deleted or not instance.is_deleted)
    }
