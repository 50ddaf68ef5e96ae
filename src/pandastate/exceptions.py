"""Custom exception hierarchy for pandastate."""

from __future__ import annotations


class PandaStateError(Exception):
    """Base exception for all pandastate errors."""


class PandaStateConfigError(PandaStateError):
    """Invalid configuration (for example an unparsable environment value)."""


class MaterializationError(PandaStateError):
    """A materialization call was aborted.

    The whole call fails; no partial instance mapping is returned.
    """

    def __init__(
        self,
        message: str,
        *,
        seq_num: int | None = None,
        entry_hash: str | None = None,
    ) -> None:
        self.seq_num = seq_num
        self.entry_hash = entry_hash
        super().__init__(message)


class UnsupportedActionError(MaterializationError):
    """A message carried an action outside ``create``/``update``/``delete``."""

    def __init__(
        self,
        action: object,
        *,
        seq_num: int | None = None,
        entry_hash: str | None = None,
    ) -> None:
        self.action = action
        super().__init__(
            f"Unsupported message action: {action!r}",
            seq_num=seq_num,
            entry_hash=entry_hash,
        )


class UnknownInstanceError(MaterializationError):
    """An update or delete referenced an id with no live instance."""

    def __init__(
        self,
        instance_id: str,
        *,
        action: str = "",
        seq_num: int | None = None,
    ) -> None:
        self.instance_id = instance_id
        self.action = action
        super().__init__(
            f"Cannot {action or 'apply'} unknown instance {instance_id!r}",
            seq_num=seq_num,
            entry_hash=instance_id,
        )


class MalformedMessageError(MaterializationError):
    """A message lacks required structural fields."""


class MalformedEntryError(MaterializationError):
    """An entry record lacks required structural fields (seq_num, author, hash)."""


class SchemaMismatchError(MaterializationError):
    """An update or delete names a schema other than the instance's.

    Only raised when schema enforcement is enabled in
    :class:`pandastate.config.MaterializerConfig`.
    """

    def __init__(
        self,
        instance_id: str,
        *,
        expected: str,
        actual: str,
        seq_num: int | None = None,
    ) -> None:
        self.instance_id = instance_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Schema mismatch for instance {instance_id!r}: expected {expected!r}, got {actual!r}",
            seq_num=seq_num,
            entry_hash=instance_id,
        )
