"""pandastate - materialize p2panda log entries into instance snapshots."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pandastate")
except PackageNotFoundError:
    __version__ = "0+local"
from pandastate.config import MaterializerConfig
from pandastate.exceptions import (
    MalformedEntryError,
    MalformedMessageError,
    MaterializationError,
    PandaStateConfigError,
    PandaStateError,
    SchemaMismatchError,
    UnknownInstanceError,
    UnsupportedActionError,
)
from pandastate.materialize import materialize_entries, materialize_records
from pandastate.models import Action, Entry, Instance, InstanceMeta, Message
from pandastate.state.query import filter_instances

__all__ = [
    "__version__",
    "Action",
    "Entry",
    "Instance",
    "InstanceMeta",
    "MalformedEntryError",
    "MalformedMessageError",
    "MaterializationError",
    "MaterializerConfig",
    "Message",
    "PandaStateConfigError",
    "PandaStateError",
    "SchemaMismatchError",
    "UnknownInstanceError",
    "UnsupportedActionError",
    "filter_instances",
    "materialize_entries",
    "materialize_records",
]
