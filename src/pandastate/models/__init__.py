"""Entry, message and instance records."""

from pandastate.models._base import PandaBaseModel
from pandastate.models.entry import Action, Entry, Message, parse_action
from pandastate.models.instance import Instance, InstanceMeta

__all__ = [
    "Action",
    "Entry",
    "Instance",
    "InstanceMeta",
    "Message",
    "PandaBaseModel",
    "parse_action",
]
