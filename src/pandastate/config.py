"""Materializer configuration for pandastate."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pandastate.exceptions import PandaStateConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise PandaStateConfigError(f"{name} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class MaterializerConfig:
    """Materializer configuration.

    Parameters
    ----------
    include_deleted : bool
        Keep tombstoned instances in the returned mapping. Defaults to ``True``.
    enforce_schema : bool
        Reject updates and deletes whose schema differs from the schema the
        instance was created with. Off by default.
    trace_enabled : bool
        Emit one DEBUG log line per state transition.
    log_max_string : int
        Maximum string length kept in traced field payloads.
    """

    include_deleted: bool = True
    enforce_schema: bool = False
    trace_enabled: bool = False
    log_max_string: int = 512

    @classmethod
    def from_env(cls, **overrides: Any) -> MaterializerConfig:
        """Create configuration from ``PANDASTATE_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_BOOL_MAP = {
            "PANDASTATE_INCLUDE_DELETED": ("include_deleted", True),
            "PANDASTATE_ENFORCE_SCHEMA": ("enforce_schema", False),
            "PANDASTATE_TRACE_ENABLED": ("trace_enabled", False),
        }
        for env_key, (field_name, default) in _ENV_BOOL_MAP.items():
            if field_name not in overrides:
                config_kwargs[field_name] = _env_bool(env.get(env_key), default)

        max_string_env = env.get("PANDASTATE_LOG_MAX_STRING")
        if max_string_env is not None and "log_max_string" not in overrides:
            config_kwargs["log_max_string"] = _env_int("PANDASTATE_LOG_MAX_STRING", max_string_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
