from __future__ import annotations

import pytest

from pandastate.config import MaterializerConfig
from pandastate.exceptions import PandaStateConfigError

_ENV_KEYS = (
    "PANDASTATE_INCLUDE_DELETED",
    "PANDASTATE_ENFORCE_SCHEMA",
    "PANDASTATE_TRACE_ENABLED",
    "PANDASTATE_LOG_MAX_STRING",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_env() -> None:
    config = MaterializerConfig.from_env()

    assert config == MaterializerConfig()
    assert config.include_deleted is True
    assert config.enforce_schema is False
    assert config.trace_enabled is False
    assert config.log_max_string == 512


def test_flags_read_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PANDASTATE_INCLUDE_DELETED", "no")
    monkeypatch.setenv("PANDASTATE_ENFORCE_SCHEMA", "true")
    monkeypatch.setenv("PANDASTATE_TRACE_ENABLED", "1")
    monkeypatch.setenv("PANDASTATE_LOG_MAX_STRING", " 64 ")

    config = MaterializerConfig.from_env()

    assert config.include_deleted is False
    assert config.enforce_schema is True
    assert config.trace_enabled is True
    assert config.log_max_string == 64


def test_unrecognized_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PANDASTATE_ENFORCE_SCHEMA", "maybe")

    assert MaterializerConfig.from_env().enforce_schema is False


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PANDASTATE_TRACE_ENABLED", "true")
    monkeypatch.setenv("PANDASTATE_LOG_MAX_STRING", "64")

    config = MaterializerConfig.from_env(trace_enabled=False, log_max_string=8)

    assert config.trace_enabled is False
    assert config.log_max_string == 8


def test_invalid_int_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PANDASTATE_LOG_MAX_STRING", "lots")

    with pytest.raises(PandaStateConfigError):
        MaterializerConfig.from_env()
