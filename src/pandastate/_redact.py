"""Helpers for safe debug logging.

Entries carry hex-encoded entry bytes, payload bytes and signatures that
are large and useless in logs. This module redacts those fields, collapses
long hex blobs and shortens hashes/public keys before they are emitted in
DEBUG logs.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

_REDACTED_KEYS: frozenset[str] = frozenset(
    {
        "signature",
        "privatekey",
        "entrybytes",
        "payloadbytes",
        "operationbytes",
    }
)

# Hashes are 68 hex chars (yasmf), public keys 64; anything much longer is a blob.
_HEX_BLOB = re.compile(r"^[0-9a-fA-F]{96,}$")


def short_id(value: str | None, *, keep: int = 8) -> str:
    """Abbreviate a hash or public key for log lines (``0020ab12…9f3c``)."""
    if not value:
        return "<none>"
    if len(value) <= keep * 2 + 1:
        return value
    return f"{value[:keep]}…{value[-4:]}"


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a redacted copy of *value* suitable for debug logs."""
    if _depth > 20:
        return "<max-depth>"

    if value is None or isinstance(value, (bool, int, float)):
        return value

    if isinstance(value, str):
        if _HEX_BLOB.match(value):
            return f"<hex:{len(value) // 2}b>"
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (bytes, bytearray)):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if key.lower() in _REDACTED_KEYS:
                redacted[key] = "<redacted>"
            else:
                redacted[key] = redact_for_log(v, max_string=max_string, _depth=_depth + 1)
        return redacted

    if isinstance(value, Sequence):
        return [redact_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    return repr(value)
