#!/usr/bin/env python3
"""Materialize a JSON dump of entry records and print the resulting instances.

Usage
-----
    python scripts/materialize_dump.py entries.json
    python scripts/materialize_dump.py --schema <schema-hash> --live-only entries.json
    python scripts/materialize_dump.py --trace entries.json

The dump is a JSON list of entry records as returned by a node
(``seqNum``, ``encoded.author``, ``encoded.entryHash``, ``message``) or an
object with such a list under ``"entries"``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pandastate import MaterializerConfig, PandaStateError, filter_instances, materialize_entries


def _load_records(path: Path) -> list[dict[str, Any]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("entries", [])
    if not isinstance(data, list):
        raise ValueError(f"{path.name}: expected a list of entry records")
    return data


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Materialize p2panda entry records into instances.")
    parser.add_argument("dump", help="JSON file with entry records")
    parser.add_argument("--schema", help="Only print instances of this schema")
    parser.add_argument("--live-only", action="store_true", help="Omit deleted instances")
    parser.add_argument("--enforce-schema", action="store_true", help="Reject updates naming another schema")
    parser.add_argument("--trace", action="store_true", help="Log every state transition")
    args = parser.parse_args(argv)

    if args.trace:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # CLI flags only ever switch options on; unset flags defer to PANDASTATE_* env vars.
    overrides: dict[str, Any] = {}
    if args.enforce_schema:
        overrides["enforce_schema"] = True
    if args.trace:
        overrides["trace_enabled"] = True

    try:
        config = MaterializerConfig.from_env(**overrides)
        records = _load_records(Path(args.dump))
        instances = materialize_entries(records, config=config)
    except (PandaStateError, OSError, ValueError) as exc:
        print(f"Materialization failed: {exc}", file=sys.stderr)
        return 1

    instances = filter_instances(instances, schema=args.schema, include_deleted=not args.live_only)
    output = {instance_id: instance.to_record() for instance_id, instance in instances.items()}
    print(json.dumps(output, indent=2, default=str))
    print(f"\n{len(output)} instance(s) from {len(records)} entries.", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
