"""Snapshot codec: command state <-> slot payload.

The payload is a UTF-8 JSON object holding the kind tag and every dataclass
field of the state, with steps flattened to ``[action, message]`` pairs.
Nothing transient (console, slot, texts) is ever written.
"""

from __future__ import annotations

import json
from dataclasses import fields

from commands.base import ACTIONS, CommandState, Step
from commands.registry import COMMAND_REGISTRY
from core.exceptions import SnapshotDecodeError


def encode_snapshot(state: CommandState) -> bytes:
    record = {"kind": state.kind}
    for f in fields(state):
        value = getattr(state, f.name)
        if f.name == "schedule":
            value = [[step.action, step.message] for step in value]
        record[f.name] = value
    return json.dumps(record, separators=(",", ":"), sort_keys=True).encode("utf-8")


def decode_snapshot(payload: bytes) -> CommandState:
    try:
        record = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SnapshotDecodeError(
            f"Snapshot is not valid JSON: {exc}", payload=payload
        ) from exc
    if not isinstance(record, dict):
        raise SnapshotDecodeError("Snapshot must be a JSON object", payload=payload)

    kind = record.pop("kind", None)
    spec = COMMAND_REGISTRY.get(kind) if isinstance(kind, str) else None
    if spec is None:
        raise SnapshotDecodeError(f"Unknown command kind {kind!r}", payload=payload)

    expected = {f.name for f in fields(spec.state_type)}
    if set(record) != expected:
        raise SnapshotDecodeError(
            f"Snapshot fields {sorted(record)} do not match "
            f"'{kind}' fields {sorted(expected)}",
            payload=payload,
        )

    if not isinstance(record["schedule"], list):
        raise SnapshotDecodeError("Snapshot schedule must be a list", payload=payload)
    record["schedule"] = [_decode_step(item, payload) for item in record["schedule"]]
    state = spec.state_type(**record)
    cursor_ok = isinstance(state.cursor, int) and 0 <= state.cursor <= len(
        state.schedule
    )
    if not cursor_ok:
        raise SnapshotDecodeError(
            f"Cursor {state.cursor} outside schedule of length {len(state.schedule)}",
            payload=payload,
        )
    return state


def _decode_step(item, payload: bytes) -> Step:
    if (
        not isinstance(item, list)
        or len(item) != 2
        or item[0] not in ACTIONS
        or not (item[1] is None or isinstance(item[1], str))
    ):
        raise SnapshotDecodeError(f"Malformed schedule entry {item!r}", payload=payload)
    return Step(item[0], item[1])
