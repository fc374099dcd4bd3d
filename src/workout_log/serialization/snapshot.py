"""Snapshot serialization for workout records.

Converts records to plain JSON-compatible dicts and rebuilds typed records
from them. Derived values are never read back: pace, speed and description
are recomputed by the record constructors.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
import logging
import math
from datetime import datetime
from typing import Any, Iterable

from workout_log.exceptions import ValidationError
from workout_log.models.coordinates import Coordinates
from workout_log.models.workout import (
    KIND_INPUT_FIELDS,
    WorkoutRecord,
    create_workout,
    parse_kind,
)

logger = logging.getLogger(__name__)

# Field names written by the browser version of the app, mapped to ours.
_LEGACY_ALIASES = {
    "type": "kind",
    "date": "created_at",
    "distance": "distance_km",
    "duration": "duration_min",
    "cadence": "cadence_spm",
    "elevationGain": "elevation_gain_m",
    "clicks": "interaction_count",
}


def record_to_dict(record: WorkoutRecord) -> dict[str, Any]:
    """Serialize one record, including its ``kind`` discriminant."""
    data: dict[str, Any] = {
        "kind": record.kind.value,
        "id": record.id,
        "created_at": record.created_at.isoformat(),
        "coords": record.coords.as_pair(),
        "distance_km": record.distance_km,
        "duration_min": record.duration_min,
        "interaction_count": record.interaction_count,
    }
    input_field = KIND_INPUT_FIELDS[record.kind]
    data[input_field] = getattr(record, input_field)
    return data


def record_from_dict(data: dict[str, Any]) -> WorkoutRecord:
    """Rehydrate a typed record from a snapshot entry.

    Raises:
        ValidationError: if the entry lacks a usable kind, coordinates or
            measured inputs.
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Snapshot entry must be an object, got {type(data).__name__}")
    fields = _normalize_keys(data)

    kind = parse_kind(fields.get("kind"))
    input_field = KIND_INPUT_FIELDS[kind]
    missing = [
        name for name in ("coords", "distance_km", "duration_min", input_field)
        if fields.get(name) is None
    ]
    if missing:
        raise ValidationError(f"Snapshot entry missing {', '.join(missing)}", missing[0])

    return create_workout(
        kind,
        Coordinates.from_pair(fields["coords"]),
        _as_number(fields["distance_km"], "distance_km"),
        _as_number(fields["duration_min"], "duration_min"),
        _as_number(fields[input_field], input_field),
        record_id=_optional_id(fields.get("id")),
        created_at=_parse_timestamp(fields.get("created_at")),
        interaction_count=_parse_count(fields.get("interaction_count")),
    )


def to_snapshot(records: Iterable[WorkoutRecord]) -> list[dict[str, Any]]:
    """Serialize an ordered collection to a list of dicts."""
    return [record_to_dict(r) for r in records]


def to_snapshot_string(records: Iterable[WorkoutRecord]) -> str:
    """Serialize an ordered collection to a JSON string."""
    return json.dumps(to_snapshot(records), ensure_ascii=False)


def from_snapshot(entries: Iterable[Any]) -> list[WorkoutRecord]:
    """Rehydrate every valid entry, preserving order.

    Malformed entries are skipped with a warning so one bad record does not
    cost the rest of the session.
    """
    records: list[WorkoutRecord] = []
    for index, entry in enumerate(entries):
        try:
            records.append(record_from_dict(entry))
        except ValidationError as exc:
            logger.warning("Skipping snapshot entry %d: %s", index, exc)
    return records


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _normalize_keys(data: dict[str, Any]) -> dict[str, Any]:
    fields = dict(data)
    for legacy, current in _LEGACY_ALIASES.items():
        if legacy in fields and current not in fields:
            fields[current] = fields.pop(legacy)
    return fields


def _as_number(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be numeric, got {value!r}", name)
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValidationError(f"{name} must be numeric, got {value!r}", name) from exc


def _optional_id(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _parse_timestamp(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    # JavaScript's toISOString() ends in "Z"
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.warning("Unparseable created_at %r, using current time", value)
        return None


def _parse_count(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    try:
        finite = math.isfinite(value)
    except OverflowError:
        finite = False
    if not finite or value < 0:
        return 0
    return int(value)
