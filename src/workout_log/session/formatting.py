"""Presentation helpers for markers and list entries."""

from __future__ import annotations

from typing import NamedTuple

from workout_log.models.enums import KIND_ICONS
from workout_log.models.workout import CyclingRecord, RunningRecord, WorkoutRecord


class EntryRow(NamedTuple):
    icon: str
    value: str
    unit: str


def _number(value: float) -> str:
    """Drop a trailing ``.0`` so 24.0 shows as '24'."""
    return f"{value:g}"


def popup_content(record: WorkoutRecord) -> str:
    """Marker popup text, e.g. '🏃‍♂️ Running on April 14'."""
    return f"{KIND_ICONS[record.kind]} {record.description}"


def popup_class(record: WorkoutRecord) -> str:
    return f"{record.kind.value}-popup"


def format_entry(record: WorkoutRecord) -> list[EntryRow]:
    """Detail rows for a list entry, in display order."""
    rows = [
        EntryRow(KIND_ICONS[record.kind], _number(record.distance_km), "km"),
        EntryRow("⏱", _number(record.duration_min), "min"),
    ]
    if isinstance(record, RunningRecord):
        rows.append(EntryRow("⚡️", f"{record.pace_min_per_km:.1f}", "min/km"))
        rows.append(EntryRow("🦶🏼", str(record.cadence_spm), "spm"))
    elif isinstance(record, CyclingRecord):
        rows.append(EntryRow("⚡️", f"{record.speed_km_per_h:.2f}", "km/h"))
        rows.append(EntryRow("⛰", _number(record.elevation_gain_m), "m"))
    return rows
