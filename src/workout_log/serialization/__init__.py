"""Serialization module — workout snapshots to and from plain JSON."""

from workout_log.serialization.snapshot import (
    from_snapshot,
    record_from_dict,
    record_to_dict,
    to_snapshot,
    to_snapshot_string,
)

__all__ = [
    "from_snapshot",
    "record_from_dict",
    "record_to_dict",
    "to_snapshot",
    "to_snapshot_string",
]
