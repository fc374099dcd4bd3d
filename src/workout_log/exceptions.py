"""Custom exception hierarchy for the workout log."""

from __future__ import annotations


class WorkoutLogError(Exception):
    """Base exception for all workout_log errors."""


class ValidationError(WorkoutLogError, ValueError):
    """Form input or coordinates are malformed or out of range."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class SensorUnavailable(WorkoutLogError):
    """Geolocation was denied, is unsupported, or has no fix."""


class MapUnavailable(WorkoutLogError):
    """The map surface failed to initialise."""


class PersistenceUnavailable(WorkoutLogError):
    """The key-value medium is missing, full, or corrupted."""


class StaleReference(WorkoutLogError, LookupError):
    """A list entry references a workout id no longer in the session."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"No workout with id {record_id!r} in session")
        self.record_id = record_id
