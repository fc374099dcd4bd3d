"""Data models for the workout log."""

from workout_log.models.coordinates import Coordinates
from workout_log.models.enums import SessionState, WorkoutKind
from workout_log.models.workout import (
    CyclingRecord,
    RunningRecord,
    WorkoutRecord,
    create_workout,
    parse_kind,
)

__all__ = [
    "Coordinates",
    "CyclingRecord",
    "RunningRecord",
    "SessionState",
    "WorkoutKind",
    "WorkoutRecord",
    "create_workout",
    "parse_kind",
]
