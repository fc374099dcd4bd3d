"""Workout records — the logged activities and their derived metrics.

Records are frozen dataclasses. Measured inputs are validated and derived
values (pace, speed, description) are computed once in ``__post_init__``;
the only field that changes after construction is ``interaction_count``.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from workout_log.exceptions import ValidationError
from workout_log.models.coordinates import Coordinates
from workout_log.models.enums import MONTH_NAMES, WorkoutKind


def _new_id() -> str:
    return uuid.uuid4().hex


def _require_finite(value, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a finite number, got {value!r}", name)
    try:
        finite = math.isfinite(value)
    except OverflowError:
        finite = False
    if not finite:
        raise ValidationError(f"{name} must be a finite number, got {value!r}", name)
    return value


def _require_positive(value, name: str) -> float:
    _require_finite(value, name)
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value!r}", name)
    return value


def describe(kind: WorkoutKind, created_at: datetime) -> str:
    """Human-readable title, e.g. ``'Running on April 14'``."""
    return f"{kind.label} on {MONTH_NAMES[created_at.month - 1]} {created_at.day}"


@dataclass(frozen=True, eq=False, kw_only=True)
class WorkoutRecord:
    """Base record shared by all activity kinds.

    Subclasses set the ``kind`` class attribute and compute their own
    derived metric. Identity is ``id``; two records are equal only if
    they are the same object.
    """

    kind: ClassVar[WorkoutKind]

    coords: Coordinates
    distance_km: float                     # km
    duration_min: float                    # min
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.now)
    interaction_count: int = 0
    description: str = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.coords, Coordinates):
            raise ValidationError(f"coords must be Coordinates, got {self.coords!r}", "coords")
        _require_positive(self.distance_km, "distance_km")
        _require_positive(self.duration_min, "duration_min")
        if not self.id:
            raise ValidationError("Workout id must be a non-empty string", "id")
        object.__setattr__(self, "description", describe(self.kind, self.created_at))

    @property
    def derived_metric(self) -> float:
        raise NotImplementedError

    def click(self) -> int:
        """Register one user selection. Returns the new count."""
        object.__setattr__(self, "interaction_count", self.interaction_count + 1)
        return self.interaction_count


@dataclass(frozen=True, eq=False, kw_only=True)
class RunningRecord(WorkoutRecord):
    """A run. Pace is minutes per km."""

    kind: ClassVar[WorkoutKind] = WorkoutKind.RUNNING

    cadence_spm: int                       # steps per minute
    pace_min_per_km: float = field(init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_positive(self.cadence_spm, "cadence_spm")
        if float(self.cadence_spm) != int(self.cadence_spm):
            raise ValidationError(
                f"cadence_spm must be a whole number, got {self.cadence_spm!r}", "cadence_spm"
            )
        object.__setattr__(self, "cadence_spm", int(self.cadence_spm))
        object.__setattr__(self, "pace_min_per_km", self.duration_min / self.distance_km)

    @property
    def derived_metric(self) -> float:
        return self.pace_min_per_km


@dataclass(frozen=True, eq=False, kw_only=True)
class CyclingRecord(WorkoutRecord):
    """A ride. Elevation gain may be zero or negative for a net descent."""

    kind: ClassVar[WorkoutKind] = WorkoutKind.CYCLING

    elevation_gain_m: float                # m
    speed_km_per_h: float = field(init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_finite(self.elevation_gain_m, "elevation_gain_m")
        object.__setattr__(self, "speed_km_per_h", self.distance_km / (self.duration_min / 60))

    @property
    def derived_metric(self) -> float:
        return self.speed_km_per_h


RECORD_TYPES: dict[WorkoutKind, type[WorkoutRecord]] = {
    WorkoutKind.RUNNING: RunningRecord,
    WorkoutKind.CYCLING: CyclingRecord,
}

# Name of the kind-specific measured input per record type.
KIND_INPUT_FIELDS: dict[WorkoutKind, str] = {
    WorkoutKind.RUNNING: "cadence_spm",
    WorkoutKind.CYCLING: "elevation_gain_m",
}


def parse_kind(kind: WorkoutKind | str) -> WorkoutKind:
    """Coerce a discriminant string to ``WorkoutKind``."""
    try:
        return WorkoutKind(kind)
    except ValueError as exc:
        raise ValidationError(f"Unknown workout kind {kind!r}", "kind") from exc


def create_workout(
    kind: WorkoutKind | str,
    coords: Coordinates,
    distance_km: float,
    duration_min: float,
    kind_input: float,
    *,
    record_id: str | None = None,
    created_at: datetime | None = None,
    interaction_count: int = 0,
) -> WorkoutRecord:
    """Build a fully initialised record of the given kind.

    ``kind_input`` is cadence (spm) for running and elevation gain (m) for
    cycling. ``record_id``/``created_at`` are only supplied when rebuilding
    a record from a snapshot; fresh records get generated values.

    Raises:
        ValidationError: on unknown kind or any invalid measured input.
    """
    workout_kind = parse_kind(kind)
    record_type = RECORD_TYPES[workout_kind]
    kwargs: dict = {
        "coords": coords,
        "distance_km": distance_km,
        "duration_min": duration_min,
        "interaction_count": interaction_count,
        KIND_INPUT_FIELDS[workout_kind]: kind_input,
    }
    if record_id is not None:
        kwargs["id"] = record_id
    if created_at is not None:
        kwargs["created_at"] = created_at
    return record_type(**kwargs)
