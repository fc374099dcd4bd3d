"""Tests for workout records and the create_workout factory."""

from __future__ import annotations

import dataclasses
import math
from datetime import datetime

import pytest

from workout_log.exceptions import ValidationError
from workout_log.models.coordinates import Coordinates
from workout_log.models.enums import WorkoutKind
from workout_log.models.workout import (
    CyclingRecord,
    RunningRecord,
    create_workout,
    describe,
    parse_kind,
)


class TestRunningRecord:
    def test_pace_is_duration_over_distance(self, morning_run: RunningRecord) -> None:
        assert morning_run.pace_min_per_km == 24.0 / 5.2
        assert morning_run.pace_min_per_km == pytest.approx(4.615, abs=1e-3)

    @pytest.mark.parametrize(
        "distance, duration",
        [(1.0, 5.0), (10.0, 42.5), (42.195, 180.0), (0.4, 1.5)],
    )
    def test_pace_exact_for_valid_inputs(self, lisbon, distance, duration) -> None:
        run = RunningRecord(coords=lisbon, distance_km=distance, duration_min=duration, cadence_spm=170)
        assert run.pace_min_per_km == duration / distance
        assert run.derived_metric == run.pace_min_per_km

    def test_kind_and_description(self, morning_run: RunningRecord) -> None:
        assert morning_run.kind is WorkoutKind.RUNNING
        assert morning_run.description == "Running on April 14"

    def test_cadence_stored_as_int(self, lisbon) -> None:
        run = RunningRecord(coords=lisbon, distance_km=5, duration_min=25, cadence_spm=180.0)
        assert run.cadence_spm == 180
        assert isinstance(run.cadence_spm, int)

    @pytest.mark.parametrize("cadence", [0, -10, 172.5, math.nan])
    def test_rejects_bad_cadence(self, lisbon, cadence) -> None:
        with pytest.raises(ValidationError):
            RunningRecord(coords=lisbon, distance_km=5, duration_min=25, cadence_spm=cadence)


class TestCyclingRecord:
    def test_speed_is_km_per_hour(self, hill_ride: CyclingRecord) -> None:
        assert hill_ride.speed_km_per_h == 27.0 / (95.0 / 60)
        assert hill_ride.speed_km_per_h == pytest.approx(17.05, abs=1e-2)
        assert hill_ride.derived_metric == hill_ride.speed_km_per_h

    def test_description(self, hill_ride: CyclingRecord) -> None:
        assert hill_ride.description == "Cycling on May 2"

    @pytest.mark.parametrize("elevation", [0.0, -120.0, 1500.0])
    def test_elevation_may_be_zero_or_negative(self, lisbon, elevation) -> None:
        ride = CyclingRecord(coords=lisbon, distance_km=30, duration_min=60, elevation_gain_m=elevation)
        assert ride.elevation_gain_m == elevation
        assert ride.speed_km_per_h == 30.0

    def test_rejects_non_finite_elevation(self, lisbon) -> None:
        with pytest.raises(ValidationError):
            CyclingRecord(coords=lisbon, distance_km=30, duration_min=60, elevation_gain_m=math.inf)


class TestSharedInvariants:
    @pytest.mark.parametrize(
        "distance, duration",
        [(0, 10), (-5, 10), (5, 0), (5, -1), (math.nan, 10), (5, math.inf), (10**400, 10)],
    )
    def test_rejects_non_positive_measures(self, lisbon, distance, duration) -> None:
        with pytest.raises(ValidationError):
            RunningRecord(coords=lisbon, distance_km=distance, duration_min=duration, cadence_spm=170)
        with pytest.raises(ValidationError):
            CyclingRecord(coords=lisbon, distance_km=distance, duration_min=duration, elevation_gain_m=0)

    def test_rejects_non_coordinates(self) -> None:
        with pytest.raises(ValidationError):
            RunningRecord(coords=(39, -12), distance_km=5, duration_min=25, cadence_spm=170)

    def test_frozen(self, morning_run: RunningRecord) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            morning_run.distance_km = 10.0  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            morning_run.pace_min_per_km = 1.0  # type: ignore[misc]

    def test_ids_are_unique(self, lisbon) -> None:
        ids = {
            RunningRecord(coords=lisbon, distance_km=5, duration_min=25, cadence_spm=170).id
            for _ in range(50)
        }
        assert len(ids) == 50

    def test_click_increments_counter(self, morning_run: RunningRecord) -> None:
        assert morning_run.interaction_count == 0
        assert morning_run.click() == 1
        morning_run.click()
        assert morning_run.interaction_count == 2

    def test_identity_equality(self, lisbon) -> None:
        kwargs = dict(coords=lisbon, distance_km=5, duration_min=25, cadence_spm=170, id="same")
        assert RunningRecord(**kwargs) != RunningRecord(**kwargs)


class TestDescribe:
    @pytest.mark.parametrize(
        "kind, when, expected",
        [
            (WorkoutKind.RUNNING, datetime(2026, 1, 1), "Running on January 1"),
            (WorkoutKind.CYCLING, datetime(2026, 12, 31), "Cycling on December 31"),
        ],
    )
    def test_uses_month_name_and_day_of_month(self, kind, when, expected) -> None:
        assert describe(kind, when) == expected


class TestCreateWorkout:
    def test_builds_running(self, lisbon) -> None:
        record = create_workout("running", lisbon, 5.2, 24, 178)
        assert isinstance(record, RunningRecord)
        assert record.cadence_spm == 178

    def test_builds_cycling(self, lisbon) -> None:
        record = create_workout(WorkoutKind.CYCLING, lisbon, 27, 95, -40)
        assert isinstance(record, CyclingRecord)
        assert record.elevation_gain_m == -40

    def test_keeps_supplied_identity(self, lisbon) -> None:
        when = datetime(2025, 7, 4, 6, 0)
        record = create_workout(
            "cycling", lisbon, 27, 95, 523,
            record_id="abc123", created_at=when, interaction_count=3,
        )
        assert record.id == "abc123"
        assert record.created_at == when
        assert record.interaction_count == 3
        assert record.description == "Cycling on July 4"

    def test_unknown_kind(self, lisbon) -> None:
        with pytest.raises(ValidationError, match="Unknown workout kind"):
            create_workout("swimming", lisbon, 1, 30, 0)

    def test_parse_kind_accepts_enum_and_string(self) -> None:
        assert parse_kind("cycling") is WorkoutKind.CYCLING
        assert parse_kind(WorkoutKind.RUNNING) is WorkoutKind.RUNNING
