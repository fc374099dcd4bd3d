"""Shared test fixtures: sample workouts, stores and mocked collaborators."""

from __future__ import annotations

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from workout_log.models.coordinates import Coordinates
from workout_log.models.workout import CyclingRecord, RunningRecord
from workout_log.persistence.repository import WorkoutRepository
from workout_log.persistence.stores import InMemoryStore
from workout_log.session.controller import SessionController


@pytest.fixture
def lisbon() -> Coordinates:
    """Map click from the classic demo: (39, -12)."""
    return Coordinates(lat=39.0, lng=-12.0)


@pytest.fixture
def morning_run(lisbon: Coordinates) -> RunningRecord:
    """5.2 km in 24 min at 178 spm on 14 April."""
    return RunningRecord(
        coords=lisbon,
        distance_km=5.2,
        duration_min=24.0,
        cadence_spm=178,
        created_at=datetime(2026, 4, 14, 7, 15),
    )


@pytest.fixture
def hill_ride(lisbon: Coordinates) -> CyclingRecord:
    """27 km in 95 min with 523 m of climbing on 2 May."""
    return CyclingRecord(
        coords=lisbon,
        distance_km=27.0,
        duration_min=95.0,
        elevation_gain_m=523.0,
        created_at=datetime(2026, 5, 2, 17, 40),
    )


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def repository(store: InMemoryStore) -> WorkoutRepository:
    return WorkoutRepository(store)


@pytest.fixture
def collaborators() -> MagicMock:
    """One parent mock so call order across collaborators can be asserted.

    Children: ``map``, ``renderer``, ``notifier``, ``sensor``.
    """
    parent = MagicMock()
    parent.sensor.get_current_position.return_value = Coordinates(lat=38.72, lng=-9.14)
    return parent


@pytest.fixture
def make_controller(repository: WorkoutRepository, collaborators: MagicMock):
    """Factory for controllers wired to the shared mocks."""

    def _make(start: bool = True, repo: WorkoutRepository | None = None) -> SessionController:
        controller = SessionController(
            repo or repository,
            collaborators.renderer,
            collaborators.notifier,
            map_surface=collaborators.map,
            sensor=collaborators.sensor,
            zoom_level=13,
        )
        if start:
            controller.start()
        return controller

    return _make
