"""Tests for WorkoutRepository save/load/clear."""

from __future__ import annotations

import json
import random
from unittest.mock import MagicMock

import pytest

from workout_log.exceptions import PersistenceUnavailable
from workout_log.models.coordinates import Coordinates
from workout_log.models.workout import CyclingRecord, RunningRecord, create_workout
from workout_log.persistence.repository import WorkoutRepository
from workout_log.persistence.stores import InMemoryStore


def _random_collection(n: int, seed: int = 7) -> list:
    rng = random.Random(seed)
    records = []
    for _ in range(n):
        coords = Coordinates(rng.uniform(-90, 90), rng.uniform(-180, 180))
        distance = rng.uniform(0.5, 120)
        duration = rng.uniform(3, 400)
        if rng.random() < 0.5:
            records.append(create_workout("running", coords, distance, duration, rng.randint(120, 200)))
        else:
            records.append(create_workout("cycling", coords, distance, duration, rng.uniform(-300, 2000)))
    return records


class TestSaveLoad:
    def test_absent_snapshot_loads_none(self, repository) -> None:
        assert repository.load() is None

    def test_saves_under_well_known_key(self, store, repository, morning_run) -> None:
        repository.save([morning_run])
        assert repository.key == "workouts"
        entries = json.loads(store.get("workouts"))
        assert len(entries) == 1
        assert entries[0]["kind"] == "running"

    @pytest.mark.parametrize("size", [0, 1, 2, 150])
    def test_round_trip_mixed_collections(self, repository, size) -> None:
        originals = _random_collection(size)
        repository.save(originals)
        restored = repository.load()
        assert restored is not None
        assert len(restored) == size
        for before, after in zip(originals, restored):
            assert type(after) is type(before)
            assert after.id == before.id
            assert after.derived_metric == before.derived_metric
            assert after.description == before.description
            assert after.coords == before.coords

    def test_save_is_idempotent(self, repository, morning_run, hill_ride) -> None:
        repository.save([morning_run, hill_ride])
        first = repository.load()
        repository.save([morning_run, hill_ride])
        second = repository.load()
        assert [r.id for r in first] == [r.id for r in second]
        assert [r.derived_metric for r in first] == [r.derived_metric for r in second]

    def test_save_overwrites_previous(self, repository, morning_run, hill_ride) -> None:
        repository.save([morning_run, hill_ride])
        repository.save([hill_ride])
        restored = repository.load()
        assert [type(r) for r in restored] == [CyclingRecord]

    def test_custom_key(self, store, morning_run) -> None:
        repo = WorkoutRepository(store, key="other")
        repo.save([morning_run])
        assert store.get("workouts") is None
        assert isinstance(repo.load()[0], RunningRecord)


class TestCorruption:
    @pytest.mark.parametrize("raw", ["{not json", "", '{"kind": "running"}', "42", "null"])
    def test_unusable_snapshot_is_absent(self, raw) -> None:
        repo = WorkoutRepository(InMemoryStore({"workouts": raw}))
        assert repo.load() is None

    def test_oversized_number_skips_entry(self) -> None:
        huge = "1" + "0" * 400
        raw = (
            '[{"kind": "cycling", "coords": [39.0, -12.0], "distance_km": ' + huge
            + ', "duration_min": 95, "elevation_gain_m": 523}]'
        )
        repo = WorkoutRepository(InMemoryStore({"workouts": raw}))
        assert repo.load() == []

    def test_deeply_nested_snapshot_is_absent(self) -> None:
        raw = "[" * 200_000 + "]" * 200_000
        repo = WorkoutRepository(InMemoryStore({"workouts": raw}))
        assert repo.load() is None

    def test_store_failure_on_load_is_absent(self) -> None:
        store = MagicMock()
        store.get.side_effect = PersistenceUnavailable("disk gone")
        assert WorkoutRepository(store).load() is None

    def test_store_failure_on_save_raises(self, morning_run) -> None:
        store = MagicMock()
        store.set.side_effect = OSError("quota exceeded")
        with pytest.raises(PersistenceUnavailable, match="quota exceeded"):
            WorkoutRepository(store).save([morning_run])


class TestClear:
    def test_clear_removes_snapshot(self, store, repository, morning_run) -> None:
        repository.save([morning_run])
        repository.clear()
        assert "workouts" not in store
        assert repository.load() is None

    def test_clear_without_snapshot(self, repository) -> None:
        repository.clear()
        assert repository.load() is None
