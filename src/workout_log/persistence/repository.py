"""Workout repository — whole-collection snapshots in a key-value store."""

from __future__ import annotations

import json
import logging
from typing import Sequence

from workout_log.config import STORAGE_KEY
from workout_log.exceptions import PersistenceUnavailable
from workout_log.models.workout import WorkoutRecord
from workout_log.persistence.stores import KeyValueStore
from workout_log.serialization.snapshot import from_snapshot, to_snapshot_string

logger = logging.getLogger(__name__)


class WorkoutRepository:
    """Saves and restores the full ordered session collection under one key.

    Every save overwrites the previous snapshot; there are no incremental
    updates. ``load`` never raises: a missing, unreadable or corrupted
    snapshot comes back as ``None``.
    """

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY) -> None:
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def save(self, records: Sequence[WorkoutRecord]) -> None:
        """Replace the stored snapshot with *records*.

        Raises:
            PersistenceUnavailable: if the medium rejects the write.
        """
        payload = to_snapshot_string(records)
        try:
            self._store.set(self._key, payload)
        except PersistenceUnavailable:
            raise
        except Exception as exc:
            raise PersistenceUnavailable(f"Failed to save snapshot: {exc}") from exc
        logger.info("Saved %d workouts under %r", len(records), self._key)

    def load(self) -> list[WorkoutRecord] | None:
        """Return the rehydrated collection, or ``None`` if absent or unusable."""
        try:
            raw = self._store.get(self._key)
        except Exception as exc:
            logger.warning("Persistence unavailable, starting empty: %s", exc)
            return None
        if raw is None:
            return None

        try:
            entries = json.loads(raw)
        except (TypeError, ValueError, RecursionError) as exc:
            logger.warning("Corrupted snapshot under %r, ignoring: %s", self._key, exc)
            return None
        if not isinstance(entries, list):
            logger.warning(
                "Snapshot under %r is %s, expected a list; ignoring",
                self._key,
                type(entries).__name__,
            )
            return None

        records = from_snapshot(entries)
        logger.info("Loaded %d of %d workouts from %r", len(records), len(entries), self._key)
        return records

    def clear(self) -> None:
        """Remove the stored snapshot entirely."""
        self._store.remove(self._key)
        logger.info("Cleared snapshot %r", self._key)
