"""Persistence — snapshot repository and key-value media."""

from workout_log.persistence.repository import WorkoutRepository
from workout_log.persistence.stores import InMemoryStore, JsonFileStore, KeyValueStore

__all__ = [
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "WorkoutRepository",
]
