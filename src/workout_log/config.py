"""Environment-variable-based configuration for the workout log."""

from __future__ import annotations

import os
from pathlib import Path


def _optional_float(name: str) -> float | None:
    raw = os.environ.get(name, "").strip()
    return float(raw) if raw else None


STORAGE_KEY: str = os.environ.get("WORKOUT_LOG_STORAGE_KEY", "workouts")
DATA_DIR: Path = Path(os.environ.get("WORKOUT_LOG_DATA_DIR", "~/.workout_log")).expanduser()
MAP_ZOOM_LEVEL: int = int(os.environ.get("WORKOUT_LOG_MAP_ZOOM", "13"))
HOME_LATITUDE: float | None = _optional_float("WORKOUT_LOG_HOME_LAT")
HOME_LONGITUDE: float | None = _optional_float("WORKOUT_LOG_HOME_LNG")
LOG_LEVEL: str = os.environ.get("WORKOUT_LOG_LEVEL", "INFO").upper()
