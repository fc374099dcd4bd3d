"""Contracts for the collaborators a session controller drives.

The controller only depends on these capability sets; it has no knowledge
of the map library, widget toolkit or storage medium behind them.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from workout_log.models.coordinates import Coordinates
from workout_log.models.workout import WorkoutRecord

LocationCallback = Callable[[Coordinates], None]


@runtime_checkable
class MapSurface(Protocol):
    """Interactive map: centring, click capture and markers."""

    def initialize(self, center: Coordinates, zoom: int) -> None: ...

    def on_location_clicked(self, callback: LocationCallback) -> None: ...

    def place_marker(self, coords: Coordinates, popup_content: str, style_class: str) -> None: ...

    def recenter(self, coords: Coordinates, zoom: int, animated: bool = True) -> None: ...


@runtime_checkable
class GeolocationSensor(Protocol):
    """Single-shot position lookup. Raises ``SensorUnavailable`` on failure."""

    def get_current_position(self) -> Coordinates: ...


@runtime_checkable
class Renderer(Protocol):
    """Workout list and input form."""

    def append_workout_entry(self, record: WorkoutRecord) -> None: ...

    def clear_form(self) -> None: ...

    def show_form(self) -> None: ...

    def hide_form(self) -> None: ...

    def toggle_kind_specific_field(self) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    """User-facing messages."""

    def warn(self, message: str) -> None: ...

    def notice(self, message: str) -> None: ...


__all__ = [
    "GeolocationSensor",
    "LocationCallback",
    "MapSurface",
    "Notifier",
    "Renderer",
]
