"""Session layer — the controller and the collaborators it drives."""

from workout_log.session.collaborators import (
    GeolocationSensor,
    MapSurface,
    Notifier,
    Renderer,
)
from workout_log.session.controller import SessionController
from workout_log.session.formatting import EntryRow, format_entry, popup_class, popup_content
from workout_log.session.sensors import FixedPositionSensor

__all__ = [
    "EntryRow",
    "FixedPositionSensor",
    "GeolocationSensor",
    "MapSurface",
    "Notifier",
    "Renderer",
    "SessionController",
    "format_entry",
    "popup_class",
    "popup_content",
]
