"""Collaborator implementations bridging the Streamlit UI and the session controller.

Nothing here imports streamlit: each class only keeps the state the page
needs to draw itself on the next rerun, so they can be unit tested and
stored in ``st.session_state`` as plain objects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pandas as pd

from workout_log.models.coordinates import Coordinates
from workout_log.models.enums import WorkoutKind
from workout_log.models.workout import WorkoutRecord
from workout_log.session.collaborators import LocationCallback

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Color maps (RGBA for pydeck)
# ---------------------------------------------------------------------------

KIND_COLORS: dict[str, list[int]] = {
    "running-popup": [0, 196, 106, 200],    # green
    "cycling-popup": [255, 181, 69, 200],   # orange
}
_DEFAULT_COLOR = [120, 120, 120, 200]

KIND_OPTIONS = tuple(k.value for k in WorkoutKind)


@dataclass(frozen=True)
class Marker:
    coords: Coordinates
    popup_content: str
    style_class: str


class StreamlitMap:
    """Map surface whose markers and viewport are drawn with pydeck."""

    def __init__(self) -> None:
        self.center: Coordinates | None = None
        self.zoom: int = 0
        self.markers: list[Marker] = []
        self._on_click: LocationCallback | None = None

    @property
    def ready(self) -> bool:
        return self.center is not None

    def initialize(self, center: Coordinates, zoom: int) -> None:
        self.center = center
        self.zoom = zoom
        self.markers = []

    def on_location_clicked(self, callback: LocationCallback) -> None:
        self._on_click = callback

    def place_marker(self, coords: Coordinates, popup_content: str, style_class: str) -> None:
        self.markers.append(Marker(coords, popup_content, style_class))

    def recenter(self, coords: Coordinates, zoom: int, animated: bool = True) -> None:
        # pydeck transitions the view on its own; animated is accepted for the contract
        self.center = coords
        self.zoom = zoom

    def click(self, coords: Coordinates) -> None:
        """Deliver a location click to the registered callback."""
        if self._on_click is None:
            logger.warning("Map click at %s before a handler was registered", coords)
            return
        self._on_click(coords)

    def markers_frame(self) -> pd.DataFrame:
        """One row per marker with lat/lon/label/color columns."""
        return pd.DataFrame(
            {
                "lat": [m.coords.lat for m in self.markers],
                "lon": [m.coords.lng for m in self.markers],
                "label": [m.popup_content for m in self.markers],
                "color": [KIND_COLORS.get(m.style_class, _DEFAULT_COLOR) for m in self.markers],
            },
            columns=["lat", "lon", "label", "color"],
        )


class StreamlitRenderer:
    """Workout list and form state.

    ``form_version`` is embedded in widget keys; bumping it makes Streamlit
    recreate the inputs empty, which is how the form gets cleared.
    """

    def __init__(self) -> None:
        self.entries: list[WorkoutRecord] = []
        self.form_visible = False
        self.form_version = 0
        self.show_elevation = False

    def append_workout_entry(self, record: WorkoutRecord) -> None:
        self.entries.append(record)

    def clear_form(self) -> None:
        self.form_version += 1
        self.show_elevation = False

    def show_form(self) -> None:
        self.form_visible = True

    def hide_form(self) -> None:
        self.form_visible = False

    def toggle_kind_specific_field(self) -> None:
        self.show_elevation = not self.show_elevation

    def widget_key(self, name: str) -> str:
        """Return a versioned widget key like ``distance_v0``."""
        return f"{name}_v{self.form_version}"

    def newest_first(self) -> list[WorkoutRecord]:
        return list(reversed(self.entries))


class BufferedNotifier:
    """Collects messages until the page drains and displays them."""

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    def warn(self, message: str) -> None:
        self._messages.append(("warning", message))

    def notice(self, message: str) -> None:
        self._messages.append(("info", message))

    def drain(self) -> list[tuple[str, str]]:
        messages, self._messages = self._messages, []
        return messages


def workouts_frame(records: list[WorkoutRecord]) -> pd.DataFrame:
    """Tabular summary of the session for display and export."""
    rows = [
        {
            "description": r.description,
            "kind": r.kind.value,
            "distance_km": r.distance_km,
            "duration_min": r.duration_min,
            "pace_min_per_km": getattr(r, "pace_min_per_km", None),
            "speed_km_per_h": getattr(r, "speed_km_per_h", None),
            "selected": r.interaction_count,
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=[
        "description", "kind", "distance_km", "duration_min",
        "pace_min_per_km", "speed_km_per_h", "selected",
    ])
