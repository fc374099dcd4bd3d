"""SessionController — sequences map, form and persistence into one session.

The controller owns the ordered collection of workouts. Rendered list
entries, map markers and the persisted snapshot are projections of that
collection and are refreshed from it, never the other way round.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from workout_log.config import MAP_ZOOM_LEVEL
from workout_log.exceptions import (
    MapUnavailable,
    PersistenceUnavailable,
    SensorUnavailable,
    StaleReference,
    ValidationError,
)
from workout_log.models.coordinates import Coordinates
from workout_log.models.enums import SessionState, WorkoutKind
from workout_log.models.workout import WorkoutRecord, create_workout, parse_kind
from workout_log.persistence.repository import WorkoutRepository
from workout_log.session.collaborators import (
    GeolocationSensor,
    MapSurface,
    Notifier,
    Renderer,
)
from workout_log.session.formatting import popup_class, popup_content

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Inputs have to be positive numbers!"
NO_POSITION_MESSAGE = "Could not get your position"


def _form_number(value: Any) -> float:
    """Read a form value the way a numeric input would: blank or junk is NaN."""
    if isinstance(value, bool) or value is None:
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


class SessionController:
    """Interaction state machine for one logging session.

    Usage:
        controller = SessionController(repository, renderer, notifier,
                                       map_surface=m, sensor=s)
        controller.start()            # geolocation -> map -> markers
        controller.on_map_location_selected(Coordinates(39, -12))
        controller.on_form_submitted("running", 5.2, 24, 178)

    The constructor restores the persisted collection and renders its list
    entries right away; markers follow once the map reports ready.
    """

    def __init__(
        self,
        repository: WorkoutRepository,
        renderer: Renderer,
        notifier: Notifier,
        map_surface: MapSurface | None = None,
        sensor: GeolocationSensor | None = None,
        zoom_level: int = MAP_ZOOM_LEVEL,
    ) -> None:
        self._repository = repository
        self._renderer = renderer
        self._notifier = notifier
        self._map = map_surface
        self._sensor = sensor
        self._zoom_level = zoom_level

        self._workouts: list[WorkoutRecord] = []
        self._state = SessionState.IDLE
        self._pending: Coordinates | None = None
        self._map_ready = False

        self._restore()

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def workouts(self) -> tuple[WorkoutRecord, ...]:
        return tuple(self._workouts)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def pending_coords(self) -> Coordinates | None:
        return self._pending

    @property
    def map_ready(self) -> bool:
        return self._map_ready

    @property
    def zoom_level(self) -> int:
        return self._zoom_level

    def get(self, record_id: str) -> WorkoutRecord:
        """Return the workout with *record_id*.

        Raises:
            StaleReference: if no such workout is in the session.
        """
        for record in self._workouts:
            if record.id == record_id:
                return record
        raise StaleReference(record_id)

    def find(self, record_id: str) -> WorkoutRecord | None:
        """Like ``get`` but returns None for an unknown id."""
        try:
            return self.get(record_id)
        except StaleReference:
            return None

    # ------------------------------------------------------------------
    # Map start-up
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """Request a position fix and bring up the map. Single shot, no retry.

        Returns True if the map is ready afterwards.
        """
        if self._map is None or self._sensor is None:
            self.on_position_failed(SensorUnavailable("No map or geolocation available"))
            return False
        try:
            coords = self._sensor.get_current_position()
        except SensorUnavailable as exc:
            self.on_position_failed(exc)
            return False
        return self.on_position_acquired(coords)

    def on_position_acquired(self, coords: Coordinates) -> bool:
        """Initialise the map at *coords* and place markers for every workout."""
        if self._map is None:
            self.on_position_failed(SensorUnavailable("No map surface"))
            return False
        try:
            self._map.initialize(coords, self._zoom_level)
            self._map.on_location_clicked(self.on_map_location_selected)
        except Exception as exc:
            self.on_position_failed(MapUnavailable(f"Map failed to initialise: {exc}"))
            return False

        self._map_ready = True
        logger.info("Map ready at %s, placing %d markers", coords, len(self._workouts))
        for record in self._workouts:
            self._render_marker(record)
        return True

    def on_position_failed(self, exc: Exception | None = None) -> None:
        """Degrade to map-less mode: the list works, new locations cannot be picked."""
        logger.warning("Running without a map: %s", exc)
        self._map_ready = False
        self._notifier.notice(NO_POSITION_MESSAGE)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def on_map_location_selected(self, coords: Coordinates | Any) -> None:
        """Capture a candidate location and open the form. Last click wins."""
        if not self._map_ready:
            logger.warning("Location selected before the map is ready, ignoring")
            return
        if not isinstance(coords, Coordinates):
            coords = Coordinates.from_pair(coords)

        self._pending = coords
        self._state = SessionState.AWAITING_FORM_INPUT
        self._renderer.show_form()

    def on_kind_changed(self) -> None:
        """Swap the cadence and elevation inputs."""
        self._renderer.toggle_kind_specific_field()

    def on_form_submitted(
        self,
        kind: WorkoutKind | str,
        distance_km: Any,
        duration_min: Any,
        kind_input: Any,
    ) -> WorkoutRecord | None:
        """Validate the form and log a workout at the pending location.

        Returns the new record, or None when no location is pending.

        Raises:
            ValidationError: the inputs were rejected. The user has been
                warned and the session is unchanged.
        """
        if self._state is not SessionState.AWAITING_FORM_INPUT or self._pending is None:
            logger.warning("Form submitted with no pending location, ignoring")
            return None

        try:
            record = self._build_record(kind, distance_km, duration_min, kind_input)
        except ValidationError as exc:
            logger.warning("Rejected workout input: %s", exc)
            self._notifier.warn(INVALID_INPUT_MESSAGE)
            raise

        self._workouts.append(record)
        self._pending = None
        self._state = SessionState.IDLE
        logger.info("Logged %s (%s)", record.description, record.id)

        self._render_marker(record)
        self._renderer.append_workout_entry(record)
        self._close_form()
        self._persist()
        return record

    def on_form_cancelled(self) -> None:
        self._pending = None
        self._state = SessionState.IDLE
        self._close_form()

    def on_list_entry_selected(self, record_id: str) -> WorkoutRecord | None:
        """Count the selection and pan the map to the workout.

        Unknown ids are ignored.
        """
        record = self.find(record_id)
        if record is None:
            logger.debug("Ignoring selection of unknown workout %r", record_id)
            return None

        record.click()
        if self._map_ready and self._map is not None:
            self._map.recenter(record.coords, self._zoom_level, animated=True)
        return record

    def reset(self) -> None:
        """Delete the persisted snapshot and empty the session."""
        try:
            self._repository.clear()
        except PersistenceUnavailable as exc:
            logger.warning("Could not clear persisted workouts: %s", exc)
        self._workouts.clear()
        self._pending = None
        self._state = SessionState.IDLE
        logger.info("Session reset")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _restore(self) -> None:
        records = self._repository.load()
        if not records:
            return
        self._workouts = list(records)
        logger.info("Restored %d workouts", len(records))
        for record in self._workouts:
            self._renderer.append_workout_entry(record)

    def _build_record(
        self,
        kind: WorkoutKind | str,
        distance_km: Any,
        duration_min: Any,
        kind_input: Any,
    ) -> WorkoutRecord:
        workout_kind = parse_kind(kind)
        distance = _form_number(distance_km)
        duration = _form_number(duration_min)
        extra = _form_number(kind_input)

        if not all(math.isfinite(v) for v in (distance, duration, extra)):
            raise ValidationError("Inputs must be finite numbers")
        # Elevation may be zero or negative (net descent)
        positives = (distance, duration, extra) if workout_kind is WorkoutKind.RUNNING else (distance, duration)
        if not all(v > 0 for v in positives):
            raise ValidationError("Inputs must be positive")

        return create_workout(workout_kind, self._pending, distance, duration, extra)

    def _render_marker(self, record: WorkoutRecord) -> None:
        if not self._map_ready or self._map is None:
            return
        self._map.place_marker(record.coords, popup_content(record), popup_class(record))

    def _close_form(self) -> None:
        self._renderer.clear_form()
        self._renderer.hide_form()

    def _persist(self) -> None:
        try:
            self._repository.save(self._workouts)
        except PersistenceUnavailable as exc:
            logger.warning("Workout kept in session but not persisted: %s", exc)
