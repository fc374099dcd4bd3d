"""Geolocation sensors."""

from __future__ import annotations

import logging

from workout_log.exceptions import SensorUnavailable, ValidationError
from workout_log.models.coordinates import Coordinates

logger = logging.getLogger(__name__)


class FixedPositionSensor:
    """Reports a configured position, e.g. from ``WORKOUT_LOG_HOME_LAT/LNG``.

    With either value unset the sensor behaves like a denied permission.
    """

    def __init__(self, lat: float | None, lng: float | None) -> None:
        self._lat = lat
        self._lng = lng

    def get_current_position(self) -> Coordinates:
        if self._lat is None or self._lng is None:
            raise SensorUnavailable("No position configured")
        try:
            coords = Coordinates(lat=self._lat, lng=self._lng)
        except ValidationError as exc:
            raise SensorUnavailable(f"Configured position is invalid: {exc}") from exc
        logger.debug("Position fix %s", coords)
        return coords
