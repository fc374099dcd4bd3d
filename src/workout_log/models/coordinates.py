"""Geographic coordinates of a logged workout."""

from __future__ import annotations

import math
from dataclasses import dataclass

from workout_log.exceptions import ValidationError
from workout_log.models.enums import (
    LATITUDE_MAX,
    LATITUDE_MIN,
    LONGITUDE_MAX,
    LONGITUDE_MIN,
)


@dataclass(frozen=True)
class Coordinates:
    """A (latitude, longitude) pair in decimal degrees.

    Bounds are checked on construction, so any instance in circulation
    is a valid point on the globe.
    """

    lat: float
    lng: float

    def __post_init__(self) -> None:
        for name, value in (("lat", self.lat), ("lng", self.lng)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValidationError(f"{name} must be a finite number, got {value!r}", name)
            if isinstance(value, float) and not math.isfinite(value):
                raise ValidationError(f"{name} must be a finite number, got {value!r}", name)
        if not LATITUDE_MIN <= self.lat <= LATITUDE_MAX:
            raise ValidationError(f"Latitude {self.lat} outside [-90, 90]", "lat")
        if not LONGITUDE_MIN <= self.lng <= LONGITUDE_MAX:
            raise ValidationError(f"Longitude {self.lng} outside [-180, 180]", "lng")

    @classmethod
    def from_pair(cls, pair) -> Coordinates:
        """Build from a ``[lat, lng]`` sequence (the persisted shape)."""
        try:
            lat, lng = pair
            lat, lng = float(lat), float(lng)
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValidationError(f"Expected a [lat, lng] pair, got {pair!r}", "coords") from exc
        return cls(lat=lat, lng=lng)

    def as_pair(self) -> list[float]:
        return [self.lat, self.lng]
