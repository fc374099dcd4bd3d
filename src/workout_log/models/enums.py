"""Enumerations and presentation constants for workout records."""

from enum import Enum, IntEnum, auto


class WorkoutKind(str, Enum):
    """Activity discriminant. The value is the persisted ``kind`` field."""

    RUNNING = "running"
    CYCLING = "cycling"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class SessionState(IntEnum):
    """Interaction states of the session controller."""

    IDLE = auto()
    AWAITING_FORM_INPUT = auto()


# ---------------------------------------------------------------------------
# Geographic bounds (WGS84 degrees)
# ---------------------------------------------------------------------------
LATITUDE_MIN = -90.0
LATITUDE_MAX = 90.0
LONGITUDE_MIN = -180.0
LONGITUDE_MAX = 180.0

# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

KIND_ICONS: dict[WorkoutKind, str] = {
    WorkoutKind.RUNNING: "🏃‍♂️",
    WorkoutKind.CYCLING: "🚴‍♀️",
}

POPUP_MAX_WIDTH = 250
POPUP_MIN_WIDTH = 100
