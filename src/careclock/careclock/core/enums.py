from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Worker role, established by the identity layer."""

    MANAGER = "MANAGER"
    CARE_WORKER = "CARE_WORKER"


class WorkerStatus(str, Enum):
    """Presence status shown on the staff overview."""

    ACTIVE = "Active"
    NOT_ACTIVE = "Not Active"


class ShiftStatus(str, Enum):
    ACTIVE = "Active"
    CLOCKED_OUT = "Clocked Out"


class Weekday(str, Enum):
    """Days reported by the daily statistics (Sunday is not reported)."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


class BoundaryEvent(str, Enum):
    LEFT_WHILE_CLOCKED_IN = "LEFT_WHILE_CLOCKED_IN"
    ENTERED_WHILE_CLOCKED_OUT = "ENTERED_WHILE_CLOCKED_OUT"


class ErrorCode(str, Enum):
    """Stable error codes consumed by the API layer."""

    VALIDATION = "VALIDATION"
    NOT_IN_PERIMETER = "NOT_IN_PERIMETER"
    ALREADY_CLOCKED_IN = "ALREADY_CLOCKED_IN"
    NO_OPEN_SHIFT = "NO_OPEN_SHIFT"
    STORAGE_TIMEOUT = "STORAGE_TIMEOUT"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL = "INTERNAL"
