from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization checks."""

    ADMIN = "admin"
    USER = "user"


class AttendanceStatus(str, Enum):
    """Check-in status as stored in the database."""

    PRESENT = "present"
    LATE = "late"


class RejectReason(str, Enum):
    """Stable reason codes for a rejected check-in/check-out attempt."""

    ALREADY_CHECKED_IN_TODAY = "ALREADY_CHECKED_IN_TODAY"
    OUTSIDE_OFFICE_RADIUS = "OUTSIDE_OFFICE_RADIUS"
    OUTSIDE_CHECK_IN_WINDOW = "OUTSIDE_CHECK_IN_WINDOW"
    OUTSIDE_CHECK_OUT_WINDOW = "OUTSIDE_CHECK_OUT_WINDOW"
    NO_ACTIVE_CHECK_IN = "NO_ACTIVE_CHECK_IN"
