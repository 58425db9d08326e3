"""Attendance validation rules.

Both entry points are pure: every input (clock, configuration, the user's
existing record) is passed in and the result is always a ``Decision``.
Persisting an accepted decision is the caller's job.

Per user and day the record moves NONE -> CHECKED_IN -> CHECKED_OUT and
never back; a checked-out day cannot be checked into again.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import time_of_day
from ..core.enums import AttendanceStatus, RejectReason
from ..geo.model import Coordinate
from ..office.model import OfficeGeofence
from ..schedules.model import AttendanceSchedule
from .model import AttendanceRecord, Decision


def _outside_radius(geofence: OfficeGeofence, location: Coordinate) -> Decision:
    distance = geofence.distance_to(location)
    return Decision.reject(
        RejectReason.OUTSIDE_OFFICE_RADIUS,
        f"You are outside the office area ({round(distance)}m from the office, "
        f"maximum {geofence.radius_meters:g}m)",
    )


def evaluate_check_in(
    *,
    user_id: int,
    location: Coordinate,
    now: datetime,
    geofence: OfficeGeofence,
    schedule: AttendanceSchedule,
    existing_today_record: Optional[AttendanceRecord],
) -> Decision:
    if existing_today_record is not None:
        if existing_today_record.is_open:
            message = "You have not checked out from your current attendance yet"
        else:
            message = "You have already checked in today"
        return Decision.reject(RejectReason.ALREADY_CHECKED_IN_TODAY, message)

    if not geofence.contains(location):
        return _outside_radius(geofence, location)

    t = time_of_day(now)
    if not schedule.check_in.contains(t):
        return Decision.reject(
            RejectReason.OUTSIDE_CHECK_IN_WINDOW,
            f"Check-in is only allowed between {schedule.check_in.label()}",
        )

    # Lateness is measured against the window start, so only a check-in at
    # exactly the opening second counts as present.
    status = AttendanceStatus.LATE if t > schedule.check_in.start_time else AttendanceStatus.PRESENT

    return Decision.accept(
        AttendanceRecord(
            attendance_id=None,
            user_id=user_id,
            work_date=now.date(),
            check_in_time=now,
            check_in_location=location,
            status=status,
        )
    )


def evaluate_check_out(
    *,
    user_id: int,
    location: Coordinate,
    now: datetime,
    geofence: OfficeGeofence,
    schedule: AttendanceSchedule,
    existing_open_record: Optional[AttendanceRecord],
) -> Decision:
    if not geofence.contains(location):
        return _outside_radius(geofence, location)

    t = time_of_day(now)
    if not schedule.check_out.contains(t):
        return Decision.reject(
            RejectReason.OUTSIDE_CHECK_OUT_WINDOW,
            f"Check-out is only allowed between {schedule.check_out.label()}",
        )

    if existing_open_record is None or existing_open_record.user_id != user_id or not existing_open_record.is_open:
        return Decision.reject(RejectReason.NO_ACTIVE_CHECK_IN, "You have no active check-in today")

    return Decision.accept(replace(existing_open_record, check_out_time=now, check_out_location=location))
