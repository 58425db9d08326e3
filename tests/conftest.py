from __future__ import annotations

from datetime import time

import pytest

from src.geo_attendance.geo_attendance.office.model import OfficeGeofence
from src.geo_attendance.geo_attendance.schedules.model import AttendanceSchedule, ScheduleWindow

from tests.fakes import OFFICE, InMemoryAttendance, InMemorySingleRow


@pytest.fixture
def schedule() -> AttendanceSchedule:
    return AttendanceSchedule(
        check_in=ScheduleWindow(start_time=time(7, 0, 0), end_time=time(7, 30, 0)),
        check_out=ScheduleWindow(start_time=time(13, 30, 0), end_time=time(14, 0, 0)),
    )


@pytest.fixture
def geofence() -> OfficeGeofence:
    return OfficeGeofence(center=OFFICE, radius_meters=100)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance(usernames={1: "budi", 2: "sari"})


@pytest.fixture
def office_repo(geofence) -> InMemorySingleRow:
    return InMemorySingleRow(geofence)


@pytest.fixture
def schedules_repo(schedule) -> InMemorySingleRow:
    return InMemorySingleRow(schedule)
