"""In-memory stand-ins for the MySQL repositories, shared by the test modules."""

from __future__ import annotations

import math
from dataclasses import replace
from datetime import date, datetime
from typing import Optional

from src.geo_attendance.geo_attendance.attendance.model import AttendanceRecord, AttendanceReportRow
from src.geo_attendance.geo_attendance.core.constants import EARTH_RADIUS_METERS
from src.geo_attendance.geo_attendance.core.exceptions import DuplicateRecordError
from src.geo_attendance.geo_attendance.geo.model import Coordinate

OFFICE = Coordinate(latitude=-7.446754, longitude=109.241404)


def north_of(origin: Coordinate, meters: float) -> Coordinate:
    """Point ``meters`` due north of ``origin`` along the meridian."""
    return Coordinate(
        latitude=origin.latitude + math.degrees(meters / EARTH_RADIUS_METERS),
        longitude=origin.longitude,
    )


class InMemoryAttendance:
    """Record store with the same one-per-day guarantee as the MySQL table."""

    def __init__(self, usernames: Optional[dict[int, str]] = None):
        self._by_id: dict[int, AttendanceRecord] = {}
        self._id = 0
        self.usernames = usernames or {}
        self.stale_update = False

    def find_today_record(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        for r in self._by_id.values():
            if r.user_id == user_id and r.work_date == work_date:
                return r
        return None

    def find_open_record(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        r = self.find_today_record(user_id, work_date)
        return r if r and r.check_out_time is None else None

    def insert(self, record: AttendanceRecord) -> int:
        # Checked directly against the rows, like a UNIQUE key would be.
        if any(r.user_id == record.user_id and r.work_date == record.work_date for r in self._by_id.values()):
            raise DuplicateRecordError(f"Duplicate entry '{record.user_id}-{record.work_date}'")
        self._id += 1
        self._by_id[self._id] = replace(record, attendance_id=self._id)
        return self._id

    def update_check_out(self, attendance_id: int, check_out_time: datetime, check_out_location: Coordinate) -> int:
        r = self._by_id.get(attendance_id)
        if self.stale_update or not r or r.check_out_time is not None:
            return 0
        self._by_id[attendance_id] = replace(r, check_out_time=check_out_time, check_out_location=check_out_location)
        return 1

    def list_for_user(self, user_id: int):
        items = [r for r in self._by_id.values() if r.user_id == user_id]
        return sorted(items, key=lambda r: r.check_in_time, reverse=True)

    def list_all(self):
        items = sorted(self._by_id.values(), key=lambda r: r.check_in_time, reverse=True)
        return [AttendanceReportRow(record=r, username=self.usernames.get(r.user_id, f"user{r.user_id}")) for r in items]

    def count(self) -> int:
        return len(self._by_id)


class InMemorySingleRow:
    """Stands in for both the office location and the schedule repository."""

    def __init__(self, value=None):
        self.value = value
        self.saves = 0

    def get(self):
        return self.value

    def save(self, value) -> None:
        self.value = value
        self.saves += 1
