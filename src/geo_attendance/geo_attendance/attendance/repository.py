from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..geo.model import Coordinate
from .model import AttendanceRecord, AttendanceReportRow


class AttendanceRepository(Protocol):
    """Record store for attendance days.

    Implementations must enforce one record per (user_id, work_date) on
    insert; the validator's own check is only a pre-check.
    """

    def find_today_record(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def find_open_record(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        """Record for that day with check-in set and check-out still empty."""

        raise NotImplementedError

    def insert(self, record: AttendanceRecord) -> int:
        """Store a new check-in and return its id.

        Raises DuplicateRecordError if the user already has a record that day.
        """

        raise NotImplementedError

    def update_check_out(self, attendance_id: int, check_out_time: datetime, check_out_location: Coordinate) -> int:
        """Close an open record. Returns the number of rows changed (0 or 1)."""

        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceReportRow]:
        """All non-admin records joined with user names, newest first."""

        raise NotImplementedError
