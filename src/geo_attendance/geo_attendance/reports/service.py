from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..attendance.model import AttendanceRecord, AttendanceReportRow
from ..attendance.repository import AttendanceRepository
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class MonthlyStats:
    year: int
    month: int
    total: int
    present: int
    late: int
    average_check_in_minutes: float

    @property
    def average_check_in(self) -> str:
        minutes = int(round(self.average_check_in_minutes))
        return f"{minutes // 60:02d}:{minutes % 60:02d}"

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "total": self.total,
            "present": self.present,
            "late": self.late,
            "average_check_in_minutes": self.average_check_in_minutes,
            "average_check_in": self.average_check_in,
        }


def monthly_stats(records: Iterable[AttendanceRecord], *, year: int, month: int) -> MonthlyStats:
    """Count present/late days and the mean check-in time for one month.

    The mean is in minutes since midnight and is 0 for a month with no records.
    """

    in_month = [
        r for r in records if r.check_in_time.year == year and r.check_in_time.month == month
    ]
    present = sum(1 for r in in_month if r.status == AttendanceStatus.PRESENT)
    late = sum(1 for r in in_month if r.status == AttendanceStatus.LATE)
    total_minutes = sum(r.check_in_time.hour * 60 + r.check_in_time.minute for r in in_month)

    return MonthlyStats(
        year=year,
        month=month,
        total=len(in_month),
        present=present,
        late=late,
        average_check_in_minutes=total_minutes / (len(in_month) or 1),
    )


class AttendanceReportService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def history_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_user(user_id)

    def all_records(self) -> Sequence[AttendanceReportRow]:
        return self._attendance.list_all()

    def monthly_stats_for_user(self, user_id: int, *, year: int, month: int) -> MonthlyStats:
        return monthly_stats(self._attendance.list_for_user(user_id), year=year, month=month)
