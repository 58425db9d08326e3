from __future__ import annotations

from datetime import date, datetime

import pytest

from src.geo_attendance.geo_attendance.attendance.model import AttendanceRecord
from src.geo_attendance.geo_attendance.core.enums import AttendanceStatus
from src.geo_attendance.geo_attendance.geo.model import Coordinate
from src.geo_attendance.geo_attendance.reports.service import AttendanceReportService, monthly_stats

HERE = Coordinate(-7.4467, 109.2414)


def record(user_id, when: datetime, status: AttendanceStatus) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=None,
        user_id=user_id,
        work_date=when.date(),
        check_in_time=when,
        check_in_location=HERE,
        status=status,
    )


def test_monthly_stats_counts_only_requested_month():
    records = [
        record(1, datetime(2025, 3, 3, 7, 0), AttendanceStatus.PRESENT),
        record(1, datetime(2025, 3, 4, 7, 10), AttendanceStatus.LATE),
        record(1, datetime(2025, 3, 5, 7, 20), AttendanceStatus.LATE),
        record(1, datetime(2025, 4, 1, 7, 0), AttendanceStatus.PRESENT),
        record(1, datetime(2024, 3, 4, 7, 0), AttendanceStatus.PRESENT),
    ]

    stats = monthly_stats(records, year=2025, month=3)

    assert (stats.total, stats.present, stats.late) == (3, 1, 2)
    assert stats.average_check_in_minutes == pytest.approx(7 * 60 + 10)
    assert stats.average_check_in == "07:10"


def test_monthly_stats_of_empty_month():
    stats = monthly_stats([], year=2025, month=2)

    assert stats.to_dict() == {
        "year": 2025,
        "month": 2,
        "total": 0,
        "present": 0,
        "late": 0,
        "average_check_in_minutes": 0,
        "average_check_in": "00:00",
    }


def test_report_service_reads_from_store(attendance_repo):
    attendance_repo.insert(record(1, datetime(2025, 3, 3, 7, 0), AttendanceStatus.PRESENT))
    attendance_repo.insert(record(1, datetime(2025, 3, 4, 7, 5), AttendanceStatus.LATE))
    attendance_repo.insert(record(2, datetime(2025, 3, 4, 7, 2), AttendanceStatus.LATE))

    svc = AttendanceReportService(attendance_repo)

    history = svc.history_for_user(1)
    assert [r.work_date for r in history] == [date(2025, 3, 4), date(2025, 3, 3)]

    rows = svc.all_records()
    assert [r.username for r in rows] == ["budi", "sari", "budi"]
    assert rows[0].to_dict()["username"] == "budi"

    stats = svc.monthly_stats_for_user(2, year=2025, month=3)
    assert (stats.total, stats.late) == (1, 1)
