from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus, Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..geo.model import Coordinate
from .model import AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository

_COLUMNS = """
    a.id, a.user_id, a.work_date, a.check_in_time, a.check_in_latitude, a.check_in_longitude,
    a.status, a.check_out_time, a.check_out_latitude, a.check_out_longitude
"""


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    check_out_location = None
    if r.get("check_out_latitude") is not None and r.get("check_out_longitude") is not None:
        check_out_location = Coordinate(
            latitude=float(r["check_out_latitude"]),
            longitude=float(r["check_out_longitude"]),
        )
    return AttendanceRecord(
        attendance_id=int(r["id"]),
        user_id=int(r["user_id"]),
        work_date=r["work_date"],
        check_in_time=r["check_in_time"],
        check_in_location=Coordinate(
            latitude=float(r["check_in_latitude"]),
            longitude=float(r["check_in_longitude"]),
        ),
        status=AttendanceStatus(r["status"]),
        check_out_time=r.get("check_out_time"),
        check_out_location=check_out_location,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_today_record(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance a
                WHERE a.user_id=%s AND a.work_date=%s
                """,
                (user_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def find_open_record(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance a
                WHERE a.user_id=%s AND a.work_date=%s AND a.check_out_time IS NULL
                """,
                (user_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def insert(self, record: AttendanceRecord) -> int:
        # uq_attendance_user_day rejects a second row for the same day.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance
                    (user_id, work_date, check_in_time, check_in_latitude, check_in_longitude, status)
                VALUES (%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.user_id,
                    record.work_date,
                    record.check_in_time,
                    record.check_in_location.latitude,
                    record.check_in_location.longitude,
                    record.status.value,
                ),
            )
            return int(cur.lastrowid)

    def update_check_out(self, attendance_id: int, check_out_time: datetime, check_out_location: Coordinate) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET check_out_time=%s, check_out_latitude=%s, check_out_longitude=%s
                WHERE id=%s AND check_out_time IS NULL
                """,
                (check_out_time, check_out_location.latitude, check_out_location.longitude, int(attendance_id)),
            )
            return int(cur.rowcount)

    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance a
                WHERE a.user_id=%s
                ORDER BY a.check_in_time DESC
                """,
                (user_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[AttendanceReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}, u.username, u.full_name
                FROM attendance a
                JOIN users u ON u.id = a.user_id
                WHERE u.role <> %s
                ORDER BY a.check_in_time DESC
                """,
                (Role.ADMIN.value,),
            )
            return [
                AttendanceReportRow(record=_to_record(r), username=r["username"], full_name=r.get("full_name"))
                for r in fetchall(cur)
            ]
