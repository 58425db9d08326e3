from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, normalize_mysql_time
from .model import AttendanceSchedule, ScheduleWindow
from .repository import AttendanceScheduleRepository


class MySQLAttendanceScheduleRepository(AttendanceScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[AttendanceSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT check_in_start, check_in_end, check_out_start, check_out_end
                FROM attendance_schedule
                ORDER BY id
                LIMIT 1
                """
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceSchedule(
                check_in=ScheduleWindow(
                    start_time=normalize_mysql_time(r["check_in_start"]),
                    end_time=normalize_mysql_time(r["check_in_end"]),
                ),
                check_out=ScheduleWindow(
                    start_time=normalize_mysql_time(r["check_out_start"]),
                    end_time=normalize_mysql_time(r["check_out_end"]),
                ),
            )

    def save(self, schedule: AttendanceSchedule) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                REPLACE INTO attendance_schedule
                    (id, check_in_start, check_in_end, check_out_start, check_out_end)
                VALUES (1, %s, %s, %s, %s)
                """,
                (
                    schedule.check_in.start_time,
                    schedule.check_in.end_time,
                    schedule.check_out.start_time,
                    schedule.check_out.end_time,
                ),
            )
