from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .office.mysql_office_repository import MySQLOfficeLocationRepository
from .office.repository import OfficeLocationRepository
from .office.service import OfficeLocationService
from .reports.service import AttendanceReportService
from .schedules.mysql_schedule_repository import MySQLAttendanceScheduleRepository
from .schedules.repository import AttendanceScheduleRepository
from .schedules.service import AttendanceScheduleService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    office_repo: OfficeLocationRepository
    schedules_repo: AttendanceScheduleRepository

    office_service: OfficeLocationService
    schedule_service: AttendanceScheduleService
    attendance_service: AttendanceService
    report_service: AttendanceReportService


def wire_container(
    *,
    attendance_repo: AttendanceRepository,
    office_repo: OfficeLocationRepository,
    schedules_repo: AttendanceScheduleRepository,
) -> Container:
    office_service = OfficeLocationService(office_repo)
    schedule_service = AttendanceScheduleService(schedules_repo)
    attendance_service = AttendanceService(attendance_repo, office_service, schedule_service)
    report_service = AttendanceReportService(attendance_repo)

    return Container(
        attendance_repo=attendance_repo,
        office_repo=office_repo,
        schedules_repo=schedules_repo,
        office_service=office_service,
        schedule_service=schedule_service,
        attendance_service=attendance_service,
        report_service=report_service,
    )


def build_container(*, conn: DatabaseConnection) -> Container:
    return wire_container(
        attendance_repo=MySQLAttendanceRepository(conn),
        office_repo=MySQLOfficeLocationRepository(conn),
        schedules_repo=MySQLAttendanceScheduleRepository(conn),
    )


def connect(db_config: dict) -> DatabaseConnection:
    return DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
