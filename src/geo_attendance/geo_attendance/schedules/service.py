from __future__ import annotations

import logging
from typing import Any

from ..common.datetime_utils import parse_time_of_day
from ..common.validators import require_time_of_day
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ConfigurationError, ValidationError
from .model import AttendanceSchedule, ScheduleWindow
from .repository import AttendanceScheduleRepository

logger = logging.getLogger(__name__)


class AttendanceScheduleService:
    def __init__(self, schedules: AttendanceScheduleRepository):
        self._schedules = schedules

    def get_schedule(self) -> AttendanceSchedule:
        schedule = self._schedules.get()
        if schedule is None:
            raise ConfigurationError("The attendance schedule has not been configured by an admin")
        return schedule

    def update(
        self,
        *,
        current_role: Role,
        check_in_start: Any,
        check_in_end: Any,
        check_out_start: Any,
        check_out_end: Any,
    ) -> AttendanceSchedule:
        """Validate and store a new schedule.

        Both windows must be non-empty (end after start) and the check-out
        window must open strictly after the check-in window closes.
        """

        if current_role != Role.ADMIN:
            raise AuthorizationError("You are not allowed to change the attendance schedule")

        check_in = ScheduleWindow(
            start_time=parse_time_of_day(require_time_of_day(check_in_start, "Check-in start")),
            end_time=parse_time_of_day(require_time_of_day(check_in_end, "Check-in end")),
        )
        check_out = ScheduleWindow(
            start_time=parse_time_of_day(require_time_of_day(check_out_start, "Check-out start")),
            end_time=parse_time_of_day(require_time_of_day(check_out_end, "Check-out end")),
        )

        if check_in.end_time <= check_in.start_time or check_out.end_time <= check_out.start_time:
            raise ValidationError("End time must be later than start time")
        if check_out.start_time <= check_in.end_time:
            raise ValidationError("Check-out window must start after the check-in window ends")

        schedule = AttendanceSchedule(check_in=check_in, check_out=check_out)
        self._schedules.save(schedule)
        logger.info("Attendance schedule updated: check-in %s, check-out %s", check_in.label(), check_out.label())
        return schedule
