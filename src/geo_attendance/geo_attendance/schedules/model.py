from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from ..common.datetime_utils import format_time_of_day


@dataclass(frozen=True)
class ScheduleWindow:
    """Daily time-of-day interval, same day only (no wraparound past midnight)."""

    start_time: time
    end_time: time

    def contains(self, t: time) -> bool:
        # Both ends inclusive.
        return self.start_time <= t <= self.end_time

    def label(self) -> str:
        return f"{self.start_time.strftime('%H:%M')} - {self.end_time.strftime('%H:%M')}"


@dataclass(frozen=True)
class AttendanceSchedule:
    """Check-in and check-out windows applied to every working day."""

    check_in: ScheduleWindow
    check_out: ScheduleWindow

    def to_dict(self) -> dict:
        return {
            "check_in_start": format_time_of_day(self.check_in.start_time),
            "check_in_end": format_time_of_day(self.check_in.end_time),
            "check_out_start": format_time_of_day(self.check_out.start_time),
            "check_out_end": format_time_of_day(self.check_out.end_time),
        }
