from __future__ import annotations

from typing import Optional, Protocol

from .model import AttendanceSchedule


class AttendanceScheduleRepository(Protocol):
    """Single-row store for the attendance schedule."""

    def get(self) -> Optional[AttendanceSchedule]:
        raise NotImplementedError

    def save(self, schedule: AttendanceSchedule) -> None:
        """Replace the current schedule."""

        raise NotImplementedError
