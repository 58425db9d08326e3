from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus, RejectReason
from ..geo.model import Coordinate


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance day of one user."""

    attendance_id: Optional[int]
    user_id: int
    work_date: date
    check_in_time: datetime
    check_in_location: Coordinate
    status: AttendanceStatus
    check_out_time: Optional[datetime] = None
    check_out_location: Optional[Coordinate] = None

    @property
    def is_open(self) -> bool:
        return self.check_out_time is None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "user_id": self.user_id,
            "work_date": self.work_date.isoformat(),
            "check_in_time": self.check_in_time.isoformat(),
            "check_in_latitude": self.check_in_location.latitude,
            "check_in_longitude": self.check_in_location.longitude,
            "status": self.status.value,
            "check_out_time": self.check_out_time.isoformat() if self.check_out_time else None,
            "check_out_latitude": self.check_out_location.latitude if self.check_out_location else None,
            "check_out_longitude": self.check_out_location.longitude if self.check_out_location else None,
        }


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for the admin listing (record joined with the user)."""

    record: AttendanceRecord
    username: str
    full_name: Optional[str] = None

    def to_dict(self) -> dict:
        data = self.record.to_dict()
        data["username"] = self.username
        data["full_name"] = self.full_name
        return data


@dataclass(frozen=True)
class Decision:
    """Outcome of a check-in/check-out attempt.

    Accepted decisions carry the record to persist; rejected ones carry a
    stable reason code plus a human readable message.
    """

    accepted: bool
    reason: Optional[RejectReason] = None
    record: Optional[AttendanceRecord] = None
    message: Optional[str] = field(default=None, compare=False)

    @classmethod
    def accept(cls, record: AttendanceRecord) -> "Decision":
        return cls(accepted=True, record=record)

    @classmethod
    def reject(cls, reason: RejectReason, message: Optional[str] = None) -> "Decision":
        return cls(accepted=False, reason=reason, message=message)

    def to_dict(self) -> dict:
        return {
            "accepted": self.accepted,
            "reason": self.reason.value if self.reason else None,
            "message": self.message,
            "record": self.record.to_dict() if self.record else None,
        }
