from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.enums import RejectReason
from ..geo.model import Coordinate
from ..office.service import OfficeLocationService
from ..schedules.service import AttendanceScheduleService
from .model import Decision
from .repository import AttendanceRepository
from .validator import evaluate_check_in, evaluate_check_out

logger = logging.getLogger(__name__)


class AttendanceService:
    """Runs check-in/check-out for one request.

    Configuration is read once per call and passed to the validator; the store
    is written only when the decision is accepted. Storage errors are not
    caught here.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        office: OfficeLocationService,
        schedules: AttendanceScheduleService,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._office = office
        self._schedules = schedules
        self._clock = clock

    def check_in(self, user_id: int, location: Coordinate, *, now: Optional[datetime] = None) -> Decision:
        now = now or self._clock()
        geofence = self._office.get_geofence()
        schedule = self._schedules.get_schedule()

        existing = self._attendance.find_today_record(user_id, now.date())
        decision = evaluate_check_in(
            user_id=user_id,
            location=location,
            now=now,
            geofence=geofence,
            schedule=schedule,
            existing_today_record=existing,
        )
        if not decision.accepted:
            logger.info("Check-in rejected for user %s: %s", user_id, decision.reason.value)
            return decision

        attendance_id = self._attendance.insert(decision.record)
        record = replace(decision.record, attendance_id=attendance_id)
        logger.info("User %s checked in (%s) record=%s", user_id, record.status.value, attendance_id)
        return Decision.accept(record)

    def check_out(self, user_id: int, location: Coordinate, *, now: Optional[datetime] = None) -> Decision:
        now = now or self._clock()
        geofence = self._office.get_geofence()
        schedule = self._schedules.get_schedule()

        open_record = self._attendance.find_open_record(user_id, now.date())
        decision = evaluate_check_out(
            user_id=user_id,
            location=location,
            now=now,
            geofence=geofence,
            schedule=schedule,
            existing_open_record=open_record,
        )
        if not decision.accepted:
            logger.info("Check-out rejected for user %s: %s", user_id, decision.reason.value)
            return decision

        record = decision.record
        changed = self._attendance.update_check_out(record.attendance_id, record.check_out_time, record.check_out_location)
        if changed == 0:
            # Closed by a concurrent request between the read and the update.
            logger.info("Check-out for user %s lost a race on record %s", user_id, record.attendance_id)
            return Decision.reject(RejectReason.NO_ACTIVE_CHECK_IN, "You have no active check-in today")

        logger.info("User %s checked out record=%s", user_id, record.attendance_id)
        return decision
