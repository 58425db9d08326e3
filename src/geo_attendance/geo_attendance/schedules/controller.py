from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.session_guard import admin_required, current_role, login_required
from ..core.exceptions import AuthorizationError, ConfigurationError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/attendance-schedule", methods=["GET"], endpoint="attendance_schedule")
    @login_required
    def get_attendance_schedule():
        try:
            schedule = container.schedule_service.get_schedule()
        except ConfigurationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Failed to load attendance schedule")
            return jsonify({"error": "System error while loading the schedule"}), 500
        return jsonify(schedule.to_dict())

    @app.route("/api/admin/attendance-schedule", methods=["PUT"], endpoint="attendance_schedule_update")
    @admin_required
    def update_attendance_schedule():
        data = request.get_json(silent=True) or {}
        try:
            schedule = container.schedule_service.update(
                current_role=current_role(),
                check_in_start=data.get("check_in_start"),
                check_in_end=data.get("check_in_end"),
                check_out_start=data.get("check_out_start"),
                check_out_end=data.get("check_out_end"),
            )
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except AuthorizationError as e:
            return jsonify({"error": str(e)}), 403
        except Exception:
            logger.exception("Failed to update attendance schedule")
            return jsonify({"error": "System error while updating the schedule"}), 500
        return jsonify({"message": "Attendance schedule updated", **schedule.to_dict()})
