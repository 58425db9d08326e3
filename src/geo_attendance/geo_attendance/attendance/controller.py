from __future__ import annotations

import logging
from datetime import date

from flask import Flask, jsonify, request

from ..common.session_guard import admin_required, current_user_id, login_required
from ..common.validators import require_latitude, require_longitude
from ..core.exceptions import DomainError, ValidationError
from ..container import Container
from ..geo.model import Coordinate

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _read_location() -> Coordinate:
        data = request.get_json(silent=True) or {}
        if "latitude" not in data or "longitude" not in data:
            raise ValidationError("Latitude and longitude are required")
        return Coordinate(
            latitude=require_latitude(data.get("latitude")),
            longitude=require_longitude(data.get("longitude")),
        )

    def _attendance_action(action, success_message: str, failure_message: str):
        try:
            location = _read_location()
            decision = action(current_user_id(), location)
        except DomainError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception(failure_message)
            return jsonify({"error": failure_message}), 500

        body = decision.to_dict()
        if not decision.accepted:
            return jsonify(body), 400
        body["message"] = success_message
        return jsonify(body), 201

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="attendance_check_in")
    @login_required
    def check_in():
        return _attendance_action(
            container.attendance_service.check_in,
            "Check-in recorded",
            "System error while checking in",
        )

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="attendance_check_out")
    @login_required
    def check_out():
        return _attendance_action(
            container.attendance_service.check_out,
            "Check-out recorded",
            "System error while checking out",
        )

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_history")
    @login_required
    def history():
        try:
            records = container.report_service.history_for_user(current_user_id())
        except Exception:
            logger.exception("Failed to load attendance history")
            return jsonify({"error": "System error while loading attendance"}), 500
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance/stats", methods=["GET"], endpoint="attendance_stats")
    @login_required
    def stats():
        today = date.today()
        try:
            year = int(request.args.get("year") or today.year)
            month = int(request.args.get("month") or today.month)
        except ValueError:
            return jsonify({"error": "year and month must be integers"}), 400
        if not 1 <= month <= 12:
            return jsonify({"error": "month must be between 1 and 12"}), 400

        try:
            result = container.report_service.monthly_stats_for_user(current_user_id(), year=year, month=month)
        except Exception:
            logger.exception("Failed to compute attendance stats")
            return jsonify({"error": "System error while loading attendance"}), 500
        return jsonify(result.to_dict())

    @app.route("/api/admin/attendance", methods=["GET"], endpoint="admin_attendance")
    @admin_required
    def admin_attendance():
        try:
            rows = container.report_service.all_records()
        except Exception:
            logger.exception("Failed to load attendance for admin")
            return jsonify({"error": "System error while loading attendance"}), 500
        return jsonify([r.to_dict() for r in rows])
