from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.session_guard import admin_required, current_role, login_required
from ..core.exceptions import AuthorizationError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/office-location", methods=["GET"], endpoint="office_location")
    @login_required
    def get_office_location():
        try:
            geofence = container.office_service.get_geofence()
        except Exception:
            logger.exception("Failed to load office location")
            return jsonify({"error": "System error while loading office location"}), 500
        return jsonify(geofence.to_dict())

    @app.route("/api/admin/office-location", methods=["PUT"], endpoint="office_location_update")
    @admin_required
    def update_office_location():
        data = request.get_json(silent=True) or {}
        try:
            geofence = container.office_service.update(
                current_role=current_role(),
                lat=data.get("lat"),
                lng=data.get("lng"),
                radius=data.get("radius"),
            )
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except AuthorizationError as e:
            return jsonify({"error": str(e)}), 403
        except Exception:
            logger.exception("Failed to update office location")
            return jsonify({"error": "System error while updating office location"}), 500
        return jsonify({"message": "Office location updated", **geofence.to_dict()})
