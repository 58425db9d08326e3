"""Session-based access guards for JSON endpoints.

The login flow itself lives outside this package; it is expected to put
``user_id`` and ``role`` into the Flask session.
"""

from __future__ import annotations

from functools import wraps

from flask import jsonify, session

from ..core.enums import Role


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"error": "Please log in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"error": "Please log in to continue"}), 401

        if session.get("role") != Role.ADMIN.value:
            return jsonify({"error": "Admin access required"}), 403

        return view(*args, **kwargs)

    return wrapper


def current_user_id() -> int:
    return int(session["user_id"])


def current_role() -> Role:
    try:
        return Role(session.get("role"))
    except ValueError:
        return Role.USER
