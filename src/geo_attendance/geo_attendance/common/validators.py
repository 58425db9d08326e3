from __future__ import annotations

import math
import re
from typing import Any

from ..core.exceptions import ValidationError

_TIME_OF_DAY_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d):([0-5]\d)$")


def require_number(value: Any, field_name: str) -> float:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a number") from None
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    return number


def require_latitude(value: Any, field_name: str = "Latitude") -> float:
    lat = require_number(value, field_name)
    if lat < -90 or lat > 90:
        raise ValidationError(f"{field_name} must be between -90 and 90")
    return lat


def require_longitude(value: Any, field_name: str = "Longitude") -> float:
    lng = require_number(value, field_name)
    if lng < -180 or lng > 180:
        raise ValidationError(f"{field_name} must be between -180 and 180")
    return lng


def require_time_of_day(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not _TIME_OF_DAY_RE.match(value):
        raise ValidationError(f"{field_name} has an invalid time format (HH:mm:ss)")
    return value
