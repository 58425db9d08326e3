"""Great-circle distance between two coordinates.

Uses the Haversine formula on a spherical Earth. Inputs are plain degrees;
NaN or infinite values are a caller error and are not checked here.
"""

from __future__ import annotations

import math

from ..core.constants import EARTH_RADIUS_METERS
from .model import Coordinate


def distance_meters(a: Coordinate, b: Coordinate) -> float:
    """Distance between ``a`` and ``b`` in meters (always >= 0)."""
    phi1 = math.radians(a.latitude)
    phi2 = math.radians(b.latitude)
    d_phi = math.radians(b.latitude - a.latitude)
    d_lambda = math.radians(b.longitude - a.longitude)

    h = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push h a hair above 1 for antipodal points.
    h = min(h, 1.0)
    return EARTH_RADIUS_METERS * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
