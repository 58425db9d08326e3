from __future__ import annotations

import logging
from typing import Any

from ..common.validators import require_latitude, require_longitude, require_number
from ..core.constants import DEFAULT_OFFICE_LATITUDE, DEFAULT_OFFICE_LONGITUDE, DEFAULT_OFFICE_RADIUS_METERS
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..geo.model import Coordinate
from .model import OfficeGeofence
from .repository import OfficeLocationRepository

logger = logging.getLogger(__name__)

DEFAULT_GEOFENCE = OfficeGeofence(
    center=Coordinate(latitude=DEFAULT_OFFICE_LATITUDE, longitude=DEFAULT_OFFICE_LONGITUDE),
    radius_meters=DEFAULT_OFFICE_RADIUS_METERS,
)


class OfficeLocationService:
    def __init__(self, locations: OfficeLocationRepository):
        self._locations = locations

    def get_geofence(self) -> OfficeGeofence:
        """Current office geofence, or the built-in default if none was saved."""
        return self._locations.get() or DEFAULT_GEOFENCE

    def update(self, *, current_role: Role, lat: Any, lng: Any, radius: Any) -> OfficeGeofence:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You are not allowed to change the office location")

        latitude = require_latitude(lat)
        longitude = require_longitude(lng)
        radius_meters = require_number(radius, "Radius")
        if radius_meters <= 0:
            raise ValidationError("Radius must be greater than 0")

        geofence = OfficeGeofence(center=Coordinate(latitude=latitude, longitude=longitude), radius_meters=radius_meters)
        self._locations.save(geofence)
        logger.info("Office location updated to (%s, %s) radius=%sm", latitude, longitude, radius_meters)
        return geofence
