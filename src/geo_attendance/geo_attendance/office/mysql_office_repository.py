from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from ..geo.model import Coordinate
from .model import OfficeGeofence
from .repository import OfficeLocationRepository


class MySQLOfficeLocationRepository(OfficeLocationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[OfficeGeofence]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, lat, lng, radius FROM office_location ORDER BY id LIMIT 1")
            r = fetchone(cur)
            if not r:
                return None
            return OfficeGeofence(
                center=Coordinate(latitude=float(r["lat"]), longitude=float(r["lng"])),
                radius_meters=float(r["radius"]),
            )

    def save(self, geofence: OfficeGeofence) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "REPLACE INTO office_location (id, lat, lng, radius) VALUES (1, %s, %s, %s)",
                (geofence.center.latitude, geofence.center.longitude, geofence.radius_meters),
            )
