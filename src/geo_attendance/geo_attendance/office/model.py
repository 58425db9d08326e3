from __future__ import annotations

from dataclasses import dataclass

from ..geo.distance import distance_meters
from ..geo.model import Coordinate


@dataclass(frozen=True)
class OfficeGeofence:
    """Circular area around the office where attendance actions are allowed."""

    center: Coordinate
    radius_meters: float

    def distance_to(self, point: Coordinate) -> float:
        return distance_meters(self.center, point)

    def contains(self, point: Coordinate) -> bool:
        # Boundary counts as inside.
        return self.distance_to(point) <= self.radius_meters

    def to_dict(self) -> dict:
        return {
            "lat": self.center.latitude,
            "lng": self.center.longitude,
            "radius": self.radius_meters,
        }
