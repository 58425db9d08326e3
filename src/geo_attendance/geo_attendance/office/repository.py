from __future__ import annotations

from typing import Optional, Protocol

from .model import OfficeGeofence


class OfficeLocationRepository(Protocol):
    """Single-row store for the office geofence."""

    def get(self) -> Optional[OfficeGeofence]:
        raise NotImplementedError

    def save(self, geofence: OfficeGeofence) -> None:
        """Replace the current office location."""

        raise NotImplementedError
