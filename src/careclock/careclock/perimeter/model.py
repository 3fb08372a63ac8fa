from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.constants import METERS_PER_KM
from ..geo.model import LatLng


@dataclass(frozen=True)
class Perimeter:
    """Circular geofence: the permitted clock-in area.

    Frozen so a value handed to a reader is a consistent snapshot.
    """

    perimeter_id: int
    center_latitude: float
    center_longitude: float
    radius_km: float
    created_at: datetime
    updated_at: datetime

    @property
    def center(self) -> LatLng:
        return LatLng(latitude=self.center_latitude, longitude=self.center_longitude)

    @property
    def radius_meters(self) -> float:
        return self.radius_km * METERS_PER_KM

    def to_dict(self) -> dict:
        return {
            "id": self.perimeter_id,
            "center_latitude": self.center_latitude,
            "center_longitude": self.center_longitude,
            "radius_km": self.radius_km,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
