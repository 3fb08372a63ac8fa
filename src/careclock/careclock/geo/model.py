from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LatLng:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}
