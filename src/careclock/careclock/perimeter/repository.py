from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from ..geo.model import LatLng
from .model import Perimeter


class PerimeterRepository(Protocol):
    def get_current(self) -> Optional[Perimeter]:
        """Most recently updated perimeter, read as one consistent row."""

        raise NotImplementedError

    def replace(self, *, center: LatLng, radius_km: float, now: datetime) -> Perimeter:
        """Atomically supersede the current perimeter (latest wins)."""

        raise NotImplementedError
