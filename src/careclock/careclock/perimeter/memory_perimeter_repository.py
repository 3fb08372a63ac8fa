from __future__ import annotations

import threading
from datetime import datetime
from typing import Optional

from ..geo.model import LatLng
from .model import Perimeter
from .repository import PerimeterRepository


class InMemoryPerimeterRepository(PerimeterRepository):
    """Process-local perimeter store.

    The current perimeter is an immutable value swapped under a lock, so a
    reader always gets either the old or the new perimeter as a whole.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current: Optional[Perimeter] = None
        self._history: list[Perimeter] = []

    def get_current(self) -> Optional[Perimeter]:
        with self._lock:
            return self._current

    def replace(self, *, center: LatLng, radius_km: float, now: datetime) -> Perimeter:
        with self._lock:
            created_at = self._current.created_at if self._current else now
            perimeter = Perimeter(
                perimeter_id=len(self._history) + 1,
                center_latitude=center.latitude,
                center_longitude=center.longitude,
                radius_km=float(radius_km),
                created_at=created_at,
                updated_at=now,
            )
            self._history.append(perimeter)
            self._current = perimeter
            return perimeter

    def history(self) -> list[Perimeter]:
        with self._lock:
            return list(self._history)
