from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..geo.model import LatLng
from .model import ShiftRecord


class ShiftRepository(Protocol):
    def get_open_for_worker(self, worker_id: str) -> Optional[ShiftRecord]:
        raise NotImplementedError

    def open_shift(
        self,
        *,
        worker_id: str,
        clock_in_time: datetime,
        location: LatLng,
        note: Optional[str] = None,
    ) -> ShiftRecord:
        """Check for an open shift and create one, as a single atomic step.

        Raises StateConflictError(ALREADY_CLOCKED_IN) if one is already open.
        """

        raise NotImplementedError

    def close_open_shift(
        self,
        *,
        worker_id: str,
        clock_out_time: datetime,
        location: LatLng,
        note: Optional[str] = None,
    ) -> ShiftRecord:
        """Set the clock-out fields of the worker's open shift, atomically.

        Raises StateConflictError(NO_OPEN_SHIFT) if nothing is open.
        """

        raise NotImplementedError

    def list_shifts(
        self,
        *,
        worker_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Sequence[ShiftRecord]:
        """Records ordered by clock_in_time descending."""

        raise NotImplementedError

    def list_open(self) -> Sequence[ShiftRecord]:
        raise NotImplementedError

    def latest_per_worker(self) -> Sequence[ShiftRecord]:
        """The single most recent record (by clock_in_time) of each worker."""

        raise NotImplementedError

    def delete_all(self) -> int:
        """Administrative reset."""

        raise NotImplementedError
