from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_ts
from ..core.enums import ShiftStatus, WorkerStatus
from ..geo.model import LatLng


@dataclass(frozen=True)
class ShiftRecord:
    """Domain entity: one clock-in/clock-out cycle of a worker."""

    shift_id: int
    worker_id: str
    clock_in_time: datetime
    clock_in_location: LatLng
    clock_in_note: Optional[str] = None
    clock_out_time: Optional[datetime] = None
    clock_out_location: Optional[LatLng] = None
    clock_out_note: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.clock_out_time is None

    @property
    def status(self) -> ShiftStatus:
        return ShiftStatus.ACTIVE if self.is_open else ShiftStatus.CLOCKED_OUT

    @property
    def location(self) -> LatLng:
        """Where the worker was last seen on this shift."""
        if self.is_open or self.clock_out_location is None:
            return self.clock_in_location
        return self.clock_out_location

    @property
    def notes(self) -> Optional[str]:
        return self.clock_in_note if self.is_open else self.clock_out_note

    def to_dict(self) -> dict:
        return {
            "id": self.shift_id,
            "worker_id": self.worker_id,
            "status": self.status.value,
            "is_clock_in": self.is_open,
            "clock_in_time": format_ts(self.clock_in_time),
            "clock_in_location": self.clock_in_location.to_dict(),
            "clock_in_note": self.clock_in_note,
            "clock_out_time": format_ts(self.clock_out_time),
            "clock_out_location": self.clock_out_location.to_dict() if self.clock_out_location else None,
            "clock_out_note": self.clock_out_note,
        }


@dataclass(frozen=True)
class StaffOverviewRow:
    """Read-model for the manager's staff table."""

    worker_id: str
    name: str
    status: WorkerStatus
    last_clock_in: Optional[datetime]
    last_clock_out: Optional[datetime]
    location: Optional[LatLng]
    notes: Optional[str]

    @property
    def is_clock_in(self) -> bool:
        return self.status == WorkerStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            "worker_id": self.worker_id,
            "name": self.name,
            "status": self.status.value,
            "is_clock_in": self.is_clock_in,
            "last_clock_in": format_ts(self.last_clock_in),
            "last_clock_out": format_ts(self.last_clock_out),
            "location": self.location.to_dict() if self.location else None,
            "notes": self.notes,
        }
