from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import now_local
from ..common.validators import optional_note, require_location
from ..core.enums import Role, WorkerStatus
from ..core.exceptions import PerimeterViolationError, StateConflictError, StorageTimeoutError, ValidationError
from ..geo.geomath import is_within
from ..perimeter.model import Perimeter
from ..workers.model import Identity
from ..workers.repository import WorkerRepository
from .model import ShiftRecord, StaffOverviewRow
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class ShiftLedger:
    """Clock-in/clock-out state machine: each worker is either OUT or IN.

    Identity, perimeter snapshot and ``now`` are always passed in; nothing is
    read from request-scoped or global state.
    """

    def __init__(self, shifts: ShiftRepository, workers: WorkerRepository):
        self._shifts = shifts
        self._workers = workers

    def clock_in(
        self,
        identity: Identity,
        location: Any,
        perimeter: Optional[Perimeter],
        *,
        note: Any = None,
        now: datetime | None = None,
    ) -> ShiftRecord:
        location = require_location(location)
        note = optional_note(note)

        # Containment is re-checked here whatever the client displayed.
        if perimeter is None or not is_within(location, perimeter.center, perimeter.radius_meters):
            logger.warning(
                "Clock-in rejected for %s: (%s, %s) outside perimeter",
                identity.worker_id,
                location.latitude,
                location.longitude,
            )
            if perimeter is None:
                raise PerimeterViolationError("No work perimeter is configured")
            raise PerimeterViolationError("You must be within the designated area to clock in")

        now = now or now_local()
        self._workers.ensure(identity, now=now)
        try:
            record = self._shifts.open_shift(
                worker_id=identity.worker_id,
                clock_in_time=now,
                location=location,
                note=note,
            )
        except StateConflictError:
            logger.warning("Clock-in rejected for %s: already clocked in", identity.worker_id)
            raise
        except StorageTimeoutError:
            logger.warning("Clock-in for %s timed out in storage", identity.worker_id)
            raise

        logger.info("Worker %s clocked in (shift %s)", identity.worker_id, record.shift_id)
        return record

    def clock_out(
        self,
        identity: Identity,
        location: Any,
        *,
        note: Any = None,
        now: datetime | None = None,
    ) -> ShiftRecord:
        # No perimeter check: leaving the area and clocking out is the normal path.
        location = require_location(location)
        note = optional_note(note)

        try:
            record = self._shifts.close_open_shift(
                worker_id=identity.worker_id,
                clock_out_time=now or now_local(),
                location=location,
                note=note,
            )
        except StateConflictError:
            logger.warning("Clock-out rejected for %s: no open shift", identity.worker_id)
            raise
        except StorageTimeoutError:
            logger.warning("Clock-out for %s timed out in storage", identity.worker_id)
            raise

        logger.info("Worker %s clocked out (shift %s)", identity.worker_id, record.shift_id)
        return record

    def get_open_shift(self, worker_id: str) -> Optional[ShiftRecord]:
        return self._shifts.get_open_for_worker(worker_id)

    def list_shifts(
        self,
        worker_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[ShiftRecord]:
        if start is not None and end is not None and start > end:
            raise ValidationError("start must not be after end")
        return list(self._shifts.list_shifts(worker_id=worker_id, start=start, end=end))

    def staff_overview(self) -> list[StaffOverviewRow]:
        """Latest-record view of every care worker who has ever clocked in."""
        latest = {r.worker_id: r for r in self._shifts.latest_per_worker()}

        rows = []
        for worker in self._workers.list_all():
            if worker.role != Role.CARE_WORKER:
                continue
            record = latest.get(worker.worker_id)
            if record is None:
                continue
            rows.append(
                StaffOverviewRow(
                    worker_id=worker.worker_id,
                    name=worker.label,
                    status=WorkerStatus.ACTIVE if record.is_open else WorkerStatus.NOT_ACTIVE,
                    last_clock_in=record.clock_in_time,
                    last_clock_out=record.clock_out_time,
                    location=record.location,
                    notes=record.notes,
                )
            )

        rows.sort(key=lambda r: (r.name, r.worker_id))
        return rows

    def active_staff(self) -> list[StaffOverviewRow]:
        names = {w.worker_id: w.label for w in self._workers.list_all()}
        return [
            StaffOverviewRow(
                worker_id=r.worker_id,
                name=names.get(r.worker_id, r.worker_id),
                status=WorkerStatus.ACTIVE,
                last_clock_in=r.clock_in_time,
                last_clock_out=None,
                location=r.clock_in_location,
                notes=r.clock_in_note,
            )
            for r in self._shifts.list_open()
        ]

    def reset_records(self) -> int:
        """Administrative reset; deletes every shift record."""
        deleted = self._shifts.delete_all()
        logger.warning("Ledger reset: %d shift records deleted", deleted)
        return deleted
