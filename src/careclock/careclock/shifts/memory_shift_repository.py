from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime
from typing import Iterator, Optional, Sequence

from ..core.constants import DEFAULT_LOCK_TIMEOUT_SECONDS
from ..core.exceptions import StateConflictError, StorageTimeoutError
from ..geo.model import LatLng
from .model import ShiftRecord
from .repository import ShiftRepository


def _newest_first(records) -> list[ShiftRecord]:
    return sorted(records, key=lambda r: (r.clock_in_time, r.shift_id), reverse=True)


class InMemoryShiftRepository(ShiftRepository):
    """Process-local ledger store.

    State changes of one worker run under that worker's lock (acquired with a
    bounded timeout); the record table itself is guarded by a short data lock
    so readers get consistent snapshots.

    One lock is kept per worker id ever seen and never evicted; the set of
    workers is small and lives as long as the process.
    """

    def __init__(self, *, lock_timeout: float = DEFAULT_LOCK_TIMEOUT_SECONDS):
        self._lock_timeout = float(lock_timeout)
        self._data_lock = threading.Lock()
        self._registry_lock = threading.Lock()
        self._worker_locks: dict[str, threading.Lock] = {}
        self._records: dict[int, ShiftRecord] = {}
        self._next_id = 0

    def _worker_lock(self, worker_id: str) -> threading.Lock:
        with self._registry_lock:
            return self._worker_locks.setdefault(worker_id, threading.Lock())

    @contextmanager
    def _worker_transaction(self, worker_id: str) -> Iterator[None]:
        lock = self._worker_lock(worker_id)
        if not lock.acquire(timeout=self._lock_timeout):
            raise StorageTimeoutError(f"Timed out waiting for ledger lock of worker {worker_id}")
        try:
            yield
        finally:
            lock.release()

    def _find_open(self, worker_id: str) -> Optional[ShiftRecord]:
        with self._data_lock:
            open_records = [r for r in self._records.values() if r.worker_id == worker_id and r.is_open]
        return _newest_first(open_records)[0] if open_records else None

    def get_open_for_worker(self, worker_id: str) -> Optional[ShiftRecord]:
        return self._find_open(worker_id)

    def open_shift(
        self,
        *,
        worker_id: str,
        clock_in_time: datetime,
        location: LatLng,
        note: Optional[str] = None,
    ) -> ShiftRecord:
        with self._worker_transaction(worker_id):
            if self._find_open(worker_id):
                raise StateConflictError.already_clocked_in(worker_id)

            with self._data_lock:
                self._next_id += 1
                record = ShiftRecord(
                    shift_id=self._next_id,
                    worker_id=worker_id,
                    clock_in_time=clock_in_time,
                    clock_in_location=location,
                    clock_in_note=note,
                )
                self._records[record.shift_id] = record
            return record

    def close_open_shift(
        self,
        *,
        worker_id: str,
        clock_out_time: datetime,
        location: LatLng,
        note: Optional[str] = None,
    ) -> ShiftRecord:
        with self._worker_transaction(worker_id):
            current = self._find_open(worker_id)
            if current is None:
                raise StateConflictError.no_open_shift(worker_id)

            closed = replace(
                current,
                clock_out_time=max(clock_out_time, current.clock_in_time),
                clock_out_location=location,
                clock_out_note=note,
            )
            with self._data_lock:
                self._records[closed.shift_id] = closed
            return closed

    def list_shifts(
        self,
        *,
        worker_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Sequence[ShiftRecord]:
        with self._data_lock:
            items = list(self._records.values())
        if worker_id is not None:
            items = [r for r in items if r.worker_id == worker_id]
        if start is not None:
            items = [r for r in items if r.clock_in_time >= start]
        if end is not None:
            items = [r for r in items if r.clock_in_time <= end]
        return _newest_first(items)

    def list_open(self) -> Sequence[ShiftRecord]:
        with self._data_lock:
            return _newest_first(r for r in self._records.values() if r.is_open)

    def latest_per_worker(self) -> Sequence[ShiftRecord]:
        latest: dict[str, ShiftRecord] = {}
        for r in self.list_shifts():
            latest.setdefault(r.worker_id, r)
        return list(latest.values())

    def delete_all(self) -> int:
        with self._data_lock:
            count = len(self._records)
            self._records.clear()
            return count
