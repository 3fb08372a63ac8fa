from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta

from ..common.datetime_utils import now_local, start_of_day
from ..core.constants import WEEKLY_WINDOW_DAYS
from ..shifts.repository import ShiftRepository
from ..workers.repository import WorkerRepository
from . import aggregator
from .model import DashboardStats


class DashboardService:
    """Read side: snapshots the ledger and feeds the aggregator."""

    def __init__(self, shifts: ShiftRepository, workers: WorkerRepository):
        self._shifts = shifts
        self._workers = workers

    def get_dashboard_stats(self, *, now: datetime | None = None) -> DashboardStats:
        now = now or now_local()
        since = min(start_of_day(now), now - timedelta(days=WEEKLY_WINDOW_DAYS))

        snapshot = {r.shift_id: r for r in self._shifts.list_shifts(start=since)}
        # Shifts left open since before the window still count as active.
        for r in self._shifts.list_open():
            snapshot.setdefault(r.shift_id, r)
        records = list(snapshot.values())
        workers = list(self._workers.list_all())

        names = {w.worker_id: w.label for w in workers}
        weekly = [
            replace(row, staff_name=names.get(row.worker_id, row.worker_id))
            for row in aggregator.weekly_hours_by_staff(records, now)
        ]

        return DashboardStats(
            counts=aggregator.dashboard_counts(records, workers, now),
            daily_stats=aggregator.daily_stats(aggregator.completed_within_window(records, now), now),
            weekly_hours_by_staff=weekly,
        )
