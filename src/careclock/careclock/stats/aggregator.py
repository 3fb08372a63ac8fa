"""Attendance statistics over a snapshot of shift records.

Every function is pure: the same records and ``now`` always give the same
result, and empty input gives zeroed statistics rather than an error.

Two rules about open shifts coexist on purpose:

* ``duration_hours`` / ``average_hours`` / ``daily_stats`` count an open shift
  up to ``now`` ("hours so far").
* ``weekly_hours_by_staff`` only sums shifts that have been clocked out.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Sequence

from ..common.datetime_utils import hours_between
from ..core.constants import HOURS_DECIMALS, WEEKLY_WINDOW_DAYS
from ..core.enums import Role, Weekday
from ..shifts.model import ShiftRecord
from ..workers.model import Worker
from .model import DailyStat, DashboardCounts, StaffWeeklyHours

# datetime.weekday(): Monday == 0 ... Saturday == 5, Sunday == 6 (not reported).
_REPORTED_WEEKDAYS = tuple(Weekday)


def _round(hours: float) -> float:
    return round(hours, HOURS_DECIMALS)


def duration_hours(record: ShiftRecord, now: datetime) -> float:
    end = record.clock_out_time if record.clock_out_time is not None else now
    return max(0.0, hours_between(record.clock_in_time, end))


def average_hours(records: Iterable[ShiftRecord], now: datetime) -> float:
    durations = [duration_hours(r, now) for r in records]
    if not durations:
        return 0.0
    return _round(sum(durations) / len(durations))


def daily_stats(records: Iterable[ShiftRecord], now: datetime) -> list[DailyStat]:
    """Average hours per weekday, Monday to Saturday."""
    buckets: dict[Weekday, list[float]] = {day: [] for day in _REPORTED_WEEKDAYS}
    for r in records:
        index = r.clock_in_time.weekday()
        if index >= len(_REPORTED_WEEKDAYS):
            continue
        buckets[_REPORTED_WEEKDAYS[index]].append(duration_hours(r, now))

    return [
        DailyStat(day=day, avg_hours=_round(sum(hours) / len(hours)) if hours else 0.0)
        for day, hours in buckets.items()
    ]


def completed_within_window(records: Iterable[ShiftRecord], now: datetime) -> list[ShiftRecord]:
    """Clocked-out records that started in the trailing weekly window."""
    window_start = now - timedelta(days=WEEKLY_WINDOW_DAYS)
    return [r for r in records if not r.is_open and r.clock_in_time >= window_start]


def weekly_hours_by_staff(records: Iterable[ShiftRecord], now: datetime) -> list[StaffWeeklyHours]:
    totals: dict[str, float] = {}
    for r in completed_within_window(records, now):
        totals[r.worker_id] = totals.get(r.worker_id, 0.0) + duration_hours(r, now)

    rows = [StaffWeeklyHours(worker_id=worker_id, total_hours=_round(total)) for worker_id, total in totals.items()]
    rows.sort(key=lambda row: (-row.total_hours, row.worker_id))
    return rows


def records_on_day(records: Iterable[ShiftRecord], now: datetime) -> list[ShiftRecord]:
    today = now.date()
    return [r for r in records if r.clock_in_time.date() == today]


def dashboard_counts(records: Sequence[ShiftRecord], workers: Iterable[Worker], now: datetime) -> DashboardCounts:
    today_records = records_on_day(records, now)
    return DashboardCounts(
        total_staff_count=sum(1 for w in workers if w.role == Role.CARE_WORKER),
        active_staff_count=len({r.worker_id for r in records if r.is_open}),
        clock_ins_today=len({r.worker_id for r in today_records}),
        average_hours_today=average_hours(today_records, now),
    )
