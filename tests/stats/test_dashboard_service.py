from __future__ import annotations

from datetime import datetime, timedelta

from src.careclock.careclock.core.enums import Role
from src.careclock.careclock.geo.model import LatLng
from src.careclock.careclock.stats.service import DashboardService
from src.careclock.careclock.workers.model import Identity

ORIGIN = LatLng(0.0, 0.0)


def test_empty_ledger_gives_zeroed_stats(shifts_repo, workers_repo, fixed_now):
    stats = DashboardService(shifts_repo, workers_repo).get_dashboard_stats(now=fixed_now)
    body = stats.to_dict()

    assert body["total_staff_count"] == 0
    assert body["active_staff_count"] == 0
    assert body["average_hours_today"] == 0.0
    assert body["clock_ins_today"] == 0
    assert [d["avg_hours"] for d in body["daily_stats"]] == [0.0] * 6
    assert body["weekly_hours_by_staff"] == []


def test_dashboard_over_a_working_week(ledger, shifts_repo, workers_repo, perimeter, care_worker):
    now = datetime(2026, 2, 7, 18, 0)  # Saturday
    twin = Identity("cw-2", Role.CARE_WORKER, "ann2@example.com", "Ann")

    for day in range(5):  # Monday to Friday, 8h each
        start = datetime(2026, 2, 2, 9, 0) + timedelta(days=day)
        ledger.clock_in(care_worker, ORIGIN, perimeter, now=start)
        ledger.clock_out(care_worker, ORIGIN, now=start + timedelta(hours=8))
    ledger.clock_in(twin, ORIGIN, perimeter, now=datetime(2026, 2, 2, 10, 0))
    ledger.clock_out(twin, ORIGIN, now=datetime(2026, 2, 2, 14, 0))
    ledger.clock_in(twin, ORIGIN, perimeter, now=now - timedelta(hours=2))

    body = DashboardService(shifts_repo, workers_repo).get_dashboard_stats(now=now).to_dict()

    assert body["total_staff_count"] == 2
    assert body["active_staff_count"] == 1
    assert body["clock_ins_today"] == 1
    assert body["average_hours_today"] == 2.0

    daily = {d["day"]: d["avg_hours"] for d in body["daily_stats"]}
    assert daily["Monday"] == 6.0
    assert daily["Friday"] == 8.0
    # Saturday's shift is still open.
    assert daily["Saturday"] == 0.0

    assert body["weekly_hours_by_staff"] == [
        {"worker_id": "cw-1", "staff_name": "Ann", "total_hours": 40.0},
        {"worker_id": "cw-2", "staff_name": "Ann", "total_hours": 4.0},
    ]


def test_shift_left_open_before_window_is_still_active(ledger, shifts_repo, workers_repo, perimeter, care_worker):
    now = datetime(2026, 2, 20, 12, 0)
    ledger.clock_in(care_worker, ORIGIN, perimeter, now=now - timedelta(days=10))

    body = DashboardService(shifts_repo, workers_repo).get_dashboard_stats(now=now).to_dict()

    assert body["active_staff_count"] == 1
    assert body["weekly_hours_by_staff"] == []
