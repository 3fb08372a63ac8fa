from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import Weekday


@dataclass(frozen=True)
class DailyStat:
    day: Weekday
    avg_hours: float

    def to_dict(self) -> dict:
        return {"day": self.day.value, "avg_hours": self.avg_hours}


@dataclass(frozen=True)
class StaffWeeklyHours:
    """Hours per worker; ``staff_name`` is only filled in for presentation."""

    worker_id: str
    total_hours: float
    staff_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "worker_id": self.worker_id,
            "staff_name": self.staff_name or self.worker_id,
            "total_hours": self.total_hours,
        }


@dataclass(frozen=True)
class DashboardCounts:
    total_staff_count: int = 0
    active_staff_count: int = 0
    clock_ins_today: int = 0
    average_hours_today: float = 0.0


@dataclass(frozen=True)
class DashboardStats:
    counts: DashboardCounts = field(default_factory=DashboardCounts)
    daily_stats: list[DailyStat] = field(default_factory=list)
    weekly_hours_by_staff: list[StaffWeeklyHours] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total_staff_count": self.counts.total_staff_count,
            "active_staff_count": self.counts.active_staff_count,
            "average_hours_today": self.counts.average_hours_today,
            "clock_ins_today": self.counts.clock_ins_today,
            "daily_stats": [d.to_dict() for d in self.daily_stats],
            "weekly_hours_by_staff": [w.to_dict() for w in self.weekly_hours_by_staff],
        }
