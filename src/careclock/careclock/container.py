from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_LOCK_TIMEOUT_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .perimeter.memory_perimeter_repository import InMemoryPerimeterRepository
from .perimeter.mysql_perimeter_repository import MySQLPerimeterRepository
from .perimeter.repository import PerimeterRepository
from .perimeter.service import PerimeterService
from .shifts.memory_shift_repository import InMemoryShiftRepository
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftLedger
from .stats.service import DashboardService
from .workers.memory_worker_repository import InMemoryWorkerRepository
from .workers.mysql_worker_repository import MySQLWorkerRepository
from .workers.repository import WorkerRepository

STORAGE_BACKENDS = ("mysql", "memory")


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    perimeters_repo: PerimeterRepository
    workers_repo: WorkerRepository
    shifts_repo: ShiftRepository

    perimeter_service: PerimeterService
    shift_ledger: ShiftLedger
    dashboard_service: DashboardService


def build_container(
    *,
    db_config: Optional[dict] = None,
    storage_backend: str = "mysql",
    lock_timeout: float = DEFAULT_LOCK_TIMEOUT_SECONDS,
) -> Container:
    if storage_backend not in STORAGE_BACKENDS:
        raise ValueError(f"Unknown storage backend: {storage_backend!r}")

    conn: Optional[DatabaseConnection] = None
    if storage_backend == "mysql":
        if db_config is None:
            raise ValueError("db_config is required for the mysql storage backend")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        perimeters_repo = MySQLPerimeterRepository(conn)
        workers_repo = MySQLWorkerRepository(conn)
        shifts_repo = MySQLShiftRepository(conn)
    else:
        perimeters_repo = InMemoryPerimeterRepository()
        workers_repo = InMemoryWorkerRepository()
        shifts_repo = InMemoryShiftRepository(lock_timeout=lock_timeout)

    return Container(
        conn=conn,
        perimeters_repo=perimeters_repo,
        workers_repo=workers_repo,
        shifts_repo=shifts_repo,
        perimeter_service=PerimeterService(perimeters_repo),
        shift_ledger=ShiftLedger(shifts_repo, workers_repo),
        dashboard_service=DashboardService(shifts_repo, workers_repo),
    )
