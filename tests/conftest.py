from __future__ import annotations

from datetime import datetime

import pytest

from src.careclock.careclock.core.enums import Role
from src.careclock.careclock.geo.model import LatLng
from src.careclock.careclock.perimeter.memory_perimeter_repository import InMemoryPerimeterRepository
from src.careclock.careclock.perimeter.service import PerimeterService
from src.careclock.careclock.shifts.memory_shift_repository import InMemoryShiftRepository
from src.careclock.careclock.shifts.service import ShiftLedger
from src.careclock.careclock.workers.memory_worker_repository import InMemoryWorkerRepository
from src.careclock.careclock.workers.model import Identity

ORIGIN = LatLng(0.0, 0.0)


@pytest.fixture
def fixed_now() -> datetime:
    # Monday
    return datetime(2026, 2, 2, 9, 0, 0)


@pytest.fixture
def care_worker() -> Identity:
    return Identity(worker_id="cw-1", role=Role.CARE_WORKER, email="ann@example.com", display_name="Ann")


@pytest.fixture
def manager() -> Identity:
    return Identity(worker_id="mgr-1", role=Role.MANAGER, email="boss@example.com", display_name="Boss")


@pytest.fixture
def perimeter_service() -> PerimeterService:
    return PerimeterService(InMemoryPerimeterRepository())


@pytest.fixture
def perimeter(perimeter_service, fixed_now):
    return perimeter_service.set(ORIGIN, 1.0, now=fixed_now)


@pytest.fixture
def workers_repo() -> InMemoryWorkerRepository:
    return InMemoryWorkerRepository()


@pytest.fixture
def shifts_repo() -> InMemoryShiftRepository:
    return InMemoryShiftRepository(lock_timeout=1.0)


@pytest.fixture
def ledger(shifts_repo, workers_repo) -> ShiftLedger:
    return ShiftLedger(shifts_repo, workers_repo)
