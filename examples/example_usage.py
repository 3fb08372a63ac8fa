"""Example: drive the ledger through the service layer (no Flask).

Controllers are thin; the clock-in rules, perimeter check and statistics
all live in the services reached through the container.
"""

import importlib
import logging

from config import get_settings_module

from src.careclock.careclock.container import build_container
from src.careclock.careclock.core.enums import Role
from src.careclock.careclock.geo.model import LatLng
from src.careclock.careclock.geo.watcher import BoundaryWatcher
from src.careclock.careclock.workers.model import Identity


def main():
    logging.basicConfig(level=logging.INFO)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=getattr(settings, "DB_CONFIG", None),
        storage_backend=getattr(settings, "STORAGE_BACKEND", "memory"),
    )

    manager = Identity("manager@example.com", Role.MANAGER, "manager@example.com", "Manager User")
    worker = Identity("careworker@example.com", Role.CARE_WORKER, "careworker@example.com", "Care Worker")

    editor = container.perimeter_service.acquire_editor(manager)
    perimeter = editor.replace(LatLng(10.7769, 106.7009), 0.5)

    watcher = BoundaryWatcher()
    for point in (LatLng(10.7769, 106.7009), LatLng(10.7800, 106.7009), LatLng(10.7900, 106.7009)):
        event = watcher.observe(point, perimeter, clocked_in=container.shift_ledger.get_open_shift(worker.worker_id) is not None)
        if event is None and watcher.was_inside and not container.shift_ledger.get_open_shift(worker.worker_id):
            container.shift_ledger.clock_in(worker, point, container.perimeter_service.get(), note="example")
        elif event is not None:
            print(f"boundary event: {event.value}")
            container.shift_ledger.clock_out(worker, point)
    watcher.stop()

    print(container.dashboard_service.get_dashboard_stats().to_dict())


if __name__ == "__main__":
    main()
