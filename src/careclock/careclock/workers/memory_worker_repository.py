from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..core.constants import UNKNOWN_DISPLAY_NAME
from .model import Identity, Worker
from .repository import WorkerRepository


class InMemoryWorkerRepository(WorkerRepository):
    def __init__(self, workers: Sequence[Worker] = ()):
        self._lock = threading.Lock()
        self._by_id: dict[str, Worker] = {w.worker_id: w for w in workers}

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        with self._lock:
            return self._by_id.get(worker_id)

    def list_all(self) -> Sequence[Worker]:
        with self._lock:
            return sorted(self._by_id.values(), key=lambda w: (w.display_name, w.worker_id))

    def ensure(self, identity: Identity, *, now: datetime) -> Worker:
        with self._lock:
            worker = self._by_id.get(identity.worker_id)
            if worker is None:
                worker = Worker(
                    worker_id=identity.worker_id,
                    display_name=identity.display_name,
                    email=identity.email,
                    role=identity.role,
                    created_at=now,
                )
            elif worker.display_name in ("", UNKNOWN_DISPLAY_NAME) and identity.display_name:
                worker = replace(worker, display_name=identity.display_name)
            self._by_id[worker.worker_id] = worker
            return worker

    def delete_all(self) -> int:
        with self._lock:
            count = len(self._by_id)
            self._by_id.clear()
            return count
