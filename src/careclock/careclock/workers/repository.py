from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Identity, Worker


class WorkerRepository(Protocol):
    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Worker]:
        raise NotImplementedError

    def ensure(self, identity: Identity, *, now: datetime) -> Worker:
        """Return the worker, creating it from the identity if unknown.

        The stored role is never changed; a blank or placeholder display name
        is refreshed from the identity.
        """

        raise NotImplementedError

    def delete_all(self) -> int:
        raise NotImplementedError
