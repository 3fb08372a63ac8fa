from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Identity:
    """Trusted (worker_id, role, email, display_name) tuple.

    Produced by the identity layer after credential verification; the core
    never re-derives any of it.
    """

    worker_id: str
    role: Role
    email: str = ""
    display_name: str = ""


@dataclass(frozen=True)
class Worker:
    """Domain entity: a worker known to the ledger."""

    worker_id: str
    display_name: str
    email: str
    role: Role
    created_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return self.display_name or self.email or self.worker_id
