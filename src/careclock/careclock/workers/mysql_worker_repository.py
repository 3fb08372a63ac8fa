from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.constants import UNKNOWN_DISPLAY_NAME
from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Identity, Worker
from .repository import WorkerRepository


def _to_worker(r: dict) -> Worker:
    return Worker(
        worker_id=str(r["worker_id"]),
        display_name=r.get("display_name") or "",
        email=r.get("email") or "",
        role=Role(r["role"]),
        created_at=r.get("created_at"),
    )


class MySQLWorkerRepository(WorkerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT worker_id, display_name, email, role, created_at
                FROM workers
                WHERE worker_id=%s
                """,
                (worker_id,),
            )
            r = fetchone(cur)
            return _to_worker(r) if r else None

    def list_all(self) -> Sequence[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT worker_id, display_name, email, role, created_at
                FROM workers
                ORDER BY display_name, worker_id
                """
            )
            return [_to_worker(r) for r in fetchall(cur)]

    def ensure(self, identity: Identity, *, now: datetime) -> Worker:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO workers(worker_id, email, display_name, role, created_at)
                VALUES(%s,%s,%s,%s,%s) AS new
                ON DUPLICATE KEY UPDATE
                    display_name = IF(
                        new.display_name <> '' AND (workers.display_name = '' OR workers.display_name = %s),
                        new.display_name,
                        workers.display_name
                    )
                """,
                (
                    identity.worker_id,
                    identity.email,
                    identity.display_name,
                    identity.role.value,
                    now,
                    UNKNOWN_DISPLAY_NAME,
                ),
            )
            cur.execute(
                """
                SELECT worker_id, display_name, email, role, created_at
                FROM workers
                WHERE worker_id=%s
                """,
                (identity.worker_id,),
            )
            return _to_worker(fetchone(cur))

    def delete_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM workers")
            return int(cur.rowcount)
