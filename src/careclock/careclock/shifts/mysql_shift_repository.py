from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

import mysql.connector

from ..core.exceptions import StateConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from ..geo.model import LatLng
from .model import ShiftRecord
from .repository import ShiftRepository

_COLUMNS = """
    shift_id, worker_id,
    clock_in_time, clock_in_latitude, clock_in_longitude, clock_in_note,
    clock_out_time, clock_out_latitude, clock_out_longitude, clock_out_note
"""


def _to_record(r: dict) -> ShiftRecord:
    out_location = None
    if r.get("clock_out_latitude") is not None and r.get("clock_out_longitude") is not None:
        out_location = LatLng(float(r["clock_out_latitude"]), float(r["clock_out_longitude"]))

    return ShiftRecord(
        shift_id=int(r["shift_id"]),
        worker_id=str(r["worker_id"]),
        clock_in_time=r["clock_in_time"],
        clock_in_location=LatLng(float(r["clock_in_latitude"]), float(r["clock_in_longitude"])),
        clock_in_note=r.get("clock_in_note"),
        clock_out_time=r.get("clock_out_time"),
        clock_out_location=out_location,
        clock_out_note=r.get("clock_out_note"),
    )


class MySQLShiftRepository(ShiftRepository):
    """InnoDB-backed ledger.

    Clock-in/out lock the worker row first, which serializes all state changes
    of one worker; the unique (worker_id, open_marker) index rejects a second
    open row even if that lock were bypassed.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _lock_worker(self, cur, worker_id: str) -> None:
        cur.execute("SELECT worker_id FROM workers WHERE worker_id=%s FOR UPDATE", (worker_id,))
        fetchone(cur)

    def _select_open(self, cur, worker_id: str) -> Optional[dict]:
        cur.execute(
            f"""
            SELECT {_COLUMNS}
            FROM shift_records
            WHERE worker_id=%s AND clock_out_time IS NULL
            ORDER BY clock_in_time DESC
            LIMIT 1
            FOR UPDATE
            """,
            (worker_id,),
        )
        return fetchone(cur)

    def _select_by_id(self, cur, shift_id: int) -> ShiftRecord:
        cur.execute(f"SELECT {_COLUMNS} FROM shift_records WHERE shift_id=%s", (shift_id,))
        return _to_record(fetchone(cur))

    def get_open_for_worker(self, worker_id: str) -> Optional[ShiftRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM shift_records
                WHERE worker_id=%s AND clock_out_time IS NULL
                ORDER BY clock_in_time DESC
                LIMIT 1
                """,
                (worker_id,),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def open_shift(
        self,
        *,
        worker_id: str,
        clock_in_time: datetime,
        location: LatLng,
        note: Optional[str] = None,
    ) -> ShiftRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            self._lock_worker(cur, worker_id)
            if self._select_open(cur, worker_id):
                raise StateConflictError.already_clocked_in(worker_id)

            try:
                cur.execute(
                    """
                    INSERT INTO shift_records(worker_id, clock_in_time, clock_in_latitude, clock_in_longitude, clock_in_note)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (worker_id, clock_in_time, location.latitude, location.longitude, note),
                )
            except mysql.connector.IntegrityError as e:
                if is_duplicate_key(e):
                    raise StateConflictError.already_clocked_in(worker_id) from e
                raise

            return self._select_by_id(cur, int(cur.lastrowid))

    def close_open_shift(
        self,
        *,
        worker_id: str,
        clock_out_time: datetime,
        location: LatLng,
        note: Optional[str] = None,
    ) -> ShiftRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            self._lock_worker(cur, worker_id)
            r = self._select_open(cur, worker_id)
            if not r:
                raise StateConflictError.no_open_shift(worker_id)

            cur.execute(
                """
                UPDATE shift_records
                SET clock_out_time=GREATEST(%s, clock_in_time),
                    clock_out_latitude=%s, clock_out_longitude=%s, clock_out_note=%s
                WHERE shift_id=%s AND clock_out_time IS NULL
                """,
                (clock_out_time, location.latitude, location.longitude, note, int(r["shift_id"])),
            )
            return self._select_by_id(cur, int(r["shift_id"]))

    def list_shifts(
        self,
        *,
        worker_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Sequence[ShiftRecord]:
        clauses = ["1=1"]
        params: list[object] = []

        if worker_id is not None:
            clauses.append("worker_id=%s")
            params.append(worker_id)
        if start is not None:
            clauses.append("clock_in_time >= %s")
            params.append(start)
        if end is not None:
            clauses.append("clock_in_time <= %s")
            params.append(end)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM shift_records
                WHERE {where}
                ORDER BY clock_in_time DESC, shift_id DESC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_open(self) -> Sequence[ShiftRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM shift_records
                WHERE clock_out_time IS NULL
                ORDER BY clock_in_time DESC
                """
            )
            return [_to_record(r) for r in fetchall(cur)]

    def latest_per_worker(self) -> Sequence[ShiftRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM (
                    SELECT sr.*, ROW_NUMBER() OVER (
                        PARTITION BY worker_id ORDER BY clock_in_time DESC, shift_id DESC
                    ) AS rn
                    FROM shift_records sr
                ) ranked
                WHERE rn = 1
                """
            )
            return [_to_record(r) for r in fetchall(cur)]

    def delete_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM shift_records")
            return int(cur.rowcount)
