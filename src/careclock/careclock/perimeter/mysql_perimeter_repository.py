from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from ..geo.model import LatLng
from .model import Perimeter
from .repository import PerimeterRepository

_SELECT_CURRENT = """
    SELECT perimeter_id, center_latitude, center_longitude, radius_km, created_at, updated_at
    FROM perimeters
    ORDER BY updated_at DESC, perimeter_id DESC
    LIMIT 1
"""


def _to_perimeter(r: dict) -> Perimeter:
    return Perimeter(
        perimeter_id=int(r["perimeter_id"]),
        center_latitude=float(r["center_latitude"]),
        center_longitude=float(r["center_longitude"]),
        radius_km=float(r["radius_km"]),
        created_at=r["created_at"],
        updated_at=r["updated_at"],
    )


class MySQLPerimeterRepository(PerimeterRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_current(self) -> Optional[Perimeter]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_CURRENT)
            r = fetchone(cur)
            return _to_perimeter(r) if r else None

    def replace(self, *, center: LatLng, radius_km: float, now: datetime) -> Perimeter:
        # The single logical row is updated in place; all three values change
        # in one statement so no reader sees a mixed old/new perimeter.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_CURRENT + " FOR UPDATE")
            existing = fetchone(cur)
            if existing:
                cur.execute(
                    """
                    UPDATE perimeters
                    SET center_latitude=%s, center_longitude=%s, radius_km=%s, updated_at=%s
                    WHERE perimeter_id=%s
                    """,
                    (center.latitude, center.longitude, float(radius_km), now, int(existing["perimeter_id"])),
                )
                perimeter_id = int(existing["perimeter_id"])
            else:
                cur.execute(
                    """
                    INSERT INTO perimeters(center_latitude, center_longitude, radius_km, created_at, updated_at)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (center.latitude, center.longitude, float(radius_km), now, now),
                )
                perimeter_id = int(cur.lastrowid)

            cur.execute(
                """
                SELECT perimeter_id, center_latitude, center_longitude, radius_km, created_at, updated_at
                FROM perimeters WHERE perimeter_id=%s
                """,
                (perimeter_id,),
            )
            return _to_perimeter(fetchone(cur))
