from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import StorageTimeoutError
from .connection import DatabaseConnection

# Lock waits, deadlocks and lost/refused connections are transient: the whole
# operation can be retried by the caller.
TRANSIENT_ERRNOS = frozenset(
    {
        errorcode.ER_LOCK_WAIT_TIMEOUT,
        errorcode.ER_LOCK_DEADLOCK,
        errorcode.CR_CONN_HOST_ERROR,
        errorcode.CR_SERVER_LOST,
        errorcode.CR_SERVER_GONE_ERROR,
    }
)


def is_transient(exc: mysql.connector.Error) -> bool:
    return getattr(exc, "errno", None) in TRANSIENT_ERRNOS


def is_duplicate_key(exc: mysql.connector.Error) -> bool:
    return getattr(exc, "errno", None) == errorcode.ER_DUP_ENTRY


def _connect(conn_factory: DatabaseConnection):
    try:
        return conn_factory.connect()
    except mysql.connector.Error as e:
        if is_transient(e) or isinstance(e, mysql.connector.errors.InterfaceError):
            raise StorageTimeoutError(f"Database unavailable: {e.msg}") from e
        raise


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Open a connection and cursor; commit on success, roll back on error.

    Every statement run inside the block belongs to one transaction.
    """
    conn = _connect(conn_factory)
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            cur.execute(
                "SET SESSION innodb_lock_wait_timeout = %s",
                (int(conn_factory.config.lock_wait_timeout),),
            )
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        if is_transient(e):
            raise StorageTimeoutError(f"Database operation timed out: {e.msg}") from e
        raise
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
