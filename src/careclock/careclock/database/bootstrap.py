from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

import mysql.connector

from ..core.enums import Role
from .connection import DBConfig

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = (
    ("manager@example.com", "manager@example.com", "Manager User", Role.MANAGER),
    ("careworker@example.com", "careworker@example.com", "Care Worker", Role.CARE_WORKER),
)

# The target database comes from DB_CONFIG, not from the script.
_DATABASE_SELECTION = re.compile(r"^(CREATE\s+(DATABASE|SCHEMA)|USE)\b", re.IGNORECASE)


def _iter_sql_statements(sql: str) -> Iterator[str]:
    """Split a SQL script on top-level ``;``.

    Quoted text (with backslash escapes) is kept verbatim; ``--`` and
    ``/* */`` comments outside quotes are dropped.
    """
    buf: list[str] = []
    quote = ""
    i, n = 0, len(sql)

    while i < n:
        ch = sql[i]

        if quote:
            buf.append(ch)
            if ch == "\\" and i + 1 < n:
                buf.append(sql[i + 1])
                i += 2
                continue
            if ch == quote:
                quote = ""
            i += 1
            continue

        if sql.startswith("--", i):
            end = sql.find("\n", i)
            i = n if end == -1 else end
            continue
        if sql.startswith("/*", i):
            end = sql.find("*/", i + 2)
            i = n if end == -1 else end + 2
            continue

        if ch == ";":
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
        else:
            if ch in "'\"`":
                quote = ch
            buf.append(ch)
        i += 1

    tail = "".join(buf).strip()
    if tail:
        yield tail


def schema_statements(sql: str) -> list[str]:
    """Statements of a schema script, minus any CREATE DATABASE / USE."""
    return [stmt for stmt in _iter_sql_statements(sql) if not _DATABASE_SELECTION.match(stmt)]


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        connection_timeout=target.connection_timeout,
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    statements = schema_statements(Path(schema_path).read_text(encoding="utf-8"))

    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied %d statements from %s", len(statements), schema_path)


def ensure_default_workers(db_config: dict) -> None:
    """Upsert the default manager and care worker accounts."""
    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        for worker_id, email, name, role in DEFAULT_WORKERS:
            cur.execute(
                """
                INSERT INTO workers (worker_id, email, display_name, role)
                VALUES (%s, %s, %s, %s)
                ON DUPLICATE KEY UPDATE worker_id = worker_id
                """,
                (worker_id, email, name, role.value),
            )
        conn.commit()
    finally:
        conn.close()


def reset_records(db_config: dict) -> int:
    """Administrative reset: drop all shift records and workers, then restore defaults.

    Returns the number of shift records deleted.
    """
    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        cur.execute("DELETE FROM shift_records")
        deleted = int(cur.rowcount)
        cur.execute("DELETE FROM workers")
        conn.commit()
    finally:
        conn.close()

    ensure_default_workers(db_config)
    logger.warning("Reset removed %d shift records", deleted)
    return deleted


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
