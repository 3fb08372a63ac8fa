from __future__ import annotations

from datetime import date, datetime, time


def parse_iso_datetime(value: str) -> datetime:
    """Parse YYYY-MM-DD or a full ISO-8601 timestamp into a naive local datetime.

    An offset-aware timestamp is converted to server-local time first, so it
    compares with the naive times the ledger stores.
    """
    if len(value) == 10:
        return datetime.combine(date.fromisoformat(value), time.min)
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def start_of_day(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), time.min, tzinfo=moment.tzinfo)


def hours_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 3600.0


def format_ts(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
