from datetime import datetime, timezone

from src.careclock.careclock.common.datetime_utils import parse_iso_datetime


def test_date_only_is_start_of_day():
    assert parse_iso_datetime("2026-02-02") == datetime(2026, 2, 2, 0, 0)


def test_naive_timestamp_is_kept_as_is():
    assert parse_iso_datetime("2026-02-02T09:30:00") == datetime(2026, 2, 2, 9, 30)


def test_offset_timestamp_becomes_naive_local_time():
    parsed = parse_iso_datetime("2026-02-02T09:30:00+02:00")

    expected = datetime(2026, 2, 2, 7, 30, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert parsed.tzinfo is None
    assert parsed == expected
