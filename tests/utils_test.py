from datetime import date, datetime, timezone

import pendulum

from src.profit_tracker.daily_summary.utils import (
    duration_ms,
    format_duration,
    inclusive_days,
    localize,
    per_hour,
    to_day,
    week_start,
)


def test_format_duration():
    assert format_duration(9_000_000) == "2h 30m"
    assert format_duration(59_999) == "0h 0m"
    assert format_duration(0) == "0h 0m"
    assert format_duration(-1) == "0h 0m"
    assert format_duration(26 * 3_600_000 + 5 * 60_000) == "26h 5m"


def test_to_day_uses_configured_timezone():
    late_evening_utc = datetime(2024, 5, 19, 23, 30, tzinfo=timezone.utc)

    assert to_day(late_evening_utc, "UTC") == date(2024, 5, 19)
    assert to_day(late_evening_utc, "Europe/Warsaw") == date(2024, 5, 20)
    assert type(to_day(late_evening_utc, "Europe/Warsaw")) is date


def test_to_day_keeps_naive_datetimes():
    assert to_day(datetime(2024, 5, 19, 23, 30), "Europe/Warsaw") == date(2024, 5, 19)


def test_localize_attaches_timezone_to_naive_datetimes():
    local = localize(datetime(2024, 5, 20, 8, 0), "Europe/Warsaw")

    assert local == datetime(2024, 5, 20, 6, 0, tzinfo=timezone.utc)

    aware = datetime(2024, 5, 20, 8, 0, tzinfo=timezone.utc)
    assert localize(aware, "Europe/Warsaw") is aware


def test_week_start_is_monday():
    assert week_start(date(2024, 5, 20)) == date(2024, 5, 20)
    assert week_start(date(2024, 5, 26)) == date(2024, 5, 20)
    assert week_start(date(2024, 5, 27)) == date(2024, 5, 27)


def test_inclusive_days_and_duration():
    assert inclusive_days(date(2024, 1, 1), date(2024, 12, 30)) == 365
    start = pendulum.datetime(2024, 5, 20, 8, 0)
    assert duration_ms(start, start.add(minutes=90)) == 5_400_000


def test_per_hour_guards_zero_duration():
    assert per_hour(100.0, 0) == 0.0
    assert per_hour(100.0, -5) == 0.0
    assert per_hour(100.0, 7_200_000) == 50.0
