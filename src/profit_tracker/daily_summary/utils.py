from datetime import date, datetime, timedelta

import pendulum

MS_PER_MINUTE = 60_000
MS_PER_HOUR = 3_600_000


def localize(moment: datetime, timezone: str) -> datetime:
    """Attach the configured timezone to naive timestamps; aware ones pass through."""
    if moment.tzinfo is not None:
        return moment
    return pendulum.instance(moment, tz=timezone)


def to_day(moment: datetime, timezone: str) -> date:
    """Calendar day of a timestamp, seen from the configured timezone."""
    if moment.tzinfo is None:
        return date(moment.year, moment.month, moment.day)
    local = pendulum.instance(moment).in_timezone(timezone)
    return date(local.year, local.month, local.day)


def week_start(day: date) -> date:
    # ISO week, Monday first
    return day - timedelta(days=day.weekday())


def inclusive_days(start: date, end: date) -> int:
    return (end - start).days + 1


def duration_ms(start: datetime, end: datetime) -> int:
    return int((end - start) / timedelta(milliseconds=1))


def per_hour(amount: float, work_duration_ms: float) -> float:
    if work_duration_ms <= 0:
        return 0.0
    return amount / (work_duration_ms / MS_PER_HOUR)


def format_duration(milliseconds: float) -> str:
    if milliseconds < 0:
        return "0h 0m"
    total_minutes = int(milliseconds // MS_PER_MINUTE)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"
