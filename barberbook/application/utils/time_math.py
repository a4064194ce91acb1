from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta

TIME_FORMAT = "%H:%M"
DATE_FORMAT = "%Y-%m-%d"
MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_time_24h(text: str | None) -> tuple[int, int] | None:
    """Parse 'HH:MM' into (hour, minute). Returns None if missing or malformed."""
    if not text:
        return None
    match = _TIME_PATTERN.match(text.strip())
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return hour, minute


def format_time_24h(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


def add_minutes(start_time: str, minutes: int) -> str:
    """
    Advance a wall-clock 'HH:MM' by minutes.

    The result stays on the clock face: 23:30 + 60 gives 00:30. There is no
    day carry, callers keep the appointment's original date.
    """
    parsed = parse_time_24h(start_time)
    if parsed is None:
        raise ValueError(f"invalid time {start_time!r}, expected HH:MM")
    hour, minute = parsed
    total = (hour * 60 + minute + minutes) % MINUTES_PER_DAY
    return format_time_24h(total // 60, total % 60)


def parse_iso_date(text: str) -> date:
    return datetime.strptime(text, DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def week_bounds(reference_date: date) -> tuple[date, date]:
    """Monday and Sunday of the week containing reference_date."""
    monday = reference_date - timedelta(days=reference_date.weekday())
    return monday, monday + timedelta(days=6)


def month_bounds(reference_date: date) -> tuple[date, date]:
    """First and last calendar day of reference_date's month."""
    last_day = calendar.monthrange(reference_date.year, reference_date.month)[1]
    return reference_date.replace(day=1), reference_date.replace(day=last_day)
