"""Time-of-day and duration helpers shared by the core modules."""

import re
from datetime import date

DEFAULT_CLASS_MINUTES = 60

_NUMBER_PATTERN = re.compile(r"\d+")
_TIME_PATTERN = re.compile(r"(\d{1,2})(?:\s*[:.]\s*(\d{1,2}))?\s*([ap]\.?m\.?)?", re.IGNORECASE)


def time_to_minutes(time_str: str | None) -> int:
    """
    Convert a time of day to minutes since midnight.

    Accepts "HH:MM" as well as looser forms such as "9.30" or "2:00 PM".
    Empty or unparsable input is 0.
    """
    if not time_str:
        return 0
    match = _TIME_PATTERN.search(time_str)
    if not match:
        return 0
    hours = int(match.group(1))
    minutes = int(match.group(2) or 0)
    meridiem = (match.group(3) or "").lower()
    if meridiem.startswith("p") and hours < 12:
        hours += 12
    elif meridiem.startswith("a") and hours == 12:
        hours = 0
    return hours * 60 + minutes


def minutes_to_time(minutes: int) -> str:
    """Convert minutes since midnight to zero-padded "HH:MM"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def parse_duration(value: str | int | None, default: int = DEFAULT_CLASS_MINUTES) -> int:
    """
    Parse a duration such as "45 minutes" into whole minutes.

    Integers pass through. Anything without a number falls back to default.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if not value:
        return default
    match = _NUMBER_PATTERN.search(str(value))
    if not match:
        return default
    return int(match.group())


def day_name_from_iso(iso_date: str) -> str | None:
    """Weekday name ("Monday") for a YYYY-MM-DD string, or None if invalid."""
    try:
        return date.fromisoformat(iso_date).strftime("%A")
    except (TypeError, ValueError):
        return None
