import re
from datetime import datetime
from datetime import timedelta
from typing import Dict
from typing import Pattern

# The keyword argument to `timedelta` for each supported duration unit
_DURATION_UNITS: Dict[str, str] = {
    "us": "microseconds",
    "ms": "milliseconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
}

_DURATION_PATTERN: Pattern[str] = re.compile(r"^\s*(\d+(?:\.\d*)?|\.\d+)\s*(us|ms|s|m|h)?\s*$")


def saturating_add_durations(first: timedelta, second: timedelta) -> timedelta:
    """Adds two durations, returning `timedelta.max` if the sum cannot be represented."""
    try:
        return first + second
    except OverflowError:
        return timedelta.max


def saturating_add_to_instant(instant: datetime, offset: timedelta) -> datetime:
    """Adds a duration to a point in time.

    Returns `datetime.max` (in the time zone of `instant`) if the result cannot be represented.
    """
    try:
        return instant + offset
    except OverflowError:
        return datetime.max.replace(tzinfo=instant.tzinfo)


def parse_duration(string: str) -> timedelta:
    """Parses a duration such as `500ms`, `1.5s`, or `2m`.

    The unit is one of `us`, `ms`, `s`, `m`, or `h`, and is seconds when omitted.

    Args:
        string: the duration to parse

    Returns:
        the parsed duration

    Raises:
        ValueError: if the string is not a valid duration
    """
    match = _DURATION_PATTERN.match(string)
    if match is None:
        raise ValueError(f"Could not parse duration: '{string}'")
    value, unit = match.groups()
    return timedelta(**{_DURATION_UNITS[unit or "s"]: float(value)})


def format_duration(duration: timedelta) -> str:
    """Formats the duration in seconds with microsecond precision (ex. `1.250000s`)."""
    return f"{duration.total_seconds():.6f}s"
