"""ISO 8601 datetime conversion and duration utilities.

This module centralizes all transformations between Python datetime objects
and ISO 8601 strings, plus the Unix timestamps used in JWT claims. All
date/time operations should use these functions to ensure consistency.
"""

import re
from datetime import datetime, timedelta, UTC


_DURATION_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*([a-z]*)\s*$", re.IGNORECASE)

_DURATION_UNITS = {
    "ms": timedelta(milliseconds=1),
    "msec": timedelta(milliseconds=1),
    "msecs": timedelta(milliseconds=1),
    "millisecond": timedelta(milliseconds=1),
    "milliseconds": timedelta(milliseconds=1),
    "": timedelta(seconds=1),
    "s": timedelta(seconds=1),
    "sec": timedelta(seconds=1),
    "secs": timedelta(seconds=1),
    "second": timedelta(seconds=1),
    "seconds": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "min": timedelta(minutes=1),
    "mins": timedelta(minutes=1),
    "minute": timedelta(minutes=1),
    "minutes": timedelta(minutes=1),
    "h": timedelta(hours=1),
    "hr": timedelta(hours=1),
    "hrs": timedelta(hours=1),
    "hour": timedelta(hours=1),
    "hours": timedelta(hours=1),
    "d": timedelta(days=1),
    "day": timedelta(days=1),
    "days": timedelta(days=1),
    "w": timedelta(weeks=1),
    "week": timedelta(weeks=1),
    "weeks": timedelta(weeks=1),
    "y": timedelta(days=365.25),
    "yr": timedelta(days=365.25),
    "yrs": timedelta(days=365.25),
    "year": timedelta(days=365.25),
    "years": timedelta(days=365.25),
}


def to_timestamp(dt: datetime) -> str:
    """Convert datetime to ISO 8601 UTC timestamp string."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.isoformat().replace("+00:00", "Z")


def to_datetime(timestamp: str) -> datetime:
    """Convert ISO 8601 UTC timestamp string to datetime."""
    return datetime.fromisoformat(timestamp.replace('Z', '+00:00'))


def now() -> str:
    """Get current UTC timestamp as ISO 8601 string."""
    return to_timestamp(datetime.now(UTC))


def now_unix() -> int:
    """Get current UTC time as integer Unix timestamp (JWT iat/exp)."""
    return int(datetime.now(UTC).timestamp())


def parse_duration(value: str | int | float) -> timedelta:
    """
    Parse a token lifetime into a timedelta.

    Numbers are seconds. Strings are a number followed by an optional unit,
    e.g. "3600", "90m", "12h", "1d", "2 weeks". Units: ms, s, m, h, d, w, y
    and their long forms.

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        return timedelta(seconds=value)

    match = _DURATION_RE.match(value)
    if match is None:
        raise ValueError(f"Invalid duration: {value!r}")

    amount, unit = match.groups()
    unit_delta = _DURATION_UNITS.get(unit.lower())
    if unit_delta is None:
        raise ValueError(f"Unknown duration unit {unit!r} in {value!r}")

    return unit_delta * float(amount)
