"""Time utilities for the timelog report.

This module provides low-level helpers for:
- Parsing raw entry timestamps into timezone-aware UTC datetimes
- Converting seconds to decimal hours
- Formatting durations for display

Parsing never raises: an unparsable value yields ``None`` so callers can
apply their own fail-open or skip rule.
"""

import datetime as dt
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional


def parse_timestamp(value: Optional[str]) -> Optional[dt.datetime]:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Date-only values and values without an offset are interpreted as UTC.
    A trailing ``Z`` is accepted.

    Args:
        value: Raw timestamp string

    Returns:
        Aware datetime in UTC, or None if the value is empty or unparsable

    Example:
        >>> parse_timestamp("2024-01-08T10:00:00Z")
        datetime.datetime(2024, 1, 8, 10, 0, tzinfo=datetime.timezone.utc)
        >>> parse_timestamp("2024-02-01")
        datetime.datetime(2024, 2, 1, 0, 0, tzinfo=datetime.timezone.utc)
        >>> parse_timestamp("not-a-date") is None
        True
    """
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"

    try:
        parsed = dt.datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.timezone.utc)
    return parsed.astimezone(dt.timezone.utc)


def seconds_to_hours(seconds: int) -> Decimal:
    """Convert seconds to decimal hours with 2 decimal precision.

    Args:
        seconds: Duration in seconds

    Returns:
        Decimal hours (rounded half up to 2 decimal places)

    Example:
        >>> seconds_to_hours(5400)
        Decimal('1.50')
        >>> seconds_to_hours(600)
        Decimal('0.17')
    """
    hours = Decimal(seconds) / Decimal("3600")
    return hours.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def format_duration(seconds: int) -> str:
    """Format a duration as hours and minutes.

    Args:
        seconds: Duration in seconds

    Returns:
        Compact duration string

    Example:
        >>> format_duration(30)
        '<1m'
        >>> format_duration(2700)
        '45m'
        >>> format_duration(7200)
        '2h'
        >>> format_duration(9000)
        '2h 30m'
    """
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60

    if hours == 0 and minutes == 0:
        return "<1m"
    if hours == 0:
        return f"{minutes}m"
    if minutes == 0:
        return f"{hours}h"
    return f"{hours}h {minutes}m"
