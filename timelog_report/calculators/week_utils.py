"""Week bucketing for weekly rollups.

Weeks always start on Monday and are computed on the UTC calendar date of
the entry, independent of the machine's locale or timezone.
"""

import datetime as dt
from typing import Optional

from timelog_report.calculators.time_utils import parse_timestamp
from timelog_report.models.summary import WeekBucket


def start_of_week(date: dt.date) -> dt.date:
    """Return the Monday starting the week of ``date``.

    Sunday shifts back 6 days, every other day shifts back to the
    preceding (or same) Monday.

    Example:
        >>> start_of_week(dt.date(2024, 1, 14))  # Sunday
        datetime.date(2024, 1, 8)
        >>> start_of_week(dt.date(2024, 1, 8))  # Monday
        datetime.date(2024, 1, 8)
    """
    return date - dt.timedelta(days=date.weekday())


def format_week_label(monday: dt.date) -> str:
    """Format the display label of a week, e.g. ``"Week of Jan 8"``."""
    return f"Week of {monday.strftime('%b')} {monday.day}"


def get_week_bucket(spent_at: Optional[str]) -> Optional[WeekBucket]:
    """Map an entry timestamp to its Monday-start week.

    Args:
        spent_at: Raw entry timestamp

    Returns:
        WeekBucket keyed by the ISO date of the Monday, or None if the
        timestamp cannot be parsed

    Example:
        >>> get_week_bucket("2024-01-09T15:30:00Z").key
        '2024-01-08'
        >>> get_week_bucket("not-a-date") is None
        True
    """
    timestamp = parse_timestamp(spent_at)
    if timestamp is None:
        return None

    monday = start_of_week(timestamp.date())
    start = monday.isoformat()
    return WeekBucket(key=start, start=start, label=format_week_label(monday))
