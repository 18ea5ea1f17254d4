"""Commit activity counting.

Counts already-fetched commits per calendar day for one month. Fetching
the commits is the job of the data-retrieval collaborator; this module
only needs the ``committed_date`` of each commit.
"""

import datetime as dt
import logging
import re
from collections import Counter
from typing import Any, Dict, Iterable, List, Tuple

from timelog_report.models.report import CommitActivityDay, CommitRange

logger = logging.getLogger(__name__)

MONTH_PATTERN = re.compile(r"^\d{4}-\d{2}$")


def parse_month(month: str) -> Tuple[dt.date, dt.date]:
    """Parse a ``YYYY-MM`` month into its ``[start, next_start)`` dates.

    Args:
        month: Month string in YYYY-MM format

    Returns:
        Tuple of (first day of month, first day of following month)

    Raises:
        ValueError: If the string is malformed or the month is out of range

    Example:
        >>> parse_month("2024-12")
        (datetime.date(2024, 12, 1), datetime.date(2025, 1, 1))
    """
    if not month or not MONTH_PATTERN.match(month):
        raise ValueError(f"Month must use YYYY-MM format, got: {month!r}")

    year, month_num = (int(part) for part in month.split("-"))
    if not 1 <= month_num <= 12:
        raise ValueError(f"Month must reference a valid month, got: {month!r}")

    start = dt.date(year, month_num, 1)
    if month_num == 12:
        end = dt.date(year + 1, 1, 1)
    else:
        end = dt.date(year, month_num + 1, 1)
    return start, end


def build_commit_activity(
    commits: Iterable[Dict[str, Any]], month: str
) -> Tuple[List[CommitActivityDay], CommitRange]:
    """Count commits per day for every day of ``month``.

    Commits without ``committed_date`` are ignored. Days without commits
    are reported with a count of 0.

    Args:
        commits: Commit records with a ``committed_date`` ISO timestamp
        month: Month in YYYY-MM format

    Returns:
        Tuple of (one CommitActivityDay per day of the month, CommitRange)

    Raises:
        ValueError: If ``month`` is invalid

    Example:
        >>> days, window = build_commit_activity(
        ...     [{"committed_date": "2024-02-03T10:00:00Z"}], "2024-02"
        ... )
        >>> len(days), days[2].count, window.to
        (29, 1, '2024-03-01T00:00:00Z')
    """
    start, end = parse_month(month)

    counts: Counter = Counter()
    for commit in commits:
        committed = (commit or {}).get("committed_date")
        if not committed:
            continue
        counts[committed[:10]] += 1

    days: List[CommitActivityDay] = []
    cursor = start
    while cursor < end:
        key = cursor.isoformat()
        days.append(CommitActivityDay(date=key, count=counts.get(key, 0)))
        cursor += dt.timedelta(days=1)

    logger.debug(f"Counted {sum(counts.values())} commits for {month}")

    window = CommitRange(
        month=month,
        from_=f"{start.isoformat()}T00:00:00Z",
        to=f"{end.isoformat()}T00:00:00Z",
    )
    return days, window
