"""Range filter deciding which time entries take part in a report.

The window is ``[from, to)``: the lower bound is inclusive and the upper
bound exclusive, so consecutive month windows never overlap. The filter
fails open: an unparsable entry timestamp is included, and an unparsable
bound is ignored.
"""

import logging
from typing import List, Optional

from timelog_report.calculators.time_utils import parse_timestamp
from timelog_report.models.report import TimeRange
from timelog_report.models.work_item import TimeEntry, WorkItem

logger = logging.getLogger(__name__)


def is_within_range(spent_at: Optional[str], time_range: Optional[TimeRange]) -> bool:
    """Decide whether an entry timestamp falls inside ``time_range``.

    Args:
        spent_at: Raw entry timestamp
        time_range: Optional window; None or empty bounds include everything

    Returns:
        False only when the timestamp is parsable and lies before a
        parsable ``from`` or at/after a parsable ``to``

    Example:
        >>> window = TimeRange(from_="2024-02-01", to="2024-03-01")
        >>> is_within_range("2024-02-29T23:59:59Z", window)
        True
        >>> is_within_range("2024-03-01T00:00:00Z", window)
        False
        >>> is_within_range("not-a-date", window)
        True
    """
    if time_range is None or time_range.is_unbounded:
        return True

    timestamp = parse_timestamp(spent_at)
    if timestamp is None:
        return True

    if time_range.from_:
        lower = parse_timestamp(time_range.from_)
        if lower is not None and timestamp < lower:
            return False

    if time_range.to:
        upper = parse_timestamp(time_range.to)
        if upper is not None and timestamp >= upper:
            return False

    return True


def filter_timelogs(item: WorkItem, time_range: Optional[TimeRange]) -> List[TimeEntry]:
    """Return the entries of ``item`` that fall inside ``time_range``."""
    included = [log for log in item.timelogs if is_within_range(log.spent_at, time_range)]

    dropped = len(item.timelogs) - len(included)
    if dropped:
        logger.debug(f"Excluded {dropped} out-of-range entries from item {item.id}")

    return included
