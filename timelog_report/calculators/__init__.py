"""Calculator modules for the timelog report."""

from timelog_report.calculators.commit_activity import (
    build_commit_activity,
    parse_month,
)
from timelog_report.calculators.time_utils import (
    format_duration,
    parse_timestamp,
    seconds_to_hours,
)
from timelog_report.calculators.week_utils import (
    format_week_label,
    get_week_bucket,
    start_of_week,
)

__all__ = [
    # commit_activity
    "build_commit_activity",
    "parse_month",
    # time_utils
    "format_duration",
    "parse_timestamp",
    "seconds_to_hours",
    # week_utils
    "format_week_label",
    "get_week_bucket",
    "start_of_week",
]
