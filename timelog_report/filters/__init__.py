"""Entry filtering for the timelog report."""

from timelog_report.filters.range_filter import filter_timelogs, is_within_range

__all__ = ["filter_timelogs", "is_within_range"]
