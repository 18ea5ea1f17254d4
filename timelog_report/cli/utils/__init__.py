"""CLI utility functions."""

from timelog_report.cli.utils.formatters import (
    format_error,
    format_info,
    format_rollup,
    format_success,
    format_table,
    format_warning,
)
from timelog_report.cli.utils.range_options import range_options, resolve_time_range

__all__ = [
    "format_error",
    "format_info",
    "format_rollup",
    "format_success",
    "format_table",
    "format_warning",
    "range_options",
    "resolve_time_range",
]
