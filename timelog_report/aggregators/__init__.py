"""Aggregators module for turning time entries into reports.

This module provides the single-pass time summary aggregator, the report
builder that wraps it with request metadata, and the weekly matrix used
for tabular output.
"""

from timelog_report.aggregators.keyed_accumulator import Bucket, KeyedAccumulator
from timelog_report.aggregators.report_builder import ProjectReportBuilder
from timelog_report.aggregators.time_summary_aggregator import (
    NO_EPIC_LABEL,
    UNASSIGNED_EPIC_KEY,
    UNKNOWN_KEY,
    UNLABELED,
    TimeSummaryAggregator,
    build_time_summary,
)
from timelog_report.aggregators.weekly_matrix import generate_weekly_matrix

__all__ = [
    "Bucket",
    "KeyedAccumulator",
    "ProjectReportBuilder",
    "TimeSummaryAggregator",
    "build_time_summary",
    "generate_weekly_matrix",
    "NO_EPIC_LABEL",
    "UNASSIGNED_EPIC_KEY",
    "UNKNOWN_KEY",
    "UNLABELED",
]
