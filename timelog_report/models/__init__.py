"""Data models for the timelog report.

This package contains Pydantic models for all entities:
- BaseDataModel: Base class with common configuration
- Contributor, Epic, TimeEntry, WorkItem: normalized input records
- TimeSummary and its rollup types: aggregation output
- TimeRange, ProjectInfo, ProjectTimeReport: request-level report
"""

from timelog_report.models.base import BaseDataModel
from timelog_report.models.report import (
    CommitActivityDay,
    CommitRange,
    ProjectInfo,
    ProjectTimeReport,
    TimeRange,
)
from timelog_report.models.summary import (
    ContributorTotal,
    DateTotal,
    EpicTotal,
    LabelTotal,
    LabelUserSummary,
    RollupGroup,
    TimeSummary,
    WeekBucket,
    WeeklyEpicSummary,
    WeeklyLabelSummary,
    WeeklyUserSummary,
)
from timelog_report.models.work_item import Contributor, Epic, TimeEntry, WorkItem

__all__ = [
    "BaseDataModel",
    "Contributor",
    "Epic",
    "TimeEntry",
    "WorkItem",
    "RollupGroup",
    "DateTotal",
    "WeekBucket",
    "ContributorTotal",
    "LabelTotal",
    "EpicTotal",
    "WeeklyUserSummary",
    "LabelUserSummary",
    "WeeklyLabelSummary",
    "WeeklyEpicSummary",
    "TimeSummary",
    "TimeRange",
    "ProjectInfo",
    "CommitActivityDay",
    "CommitRange",
    "ProjectTimeReport",
]
