"""Output models produced by the aggregation engine.

``TimeSummary`` holds every rollup in its final, sorted presentation
order. Consumers (JSON serialization, CLI tables, charts) rely on that
order and must not re-sort.
"""

from typing import Dict, List, Optional

from pydantic import Field

from timelog_report.models.base import BaseDataModel


class RollupGroup(BaseDataModel):
    """One bucket of a single-dimension rollup.

    ``hints`` carries presentation metadata (URLs, handles) and never
    influences grouping or ordering.
    """

    label: str
    seconds: int = Field(0, ge=0)
    hints: Dict[str, Optional[str]] = Field(default_factory=dict)


class DateTotal(BaseDataModel):
    """Seconds logged on one calendar day."""

    date: str
    seconds: int = Field(0, ge=0)


class WeekBucket(BaseDataModel):
    """Monday-anchored calendar week an entry falls into (UTC).

    Attributes:
        key: ISO date of the Monday starting the week
        start: Same as ``key``, kept for consumers that read ``week_start``
        label: Human readable label, e.g. ``"Week of Jan 8"``
    """

    key: str
    start: str
    label: str


class ContributorTotal(BaseDataModel):
    """Seconds attributed to one contributor inside a nested rollup."""

    user_id: str
    user_name: str
    username: Optional[str] = None
    seconds: int = Field(0, ge=0)


class LabelTotal(BaseDataModel):
    """Seconds attributed to one label inside a weekly breakdown."""

    label: str
    seconds: int = Field(0, ge=0)


class EpicTotal(BaseDataModel):
    """Seconds attributed to one epic inside a weekly breakdown."""

    epic: str
    seconds: int = Field(0, ge=0)


class WeeklyUserSummary(BaseDataModel):
    """Per-contributor totals of one week."""

    week_start: str
    label: str
    totals: List[ContributorTotal] = Field(default_factory=list)
    total_seconds: int = Field(0, ge=0)


class LabelUserSummary(BaseDataModel):
    """Per-contributor totals of one label, independent of week."""

    label: str
    totals: List[ContributorTotal] = Field(default_factory=list)
    total_seconds: int = Field(0, ge=0)


class WeeklyLabelSummary(BaseDataModel):
    """Per-label totals of one week.

    An entry on an item with several labels counts once per label, so
    ``total_seconds`` can exceed the time actually logged in the week.
    """

    week_start: str
    label: str
    totals: List[LabelTotal] = Field(default_factory=list)
    total_seconds: int = Field(0, ge=0)


class WeeklyEpicSummary(BaseDataModel):
    """Per-epic totals of one week, keyed by epic label."""

    week_start: str
    label: str
    totals: List[EpicTotal] = Field(default_factory=list)
    total_seconds: int = Field(0, ge=0)


class TimeSummary(BaseDataModel):
    """Complete multi-dimensional time accounting for one request.

    Attributes:
        total_seconds: Sum of all included entry durations
        by_user: Seconds per contributor, descending
        by_issue: Seconds per work item, descending
        by_epic: Seconds per epic (or "No epic"), descending
        by_label: Seconds per label, descending; multi-label items count
            once per label
        by_state: Seconds per item status, descending
        by_date: Seconds per calendar day, descending
        weekly_by_user: Week -> contributor totals, weeks ascending
        label_by_user: Label -> contributor totals, labels by total descending
        weekly_label_breakdown: Week -> label totals, weeks ascending
        weekly_epic_breakdown: Week -> epic totals, weeks ascending
    """

    total_seconds: int = Field(0, ge=0)
    by_user: List[RollupGroup] = Field(default_factory=list)
    by_issue: List[RollupGroup] = Field(default_factory=list)
    by_epic: List[RollupGroup] = Field(default_factory=list)
    by_label: List[RollupGroup] = Field(default_factory=list)
    by_state: List[RollupGroup] = Field(default_factory=list)
    by_date: List[DateTotal] = Field(default_factory=list)
    weekly_by_user: List[WeeklyUserSummary] = Field(default_factory=list)
    label_by_user: List[LabelUserSummary] = Field(default_factory=list)
    weekly_label_breakdown: List[WeeklyLabelSummary] = Field(default_factory=list)
    weekly_epic_breakdown: List[WeeklyEpicSummary] = Field(default_factory=list)
