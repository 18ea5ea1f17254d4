"""Request-level report models.

The report wraps the engine's ``TimeSummary`` with the requested range,
the project identity and auxiliary collaborator data (commit activity,
warnings).
"""

from typing import List, Optional

from pydantic import Field

from timelog_report.models.base import BaseDataModel
from timelog_report.models.summary import TimeSummary
from timelog_report.models.work_item import WorkItem


class TimeRange(BaseDataModel):
    """Optional ``[from, to)`` window on entry timestamps.

    Both bounds are ISO-8601 strings. ``from`` is inclusive, ``to`` is
    exclusive. The lower bound is exposed as ``from_`` because ``from`` is
    a Python keyword; it serializes under its alias.

    Example:
        >>> window = TimeRange(**{"from": "2024-02-01", "to": "2024-03-01"})
        >>> window.from_
        '2024-02-01'
        >>> window.model_dump(by_alias=True)
        {'from': '2024-02-01', 'to': '2024-03-01'}
    """

    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None

    @property
    def is_unbounded(self) -> bool:
        """True when neither bound is set."""
        return not self.from_ and not self.to


class ProjectInfo(BaseDataModel):
    """Project identity passed through from the data-retrieval collaborator."""

    id: str
    name: str
    web_url: str = ""


class CommitActivityDay(BaseDataModel):
    """Number of commits on one calendar day."""

    date: str
    count: int = Field(0, ge=0)


class CommitRange(BaseDataModel):
    """Month window the commit activity was counted for."""

    month: str
    from_: str = Field(..., alias="from")
    to: str


class ProjectTimeReport(BaseDataModel):
    """Final report returned to the request handler.

    Attributes:
        project: Project identity
        issues: Work items with only their in-range time entries
        summary: Aggregated rollups
        range: Requested time range
        generated_at: UTC ISO-8601 generation timestamp
        commit_activity: Optional per-day commit counts
        commit_range: Month window of ``commit_activity``
        warnings: Free-text warnings from collaborators
    """

    project: ProjectInfo
    issues: List[WorkItem] = Field(default_factory=list)
    summary: TimeSummary
    range: TimeRange
    generated_at: str
    commit_activity: List[CommitActivityDay] = Field(default_factory=list)
    commit_range: Optional[CommitRange] = None
    warnings: List[str] = Field(default_factory=list)
