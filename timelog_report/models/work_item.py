"""Work item and time entry models.

This module defines the normalized input records consumed by the
aggregation engine: contributors, epics, time entries (timelogs) and the
work items (issues) that own them.
"""

from typing import List, Optional

from pydantic import Field, field_validator

from timelog_report.models.base import BaseDataModel


class Contributor(BaseDataModel):
    """Person a time entry is attributed to.

    Attributes:
        id: Stable contributor identifier
        name: Display name
        username: Handle, may be absent

    Example:
        >>> Contributor(id="1", name="Alice", username="alice").grouping_key
        'alice'
        >>> Contributor(id="1", name="Alice").grouping_key
        '1'
    """

    id: str = Field(..., description="Contributor identifier")
    name: str = Field(..., description="Display name")
    username: Optional[str] = Field(None, description="Contributor handle")

    @property
    def grouping_key(self) -> str:
        """Key used to merge entries of the same contributor.

        Prefers the handle and falls back to the id.
        """
        return self.username or self.id


class Epic(BaseDataModel):
    """Optional grouping construct above work items."""

    id: str = Field(..., description="Epic identifier")
    iid: Optional[str] = Field(None, description="Project-scoped epic number")
    title: str = Field(..., description="Epic title")
    web_url: Optional[str] = Field(None, description="External link to the epic")

    @field_validator("iid", mode="before")
    @classmethod
    def coerce_iid(cls, v):
        """Accept numeric epic numbers."""
        if isinstance(v, int):
            return str(v)
        return v


class TimeEntry(BaseDataModel):
    """A single logged duration of work.

    The timestamp is kept as the raw string delivered upstream. It may be
    empty or unparsable; such entries still count towards every rollup that
    does not need a parsed date.

    Attributes:
        id: Timelog identifier
        spent_at: Raw timestamp string (ISO-8601 when well formed)
        seconds: Logged duration in seconds
        user: Contributor the entry is attributed to
        summary: Optional free-text note
    """

    id: str = Field(..., description="Timelog identifier")
    spent_at: str = Field("", description="Raw entry timestamp")
    seconds: int = Field(..., gt=0, description="Logged duration in seconds")
    user: Contributor
    summary: Optional[str] = Field(None, description="Optional note")


class WorkItem(BaseDataModel):
    """A trackable unit of work owning zero or more time entries.

    Attributes:
        id: Global item identifier (grouping key for the by-issue rollup)
        iid: Project-scoped item number shown as ``#<iid>``
        title: Display title
        web_url: Link to the item
        state: Status string (e.g. ``opened``, ``closed``)
        labels: Labels attached to the item
        epic: Optional parent epic
        time_estimate: Optional estimate in seconds
        timelogs: Time entries owned by this item
    """

    id: str = Field(..., description="Item identifier")
    iid: str = Field(..., description="Project-scoped item number")
    title: str = Field("", description="Item title")
    web_url: str = Field("", description="Link to the item")
    state: str = Field("", description="Item status")
    labels: List[str] = Field(default_factory=list)
    epic: Optional[Epic] = None
    time_estimate: Optional[int] = Field(None, ge=0, description="Estimate in seconds")
    timelogs: List[TimeEntry] = Field(default_factory=list)

    @field_validator("iid", mode="before")
    @classmethod
    def coerce_iid(cls, v):
        """Accept numeric item numbers as delivered by some exports."""
        if isinstance(v, int):
            return str(v)
        return v

    @property
    def logged_seconds(self) -> int:
        """Sum of all owned entry durations."""
        return sum(log.seconds for log in self.timelogs)
