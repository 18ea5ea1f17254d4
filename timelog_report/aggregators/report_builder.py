"""Report assembly combining the time summary with request metadata.

The builder performs no aggregation itself. It runs the aggregator,
attaches the project identity, the requested range and the generation
time, and merges auxiliary data from collaborators. A failing collaborator
never aborts the report; its error message becomes a warning instead.
"""

import datetime as dt
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from timelog_report.aggregators.time_summary_aggregator import TimeSummaryAggregator
from timelog_report.filters.range_filter import filter_timelogs
from timelog_report.models.report import (
    CommitActivityDay,
    CommitRange,
    ProjectInfo,
    ProjectTimeReport,
    TimeRange,
)
from timelog_report.models.work_item import WorkItem
from timelog_report.utils.logging_utils import LogContext

logger = logging.getLogger(__name__)

CommitActivityLoader = Callable[[], Tuple[List[CommitActivityDay], CommitRange]]


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and ``Z``."""
    now = dt.datetime.now(dt.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ProjectReportBuilder:
    """Assembles a ``ProjectTimeReport`` for one request.

    Attributes:
        aggregator: Aggregator used to build the time summary
        clock: Callable returning the generation timestamp

    Example:
        >>> builder = ProjectReportBuilder()
        >>> report = builder.build(
        ...     project=ProjectInfo(id="1", name="demo"),
        ...     items=items,
        ...     time_range=TimeRange(from_="2024-01-01", to="2024-02-01"),
        ...     warnings=["commit activity unavailable"],
        ... )
        >>> report.warnings
        ['commit activity unavailable']
    """

    def __init__(
        self,
        aggregator: Optional[TimeSummaryAggregator] = None,
        clock: Callable[[], str] = utc_now_iso,
    ):
        """Initialize the report builder.

        Args:
            aggregator: Aggregator to use (default: new TimeSummaryAggregator)
            clock: Source of the ``generated_at`` timestamp
        """
        self.aggregator = aggregator or TimeSummaryAggregator()
        self.clock = clock

    def build(
        self,
        project: ProjectInfo,
        items: Sequence[WorkItem],
        time_range: Optional[TimeRange] = None,
        commit_loader: Optional[CommitActivityLoader] = None,
        warnings: Optional[List[str]] = None,
    ) -> ProjectTimeReport:
        """Build the report for ``items`` within ``time_range``.

        Args:
            project: Project identity from the data-retrieval collaborator
            items: Work items with their time entries
            time_range: Optional ``[from, to)`` window
            commit_loader: Optional collaborator returning commit activity
            warnings: Warnings already collected by other collaborators

        Returns:
            ProjectTimeReport with summary, filtered issues and warnings
        """
        time_range = time_range or TimeRange()
        report_warnings = list(warnings or [])

        with LogContext(project=project.name):
            logger.info(
                f"Assembling report for {project.name} "
                f"(from={time_range.from_}, to={time_range.to})"
            )

            summary = self.aggregator.build_summary(items, time_range)
            issues = [
                item.model_copy(update={"timelogs": filter_timelogs(item, time_range)})
                for item in items
            ]

            commit_activity: List[CommitActivityDay] = []
            commit_range: Optional[CommitRange] = None
            if commit_loader is not None:
                try:
                    commit_activity, commit_range = commit_loader()
                except Exception as e:
                    message = str(e) or "Unable to load commit activity."
                    logger.warning(f"Commit activity unavailable: {message}")
                    report_warnings.append(message)

            report = ProjectTimeReport(
                project=project,
                issues=issues,
                summary=summary,
                range=time_range,
                generated_at=self.clock(),
                commit_activity=commit_activity,
                commit_range=commit_range,
                warnings=report_warnings,
            )

            logger.info(
                f"Report assembled: {len(issues)} issues, "
                f"{len(report_warnings)} warning(s)"
            )
            return report
