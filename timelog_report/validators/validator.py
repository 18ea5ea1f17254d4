"""Data quality checks for work items before aggregation.

The aggregator itself never rejects input. This validator explains what
it will do with questionable records (default them, leave them out of
weekly views, count them under a synthetic label) so users can fix the
source data if they want to.
"""

import logging
from typing import Dict, Optional, Sequence

from timelog_report.calculators.time_utils import parse_timestamp
from timelog_report.models.report import TimeRange
from timelog_report.models.work_item import WorkItem
from timelog_report.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)


class TimelogValidator:
    """Validator for work items, time entries and range bounds.

    Checks performed:
    - ERROR: the same timelog id appears more than once
    - ERROR: ``from`` is not before ``to`` (empty window)
    - WARNING: unparsable range bound (that bound is ignored)
    - WARNING: unparsable entry timestamp (excluded from weekly views)
    - WARNING: contributor without handle (grouped by id)
    - INFO: item without labels (counted as "Unlabeled")
    - INFO: item without epic (counted as "No epic")

    Example:
        >>> validator = TimelogValidator()
        >>> report = validator.validate_items(items)
        >>> if report.has_errors():
        ...     print(report.format())
    """

    def validate_items(self, items: Sequence[WorkItem]) -> ValidationReport:
        """Validate all work items and their time entries.

        Args:
            items: Work items to check

        Returns:
            ValidationReport with all issues found
        """
        report = ValidationReport()
        seen_timelogs: Dict[str, str] = {}

        for item in items:
            context = {"issue": f"#{item.iid}"}

            if not item.labels:
                report.add_info("labels", "No labels, counted as 'Unlabeled'", None, context)
            if item.epic is None:
                report.add_info("epic", "No epic, counted as 'No epic'", None, context)

            for log in item.timelogs:
                log_context = {**context, "timelog": log.id}

                if log.id and log.id in seen_timelogs:
                    report.add_error(
                        "id",
                        f"Duplicate timelog, also on {seen_timelogs[log.id]}",
                        log.id,
                        log_context,
                    )
                elif log.id:
                    seen_timelogs[log.id] = f"#{item.iid}"

                if parse_timestamp(log.spent_at) is None:
                    report.add_warning(
                        "spent_at",
                        "Unparsable timestamp, excluded from weekly views",
                        log.spent_at,
                        log_context,
                    )

                if not log.user.username:
                    report.add_warning(
                        "user",
                        "Contributor has no handle, grouped by id",
                        log.user.id,
                        log_context,
                    )

        logger.info(f"Validated {len(items)} work items: {report.summary()}")
        return report

    def validate_range(self, time_range: Optional[TimeRange]) -> ValidationReport:
        """Validate the bounds of a requested time range.

        Args:
            time_range: Range to check

        Returns:
            ValidationReport with any issues found
        """
        report = ValidationReport()
        if time_range is None:
            return report

        lower = upper = None
        if time_range.from_:
            lower = parse_timestamp(time_range.from_)
            if lower is None:
                report.add_warning("from", "Unparsable bound is ignored", time_range.from_)
        if time_range.to:
            upper = parse_timestamp(time_range.to)
            if upper is None:
                report.add_warning("to", "Unparsable bound is ignored", time_range.to)

        if lower is not None and upper is not None and lower >= upper:
            report.add_error(
                "range",
                "'from' must be before 'to'; no entry can match",
                f"{time_range.from_} -> {time_range.to}",
            )

        return report
