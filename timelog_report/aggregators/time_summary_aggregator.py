"""Time summary aggregator building every rollup in a single pass.

This module walks the range-filtered time entries of a list of work items
once and folds each entry into all rollups at the same time: by
contributor, work item, epic, label, state, date, and the nested weekly
and per-label breakdowns. Each rollup is then finalized into its sorted
presentation form.

The aggregator never raises on malformed entries. Unparsable timestamps
fall back to sentinel keys or are left out of the weekly views only.
"""

import logging
from typing import List, Optional, Sequence

from timelog_report.aggregators.keyed_accumulator import KeyedAccumulator
from timelog_report.calculators.week_utils import get_week_bucket
from timelog_report.filters.range_filter import filter_timelogs
from timelog_report.models.report import TimeRange
from timelog_report.models.summary import (
    ContributorTotal,
    DateTotal,
    EpicTotal,
    LabelTotal,
    LabelUserSummary,
    RollupGroup,
    TimeSummary,
    WeeklyEpicSummary,
    WeeklyLabelSummary,
    WeeklyUserSummary,
)
from timelog_report.models.work_item import TimeEntry, WorkItem

logger = logging.getLogger(__name__)

# Sentinel keys for missing dimensions
UNLABELED = "Unlabeled"
NO_EPIC_LABEL = "No epic"
UNASSIGNED_EPIC_KEY = "unassigned"
UNKNOWN_KEY = "unknown"


def date_key(spent_at: Optional[str]) -> str:
    """Return the calendar-day key of a raw timestamp.

    Uses the first 10 characters as written, without timezone conversion.
    """
    return spent_at[:10] if spent_at else UNKNOWN_KEY


class TimeSummaryAggregator:
    """Aggregates work item time entries into a ``TimeSummary``.

    The aggregator:
    1. Applies the range filter to every entry
    2. Folds each included entry into all rollups in one traversal
    3. Sorts single-dimension rollups by descending seconds (stable)
    4. Sorts weekly rollups by ascending week start and the label-by-user
       rollup by descending label total

    A new set of accumulators is created per call, so one instance can be
    shared between concurrent requests.

    Example:
        >>> aggregator = TimeSummaryAggregator()
        >>> summary = aggregator.build_summary(items, TimeRange(from_="2024-01-01"))
        >>> summary.total_seconds
        5400
    """

    def build_summary(
        self,
        items: Sequence[WorkItem],
        time_range: Optional[TimeRange] = None,
    ) -> TimeSummary:
        """Build the time summary for ``items`` restricted to ``time_range``.

        Args:
            items: Work items with their time entries
            time_range: Optional ``[from, to)`` window on entry timestamps

        Returns:
            TimeSummary with every rollup in presentation order
        """
        logger.info(f"Building time summary for {len(items)} work items")

        total_seconds = 0
        entry_count = 0

        by_user = KeyedAccumulator()
        by_issue = KeyedAccumulator()
        by_epic = KeyedAccumulator()
        by_state = KeyedAccumulator()
        by_label = KeyedAccumulator()
        by_date = KeyedAccumulator()
        weekly_by_user = KeyedAccumulator(nested=True)
        label_by_user = KeyedAccumulator(nested=True)
        weekly_labels = KeyedAccumulator(nested=True)
        weekly_epics = KeyedAccumulator(nested=True)

        for item in items:
            timelogs = filter_timelogs(item, time_range)
            item_seconds = sum(log.seconds for log in timelogs)
            labels = item.labels or [UNLABELED]

            if item.epic is not None:
                epic_key, epic_label = item.epic.id, item.epic.title
                epic_url = item.epic.web_url
            else:
                epic_key, epic_label, epic_url = UNASSIGNED_EPIC_KEY, NO_EPIC_LABEL, None

            # Item-level rollups register the item even without in-range time
            by_issue.add(
                item.id,
                item_seconds,
                label=f"#{item.iid} {item.title}",
                hints={"issue_url": item.web_url, "state": item.state},
            )
            by_epic.add(epic_key, item_seconds, label=epic_label, hints={"epic_url": epic_url})
            state_key = item.state or UNKNOWN_KEY
            by_state.add(state_key, item_seconds, label=state_key)
            for label in labels:
                by_label.add(label, item_seconds, label=label)

            for log in timelogs:
                total_seconds += log.seconds
                entry_count += 1
                self._add_entry(
                    log,
                    labels,
                    epic_label,
                    by_user=by_user,
                    by_date=by_date,
                    weekly_by_user=weekly_by_user,
                    label_by_user=label_by_user,
                    weekly_labels=weekly_labels,
                    weekly_epics=weekly_epics,
                )

        summary = TimeSummary(
            total_seconds=total_seconds,
            by_user=self._to_groups(by_user),
            by_issue=self._to_groups(by_issue),
            by_epic=self._to_groups(by_epic),
            by_label=self._to_groups(by_label),
            by_state=self._to_groups(by_state),
            by_date=[DateTotal(date=b.key, seconds=b.seconds) for b in by_date.by_seconds()],
            weekly_by_user=[
                WeeklyUserSummary(
                    week_start=b.key,
                    label=b.meta["label"],
                    totals=self._contributor_totals(b.inner),
                    total_seconds=b.seconds,
                )
                for b in weekly_by_user.by_key()
            ],
            label_by_user=[
                LabelUserSummary(
                    label=b.key,
                    totals=self._contributor_totals(b.inner),
                    total_seconds=b.seconds,
                )
                for b in label_by_user.by_seconds()
            ],
            weekly_label_breakdown=[
                WeeklyLabelSummary(
                    week_start=b.key,
                    label=b.meta["label"],
                    totals=[
                        LabelTotal(label=inner.key, seconds=inner.seconds)
                        for inner in b.inner.by_seconds()
                    ],
                    total_seconds=b.seconds,
                )
                for b in weekly_labels.by_key()
            ],
            weekly_epic_breakdown=[
                WeeklyEpicSummary(
                    week_start=b.key,
                    label=b.meta["label"],
                    totals=[
                        EpicTotal(epic=inner.key, seconds=inner.seconds)
                        for inner in b.inner.by_seconds()
                    ],
                    total_seconds=b.seconds,
                )
                for b in weekly_epics.by_key()
            ],
        )

        logger.info(
            f"Time summary complete: {entry_count} entries, {total_seconds}s total, "
            f"{len(summary.by_user)} contributors, {len(summary.weekly_by_user)} weeks"
        )
        return summary

    def _add_entry(
        self,
        log: TimeEntry,
        labels: List[str],
        epic_label: str,
        *,
        by_user: KeyedAccumulator,
        by_date: KeyedAccumulator,
        weekly_by_user: KeyedAccumulator,
        label_by_user: KeyedAccumulator,
        weekly_labels: KeyedAccumulator,
        weekly_epics: KeyedAccumulator,
    ) -> None:
        """Fold one time entry into the entry-level rollups."""
        seconds = log.seconds
        user = log.user
        user_key = user.grouping_key
        user_meta = {"user_id": user.id, "user_name": user.name, "username": user.username}

        by_date.add(date_key(log.spent_at), seconds)
        by_user.add(
            user_key,
            seconds,
            label=user.name,
            hints={"username": user.username, "user_id": user.id},
        )

        for label in labels:
            label_by_user.add_nested(label, user_key, seconds, inner_meta=user_meta)

        week = get_week_bucket(log.spent_at)
        if week is None:
            logger.debug(f"Entry {log.id} has unparsable timestamp {log.spent_at!r}")
            return

        week_meta = {"label": week.label}
        weekly_by_user.add_nested(
            week.key, user_key, seconds, outer_meta=week_meta, inner_meta=user_meta
        )
        for label in labels:
            weekly_labels.add_nested(week.key, label, seconds, outer_meta=week_meta)
        weekly_epics.add_nested(week.key, epic_label, seconds, outer_meta=week_meta)

    @staticmethod
    def _to_groups(accumulator: KeyedAccumulator) -> List[RollupGroup]:
        return [RollupGroup(seconds=b.seconds, **b.meta) for b in accumulator.by_seconds()]

    @staticmethod
    def _contributor_totals(accumulator: KeyedAccumulator) -> List[ContributorTotal]:
        return [ContributorTotal(seconds=b.seconds, **b.meta) for b in accumulator.by_seconds()]


def build_time_summary(
    items: Sequence[WorkItem], time_range: Optional[TimeRange] = None
) -> TimeSummary:
    """Build a time summary with a fresh ``TimeSummaryAggregator``.

    Args:
        items: Work items with their time entries
        time_range: Optional ``[from, to)`` window

    Returns:
        TimeSummary for the included entries
    """
    return TimeSummaryAggregator().build_summary(items, time_range)
