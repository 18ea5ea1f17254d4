"""Tests for the weekly contributor matrix."""

import pandas as pd

from timelog_report.aggregators.time_summary_aggregator import build_time_summary
from timelog_report.aggregators.weekly_matrix import generate_weekly_matrix
from timelog_report.models import Contributor, TimeEntry, TimeSummary, WorkItem


class TestGenerateWeeklyMatrix:
    """Test generate_weekly_matrix function."""

    def test_shape_and_order(self, sample_work_items):
        matrix = generate_weekly_matrix(build_time_summary(sample_work_items))

        assert list(matrix.index) == ["Bob", "Alice"]
        assert list(matrix.columns) == ["2024-01-08", "2024-01-15"]
        assert matrix.index.name == "contributor"

    def test_values_in_hours(self, sample_work_items):
        matrix = generate_weekly_matrix(build_time_summary(sample_work_items))

        assert matrix.loc["Bob", "2024-01-08"] == 1.5
        assert matrix.loc["Bob", "2024-01-15"] == 0.5
        assert matrix.loc["Alice", "2024-01-08"] == 1.0

    def test_missing_weeks_are_zero(self, sample_work_items):
        matrix = generate_weekly_matrix(build_time_summary(sample_work_items))

        assert matrix.loc["Alice", "2024-01-15"] == 0.0
        assert not matrix.isna().any().any()

    def test_empty_summary(self):
        matrix = generate_weekly_matrix(TimeSummary())

        assert isinstance(matrix, pd.DataFrame)
        assert matrix.empty

    def test_unparsable_entries_are_left_out(self):
        user = Contributor(id="1", name="Dana", username="dana")
        item = WorkItem(
            id="i1",
            iid="1",
            timelogs=[TimeEntry(id="t1", spent_at="not-a-date", seconds=600, user=user)],
        )

        assert generate_weekly_matrix(build_time_summary([item])).empty

    def test_contributor_without_username(self):
        user = Contributor(id="gid://gitlab/User/9", name="Eve")
        item = WorkItem(
            id="i1",
            iid="1",
            timelogs=[TimeEntry(id="t1", spent_at="2024-01-08", seconds=7200, user=user)],
        )

        matrix = generate_weekly_matrix(build_time_summary([item]))

        assert list(matrix.index) == ["Eve"]
        assert matrix.loc["Eve", "2024-01-08"] == 2.0

    def test_contributor_without_username_keeps_by_user_order(self):
        bob = Contributor(id="gid://gitlab/User/2", name="Bob", username="bob")
        eve = Contributor(id="gid://gitlab/User/9", name="Eve")
        item = WorkItem(
            id="i1",
            iid="1",
            timelogs=[
                TimeEntry(id="t1", spent_at="2024-01-08", seconds=600, user=bob),
                TimeEntry(id="t2", spent_at="2024-01-09", seconds=7200, user=eve),
            ],
        )
        summary = build_time_summary([item])

        matrix = generate_weekly_matrix(summary)

        assert [g.label for g in summary.by_user] == ["Eve", "Bob"]
        assert list(matrix.index) == ["Eve", "Bob"]
        assert matrix.loc["Eve", "2024-01-08"] == 2.0
