"""Unit tests for the range filter."""

import pytest

from timelog_report.filters.range_filter import filter_timelogs, is_within_range
from timelog_report.models import TimeEntry, TimeRange, WorkItem

FEBRUARY = TimeRange(from_="2024-02-01", to="2024-03-01")


class TestIsWithinRange:
    """Test is_within_range predicate."""

    def test_no_range_includes_everything(self):
        assert is_within_range("2024-02-01T00:00:00Z", None)
        assert is_within_range("2024-02-01T00:00:00Z", TimeRange())

    def test_from_is_inclusive(self):
        assert is_within_range("2024-02-01T00:00:00Z", FEBRUARY)

    def test_before_from_is_excluded(self):
        assert not is_within_range("2024-01-31T23:59:59Z", FEBRUARY)

    def test_to_is_exclusive(self):
        assert not is_within_range("2024-03-01T00:00:00Z", FEBRUARY)

    def test_just_before_to_is_included(self):
        assert is_within_range("2024-02-29T23:59:59Z", FEBRUARY)

    @pytest.mark.parametrize("spent_at", ["not-a-date", "", None])
    def test_unparsable_timestamp_fails_open(self, spent_at):
        assert is_within_range(spent_at, FEBRUARY)

    def test_unparsable_bound_is_ignored(self):
        window = TimeRange(from_="yesterday", to="2024-03-01")

        assert is_within_range("1999-01-01T00:00:00Z", window)
        assert not is_within_range("2024-03-02T00:00:00Z", window)

    def test_only_upper_bound(self):
        window = TimeRange(to="2024-03-01")

        assert is_within_range("2020-01-01T00:00:00Z", window)
        assert not is_within_range("2024-03-01T00:00:00Z", window)

    def test_offsets_are_compared_in_utc(self):
        # 2024-03-01T00:30+01:00 is 2024-02-29T23:30Z
        assert is_within_range("2024-03-01T00:30:00+01:00", FEBRUARY)


def test_filter_timelogs_keeps_order(alice):
    item = WorkItem(
        id="i1",
        iid="1",
        timelogs=[
            TimeEntry(id="a", spent_at="2024-02-10T10:00:00Z", seconds=60, user=alice),
            TimeEntry(id="b", spent_at="2024-03-10T10:00:00Z", seconds=60, user=alice),
            TimeEntry(id="c", spent_at="not-a-date", seconds=60, user=alice),
            TimeEntry(id="d", spent_at="2024-02-01T00:00:00Z", seconds=60, user=alice),
        ],
    )

    assert [log.id for log in filter_timelogs(item, FEBRUARY)] == ["a", "c", "d"]
    assert [log.id for log in filter_timelogs(item, None)] == ["a", "b", "c", "d"]
