"""Unit tests for time utilities."""

import datetime as dt
from decimal import Decimal

import pytest

from timelog_report.calculators.time_utils import (
    format_duration,
    parse_timestamp,
    seconds_to_hours,
)

UTC = dt.timezone.utc


class TestParseTimestamp:
    """Test parse_timestamp function."""

    def test_zulu_suffix(self):
        assert parse_timestamp("2024-01-08T10:00:00Z") == dt.datetime(2024, 1, 8, 10, tzinfo=UTC)

    def test_fractional_seconds(self):
        parsed = parse_timestamp("2024-01-08T10:00:00.123Z")
        assert parsed.microsecond == 123000

    def test_offset_is_normalized_to_utc(self):
        parsed = parse_timestamp("2024-01-08T01:00:00+02:00")
        assert parsed == dt.datetime(2024, 1, 7, 23, tzinfo=UTC)
        assert parsed.tzinfo == UTC

    def test_date_only_is_midnight_utc(self):
        assert parse_timestamp("2024-02-01") == dt.datetime(2024, 2, 1, tzinfo=UTC)

    def test_naive_timestamp_is_utc(self):
        assert parse_timestamp("2024-02-01T08:30:00") == dt.datetime(2024, 2, 1, 8, 30, tzinfo=UTC)

    @pytest.mark.parametrize("value", ["", None, "not-a-date", "2024-13-01", "Z"])
    def test_unparsable_returns_none(self, value):
        assert parse_timestamp(value) is None


class TestSecondsToHours:
    """Test seconds_to_hours function."""

    @pytest.mark.parametrize(
        "seconds,expected",
        [
            (0, Decimal("0.00")),
            (3600, Decimal("1.00")),
            (5400, Decimal("1.50")),
            (600, Decimal("0.17")),
            (18, Decimal("0.01")),
        ],
    )
    def test_conversion(self, seconds, expected):
        assert seconds_to_hours(seconds) == expected


class TestFormatDuration:
    """Test format_duration function."""

    @pytest.mark.parametrize(
        "seconds,expected",
        [
            (0, "<1m"),
            (59, "<1m"),
            (60, "1m"),
            (2700, "45m"),
            (7200, "2h"),
            (9000, "2h 30m"),
            (90061, "25h 1m"),
        ],
    )
    def test_format(self, seconds, expected):
        assert format_duration(seconds) == expected
