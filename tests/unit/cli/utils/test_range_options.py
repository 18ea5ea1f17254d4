"""Unit tests for CLI range option resolution."""

import click
import pytest

from timelog_report.cli.utils.range_options import resolve_time_range


class TestResolveTimeRange:
    """Test suite for resolve_time_range."""

    def test_month_expands_to_window(self):
        window = resolve_time_range(None, None, "2024-02")

        assert window.from_ == "2024-02-01T00:00:00Z"
        assert window.to == "2024-03-01T00:00:00Z"

    def test_december(self):
        window = resolve_time_range(None, None, "2023-12")
        assert window.to == "2024-01-01T00:00:00Z"

    def test_explicit_bounds(self):
        window = resolve_time_range("2024-01-01", None, None)

        assert window.from_ == "2024-01-01"
        assert window.to is None

    def test_month_with_bounds_is_usage_error(self):
        with pytest.raises(click.UsageError, match="cannot be combined"):
            resolve_time_range("2024-01-01", None, "2024-02")

    def test_invalid_month_is_usage_error(self):
        with pytest.raises(click.UsageError, match="YYYY-MM"):
            resolve_time_range(None, None, "Feb 2024")

    def test_defaults_from_settings(self, test_config):
        settings = test_config.model_copy(
            update={"default_range_from": "2024-01-01", "default_range_to": "2024-02-01"}
        )

        window = resolve_time_range(None, None, None, settings)

        assert window.from_ == "2024-01-01"
        assert window.to == "2024-02-01"

    def test_explicit_bounds_override_settings(self, test_config):
        settings = test_config.model_copy(update={"default_range_from": "2024-01-01"})

        window = resolve_time_range(None, "2024-03-01", None, settings)

        assert window.from_ is None
        assert window.to == "2024-03-01"

    def test_no_bounds_without_settings(self):
        assert resolve_time_range(None, None, None).is_unbounded
