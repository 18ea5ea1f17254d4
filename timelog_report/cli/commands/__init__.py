"""CLI commands."""

from timelog_report.cli.commands.summarize import summarize
from timelog_report.cli.commands.validate import validate
from timelog_report.cli.commands.weekly import weekly

__all__ = ["summarize", "validate", "weekly"]
