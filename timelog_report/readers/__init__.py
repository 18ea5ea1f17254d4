"""Readers for normalizing exported issue data."""

from timelog_report.readers.issue_reader import IssueReader

__all__ = ["IssueReader"]
