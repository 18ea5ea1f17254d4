"""Validation layer for timelog data quality."""

from timelog_report.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)
from timelog_report.validators.validator import TimelogValidator

__all__ = [
    "TimelogValidator",
    "ValidationReport",
    "ValidationIssue",
    "ValidationSeverity",
]
