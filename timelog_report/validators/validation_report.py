"""Validation report for collecting and formatting data quality issues."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional


class ValidationSeverity(IntEnum):
    """Severity levels for validation issues."""

    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class ValidationIssue:
    """Represents a single validation issue.

    Attributes:
        severity: The severity level of the issue
        field: The field name that has the issue
        message: Human-readable description of the issue
        value: The value that caused the issue
        context: Optional context information (e.g., issue, timelog)
    """

    severity: ValidationSeverity
    field: str
    message: str
    value: Any
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        context_str = ""
        if self.context:
            context_parts = [f"{k}={v}" for k, v in self.context.items()]
            context_str = f" ({', '.join(context_parts)})"

        return f"[{self.severity.name}] {self.field}: {self.message}{context_str}"


class ValidationReport:
    """Collects validation issues and formats them for display.

    Only errors make a report invalid; warnings and info messages describe
    input the aggregator will default or partially exclude.

    Example:
        >>> report = ValidationReport()
        >>> report.add_warning("spent_at", "Unparsable timestamp", "not-a-date")
        >>> report.is_valid()
        True
        >>> report.summary()
        '1 warning(s)'
    """

    def __init__(self) -> None:
        self.issues: List[ValidationIssue] = []

    def _count(self, severity: ValidationSeverity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    def _filter(self, severity: ValidationSeverity) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == severity]

    @property
    def error_count(self) -> int:
        return self._count(ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return self._count(ValidationSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return self._count(ValidationSeverity.INFO)

    def is_valid(self) -> bool:
        """True when the report holds no errors."""
        return self.error_count == 0

    def has_errors(self) -> bool:
        return self.error_count > 0

    def add(
        self,
        severity: ValidationSeverity,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Add an issue of the given severity."""
        self.issues.append(
            ValidationIssue(
                severity=severity,
                field=field,
                message=message,
                value=value,
                context=context,
            )
        )

    def add_error(self, field: str, message: str, value: Any, context=None) -> None:
        self.add(ValidationSeverity.ERROR, field, message, value, context)

    def add_warning(self, field: str, message: str, value: Any, context=None) -> None:
        self.add(ValidationSeverity.WARNING, field, message, value, context)

    def add_info(self, field: str, message: str, value: Any, context=None) -> None:
        self.add(ValidationSeverity.INFO, field, message, value, context)

    def get_errors(self) -> List[ValidationIssue]:
        return self._filter(ValidationSeverity.ERROR)

    def get_warnings(self) -> List[ValidationIssue]:
        return self._filter(ValidationSeverity.WARNING)

    def get_info(self) -> List[ValidationIssue]:
        return self._filter(ValidationSeverity.INFO)

    def merge(self, other: "ValidationReport") -> None:
        """Append the issues of another report."""
        self.issues.extend(other.issues)

    def summary(self) -> str:
        """Summarize issue counts, e.g. ``"1 error(s), 2 warning(s)"``."""
        parts = []
        if self.error_count > 0:
            parts.append(f"{self.error_count} error(s)")
        if self.warning_count > 0:
            parts.append(f"{self.warning_count} warning(s)")
        if self.info_count > 0:
            parts.append(f"{self.info_count} info message(s)")

        if not parts:
            return "No issues found"

        return ", ".join(parts)

    def format(self) -> str:
        """Format the report grouped by severity."""
        if not self.issues:
            return "Validation successful - no issues found"

        lines = [f"Validation Report - {self.summary()}", "=" * 60]

        for title, issues in (
            ("ERRORS", self.get_errors()),
            ("WARNINGS", self.get_warnings()),
            ("INFO", self.get_info()),
        ):
            if issues:
                lines.append(f"\n{title}:")
                lines.extend(f"  - {issue}" for issue in issues)

        return "\n".join(lines)
