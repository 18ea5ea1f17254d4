"""Shared utilities."""

from timelog_report.utils.logging_utils import LogContext, get_log_context, log_function_call

__all__ = ["LogContext", "get_log_context", "log_function_call"]
