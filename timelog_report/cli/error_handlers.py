"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click

from timelog_report.cli.utils.formatters import format_error, format_warning


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""


class DataValidationError(CLIError):
    """Input data could not be read or failed validation."""


class ProcessingError(CLIError):
    """Error while producing the command output."""


_EXIT_CODES = (
    (ConfigurationError, "Configuration Error", 1),
    (DataValidationError, "Data Validation Error", 3),
    (ProcessingError, "Processing Error", 4),
)


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Report ``error`` to the user and return the process exit code.

    Args:
        error: The exception that occurred
        debug: Whether to show the full stack trace for unexpected errors

    Returns:
        Exit code: 1, 3, 4 for CLI errors, click's own code for usage
        errors, 130 for user aborts and 255 for anything else
    """
    for error_type, title, exit_code in _EXIT_CODES:
        if isinstance(error, error_type):
            click.echo(format_error(f"{title}: {error.message}"), err=True)
            if error.recovery_hint:
                click.echo(format_warning(f"Hint: {error.recovery_hint}"), err=True)
            return exit_code

    if isinstance(error, click.ClickException):
        error.show()
        return error.exit_code

    if isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"), err=True)
        return 130

    click.echo(format_error(f"Unexpected Error: {type(error).__name__}"), err=True)
    click.echo(str(error), err=True)

    if debug:
        click.echo("\nFull stack trace:", err=True)
        click.echo(traceback.format_exc(), err=True)
    else:
        click.echo(format_warning("\nRun with --debug flag for full stack trace"), err=True)

    return 255


def with_error_handling(debug: bool = False):
    """
    Context manager turning exceptions into user-facing messages and exits.

    Example:
        @click.command()
        @click.option('--debug', is_flag=True)
        def my_command(debug):
            with with_error_handling(debug):
                ...
    """

    class ErrorHandler:
        def __init__(self, show_debug: bool):
            self.show_debug = show_debug

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_val is not None and not isinstance(exc_val, SystemExit):
                sys.exit(handle_cli_error(exc_val, self.show_debug))
            return False

    return ErrorHandler(debug)
