"""Validate data command."""

import sys
from typing import Optional

import click

from timelog_report.cli.commands.common import load_project_items, load_settings
from timelog_report.cli.error_handlers import with_error_handling
from timelog_report.cli.utils.formatters import (
    format_error,
    format_info,
    format_success,
    format_warning,
)
from timelog_report.cli.utils.range_options import range_options, resolve_time_range
from timelog_report.validators.validation_report import ValidationSeverity
from timelog_report.validators.validator import TimelogValidator

_MAX_ISSUES_PER_SEVERITY = 20


@click.command(name="validate")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@range_options
@click.option(
    "--severity",
    type=click.Choice(["error", "warning", "info"], case_sensitive=False),
    default="warning",
    help="Minimum severity level to display (default: warning)",
)
@click.option("--debug", is_flag=True, help="Show stack traces on errors")
def validate(
    input_file: str,
    from_: Optional[str],
    to: Optional[str],
    month: Optional[str],
    severity: str,
    debug: bool,
):
    """Check an issue export for data quality problems.

    Checks for:
    - Duplicate timelog ids
    - Unparsable timestamps and range bounds
    - Contributors without a handle
    - Issues without labels or epic

    Returns exit code 1 if errors are found.

    Example:
        timelog-report validate issues.json
        timelog-report validate issues.json --month 2024-02 --severity info
    """
    with with_error_handling(debug):
        click.echo(format_info("Validating issue export..."))

        settings = load_settings(debug)
        time_range = resolve_time_range(from_, to, month, settings)
        _, items = load_project_items(input_file, settings.project_path)

        validator = TimelogValidator()
        report = validator.validate_range(time_range)
        report.merge(validator.validate_items(items))

        severity_level = ValidationSeverity[severity.upper()]

        click.echo()
        click.echo("=" * 60)
        click.echo("Validation Summary")
        click.echo("=" * 60)
        click.echo(f"Issues checked:   {len(items)}")
        click.echo(f"Timelog entries:  {sum(len(item.timelogs) for item in items)}")
        click.echo(f"Errors:           {report.error_count}")
        click.echo(f"Warnings:         {report.warning_count}")
        click.echo(f"Info:             {report.info_count}")

        for sev, issues, formatter in (
            (ValidationSeverity.ERROR, report.get_errors(), format_error),
            (ValidationSeverity.WARNING, report.get_warnings(), format_warning),
            (ValidationSeverity.INFO, report.get_info(), format_info),
        ):
            if sev < severity_level or not issues:
                continue
            click.echo()
            click.echo(f"{sev.name}S ({len(issues)}):")
            for issue in issues[:_MAX_ISSUES_PER_SEVERITY]:
                click.echo(formatter(f"  {issue}"))
            if len(issues) > _MAX_ISSUES_PER_SEVERITY:
                click.echo(f"  ... and {len(issues) - _MAX_ISSUES_PER_SEVERITY} more")

        click.echo()
        if report.has_errors():
            click.echo(format_error(f"Validation failed with {report.error_count} error(s)"))
            sys.exit(1)
        elif report.warning_count > 0:
            click.echo(
                format_warning(f"Validation completed with {report.warning_count} warning(s)")
            )
        else:
            click.echo(format_success("Validation passed! No issues found."))
