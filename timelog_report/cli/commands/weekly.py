"""Weekly matrix command."""

from pathlib import Path
from typing import Optional

import click

from timelog_report.aggregators.time_summary_aggregator import build_time_summary
from timelog_report.aggregators.weekly_matrix import generate_weekly_matrix
from timelog_report.cli.commands.common import load_project_items, load_settings
from timelog_report.cli.error_handlers import ProcessingError, with_error_handling
from timelog_report.cli.utils.formatters import format_info, format_success
from timelog_report.cli.utils.range_options import range_options, resolve_time_range


@click.command(name="weekly")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@range_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "csv"], case_sensitive=False),
    default="table",
    help="Output format (default: table)",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the matrix to this file instead of stdout",
)
@click.option("--debug", is_flag=True, help="Show stack traces on errors")
def weekly(
    input_file: str,
    from_: Optional[str],
    to: Optional[str],
    month: Optional[str],
    output_format: str,
    output: Optional[str],
    debug: bool,
):
    """Show hours per contributor and week.

    Weeks start on Monday (UTC). Entries with unparsable timestamps are
    left out of the matrix.

    Example:
        timelog-report weekly issues.json --month 2024-01
        timelog-report weekly issues.json --format csv --output weekly.csv
    """
    with with_error_handling(debug):
        settings = load_settings(debug)
        time_range = resolve_time_range(from_, to, month, settings)
        _, items = load_project_items(input_file, settings.project_path)

        matrix = generate_weekly_matrix(build_time_summary(items, time_range))

        if matrix.empty:
            click.echo(format_info("No weekly data in the selected range"))
            return

        if output_format.lower() == "csv":
            payload = matrix.to_csv()
        else:
            payload = matrix.to_string(float_format=lambda v: f"{v:.2f}")

        if output:
            try:
                Path(output).write_text(payload, encoding="utf-8")
            except OSError as e:
                raise ProcessingError(
                    f"Cannot write {output}: {e}",
                    recovery_hint="Check that the output directory exists and is writable",
                )
            click.echo(format_success(f"Matrix written to {output}"))
        else:
            click.echo(payload)
