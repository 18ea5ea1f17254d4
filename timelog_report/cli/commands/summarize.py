"""Summarize command."""

import json
from pathlib import Path
from typing import List, Optional

import click

from timelog_report.aggregators.report_builder import ProjectReportBuilder
from timelog_report.calculators.commit_activity import build_commit_activity
from timelog_report.calculators.time_utils import format_duration, seconds_to_hours
from timelog_report.cli.commands.common import load_project_items, load_settings
from timelog_report.cli.error_handlers import ProcessingError, with_error_handling
from timelog_report.cli.utils.formatters import (
    format_info,
    format_rollup,
    format_success,
    format_table,
    format_warning,
)
from timelog_report.cli.utils.range_options import range_options, resolve_time_range
from timelog_report.models.report import ProjectTimeReport


def _commit_loader(commits_file: str, month: Optional[str]):
    def load():
        with open(commits_file, encoding="utf-8") as handle:
            commits = json.load(handle)
        if not isinstance(commits, list):
            raise ValueError("Commit export must be a JSON list")
        return build_commit_activity(commits, month or "")

    return load


def _render_report(report: ProjectTimeReport, top: int) -> List[str]:
    summary = report.summary
    window = f"{report.range.from_ or 'start'} -> {report.range.to or 'now'}"
    lines = [
        format_info(f"Project: {report.project.name}"),
        format_info(f"Range:   {window}"),
        format_info(f"Generated {report.generated_at}"),
        "",
        f"Tracked time:    {seconds_to_hours(summary.total_seconds)}h "
        f"({format_duration(summary.total_seconds)})",
        f"Tracked issues:  {len(report.issues)}",
        f"Timelog entries: {sum(len(item.timelogs) for item in report.issues)}",
        f"Contributors:    {len(summary.by_user)}",
    ]
    if report.commit_activity:
        lines.append(
            f"Commits:         {sum(day.count for day in report.commit_activity)}"
        )

    for title, groups in (
        ("Contributor", summary.by_user),
        ("Issue", summary.by_issue),
        ("Epic", summary.by_epic),
        ("Label", summary.by_label),
        ("State", summary.by_state),
    ):
        lines.extend(["", format_rollup(title, groups, top)])

    if summary.weekly_by_user:
        rows = [
            [
                week.label,
                week.week_start,
                f"{seconds_to_hours(week.total_seconds)}",
                ", ".join(t.user_name for t in week.totals[:3]),
            ]
            for week in summary.weekly_by_user
        ]
        lines.extend(
            ["", format_table(["Week", "Start", "Hours", "Top contributors"], rows, right_align=[2])]
        )

    for warning in report.warnings:
        lines.extend(["", format_warning(warning)])

    return lines


@click.command(name="summarize")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@range_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    help="Output format (default: table)",
)
@click.option(
    "--top",
    type=int,
    default=None,
    help="Rows per table (default: TOP_N from config)",
)
@click.option(
    "--commits",
    "commits_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON list of commits with 'committed_date' for commit activity",
)
@click.option(
    "--commit-month",
    type=str,
    default=None,
    help="Month to count commits for (YYYY-MM, default: --month)",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the JSON report to this file instead of stdout",
)
@click.option("--debug", is_flag=True, help="Show stack traces on errors")
def summarize(
    input_file: str,
    from_: Optional[str],
    to: Optional[str],
    month: Optional[str],
    output_format: str,
    top: Optional[int],
    commits_file: Optional[str],
    commit_month: Optional[str],
    output: Optional[str],
    debug: bool,
):
    """Summarize tracked time from an issue export.

    Reads already-fetched issues with their timelogs, applies the
    [from, to) window and prints the time report.

    Example:
        timelog-report summarize issues.json --month 2024-02
        timelog-report summarize issues.json --from 2024-01-01 --format json
        timelog-report summarize issues.json --commits commits.json --commit-month 2024-02
    """
    with with_error_handling(debug):
        settings = load_settings(debug)
        time_range = resolve_time_range(from_, to, month, settings)
        project, items = load_project_items(input_file, settings.project_path)

        commit_loader = None
        if commits_file:
            commit_loader = _commit_loader(commits_file, commit_month or month)

        report = ProjectReportBuilder().build(
            project=project,
            items=items,
            time_range=time_range,
            commit_loader=commit_loader,
        )

        if output_format.lower() == "json":
            payload = report.model_dump_json(by_alias=True, indent=2)
            if output:
                try:
                    Path(output).write_text(payload, encoding="utf-8")
                except OSError as e:
                    raise ProcessingError(
                        f"Cannot write {output}: {e}",
                        recovery_hint="Check that the output directory exists and is writable",
                    )
                click.echo(format_success(f"Report written to {output}"))
            else:
                click.echo(payload)
            return

        for line in _render_report(report, top or settings.top_n):
            click.echo(line)
