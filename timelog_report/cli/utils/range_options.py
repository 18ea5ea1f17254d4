"""Shared date range options for CLI commands."""

from typing import Callable, Optional

import click

from timelog_report.calculators.commit_activity import parse_month
from timelog_report.config.settings import TimelogReportConfig
from timelog_report.models.report import TimeRange


def range_options(func: Callable) -> Callable:
    """Add ``--from``, ``--to`` and ``--month`` options to a command."""
    func = click.option(
        "--month",
        type=str,
        default=None,
        help=(
            "Restrict to one month (YYYY-MM). "
            "Cannot be used with --from/--to."
        ),
    )(func)
    func = click.option(
        "--to",
        "to",
        type=str,
        default=None,
        help="Exclusive upper bound (ISO-8601 date or timestamp).",
    )(func)
    func = click.option(
        "--from",
        "from_",
        type=str,
        default=None,
        help="Inclusive lower bound (ISO-8601 date or timestamp).",
    )(func)
    return func


def resolve_time_range(
    from_: Optional[str],
    to: Optional[str],
    month: Optional[str],
    settings: Optional[TimelogReportConfig] = None,
) -> TimeRange:
    """Build the requested ``TimeRange`` from CLI options.

    ``--month`` expands to ``[first day, first day of next month)``. When
    no option is given, the configured default bounds are used.

    Raises:
        click.UsageError: If ``--month`` is combined with ``--from``/``--to``
            or is not a valid month
    """
    if month is not None:
        if from_ is not None or to is not None:
            raise click.UsageError("--month cannot be combined with --from/--to")
        try:
            start, end = parse_month(month)
        except ValueError as e:
            raise click.UsageError(str(e))
        return TimeRange(
            from_=f"{start.isoformat()}T00:00:00Z",
            to=f"{end.isoformat()}T00:00:00Z",
        )

    if from_ is None and to is None and settings is not None:
        return TimeRange(from_=settings.default_range_from, to=settings.default_range_to)

    return TimeRange(from_=from_, to=to)
