"""Output formatting utilities for CLI."""

from typing import Iterable, List, Optional, Sequence

import click

from timelog_report.calculators.time_utils import format_duration, seconds_to_hours
from timelog_report.models.summary import RollupGroup


def format_success(message: str) -> str:
    """Format a success message in green."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message in red."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message in yellow."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message in blue."""
    return click.style(f"ℹ {message}", fg="blue")


def format_table(
    headers: List[str],
    rows: List[List[str]],
    max_width: int = 60,
    right_align: Optional[Iterable[int]] = None,
) -> str:
    """Format data as a plain-text table.

    Args:
        headers: List of column headers
        rows: List of data rows (each row is a list of cell values)
        max_width: Maximum width for each column; longer cells are truncated
        right_align: Indices of columns to right-align (e.g. numbers)

    Returns:
        Formatted table as a string
    """
    if not headers:
        return ""

    right = set(right_align or [])

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(col_widths)]):
            col_widths[i] = max(col_widths[i], len(str(cell)))
    col_widths = [min(w, max_width) for w in col_widths]

    def render(cells: Sequence[str]) -> str:
        formatted = []
        for i, width in enumerate(col_widths):
            cell = str(cells[i]) if i < len(cells) else ""
            cell = cell[:width]
            formatted.append(f" {cell:>{width}} " if i in right else f" {cell:<{width}} ")
        return "|" + "|".join(formatted) + "|"

    separator = "+" + "+".join("-" * (w + 2) for w in col_widths) + "+"

    lines = [separator, render(headers), separator]
    if rows:
        lines.extend(render(row) for row in rows)
        lines.append(separator)

    return "\n".join(lines)


def format_rollup(
    title: str, groups: List[RollupGroup], top: Optional[int] = None
) -> str:
    """Format a single-dimension rollup as a titled table.

    Args:
        title: Column header for the group labels
        groups: Rollup groups in presentation order
        top: Show only the first ``top`` groups

    Returns:
        Formatted table, or a short notice if there are no groups
    """
    if not groups:
        return f"{title}: no tracked time"

    shown = groups[:top] if top else groups
    rows = [
        [group.label, f"{seconds_to_hours(group.seconds)}", format_duration(group.seconds)]
        for group in shown
    ]
    table = format_table([title, "Hours", "Duration"], rows, right_align=[1, 2])

    hidden = len(groups) - len(shown)
    if hidden > 0:
        table += f"\n  ... and {hidden} more"
    return table
