"""Timelog Report CLI.

This module provides the command-line interface for the timelog report.
It includes commands for summarizing tracked time, showing the weekly
contributor matrix and validating issue exports.
"""

import click

from timelog_report import __version__
from timelog_report.cli.commands.summarize import summarize
from timelog_report.cli.commands.validate import validate
from timelog_report.cli.commands.weekly import weekly


@click.group(help="Timelog Report CLI - Summarize tracked time from issue exports")
@click.version_option(version=__version__)
def cli():
    """Timelog Report CLI main entry point."""
    pass


# Register commands
cli.add_command(summarize)
cli.add_command(weekly)
cli.add_command(validate)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
