"""Helpers shared by CLI commands."""

from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import ValidationError

from timelog_report.cli.error_handlers import ConfigurationError, DataValidationError
from timelog_report.config.logging_config import LoggingConfig, configure_logging
from timelog_report.config.settings import TimelogReportConfig, get_config
from timelog_report.models.report import ProjectInfo
from timelog_report.models.work_item import WorkItem
from timelog_report.readers.issue_reader import IssueReader


def load_settings(debug: bool = False) -> TimelogReportConfig:
    """Load configuration and set up logging for a command run.

    Raises:
        ConfigurationError: If the environment holds invalid settings
    """
    try:
        settings = get_config()
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid settings: {e.error_count()} error(s)",
            recovery_hint="Check the variables in your .env file",
        )

    configure_logging(LoggingConfig.from_settings(settings, debug))
    return settings


def load_project_items(
    input_file: str, project_name: Optional[str] = None
) -> Tuple[ProjectInfo, List[WorkItem]]:
    """Read an issue export and resolve the project identity.

    Exports without project metadata are named after ``project_name`` or
    the file name.

    Raises:
        DataValidationError: If the export cannot be parsed
    """
    try:
        project, items = IssueReader().read_file(input_file)
    except ValueError as e:
        raise DataValidationError(
            str(e), recovery_hint="Export the issues as JSON from the GraphQL API"
        )

    if project is None:
        project = ProjectInfo(id="unknown", name=project_name or Path(input_file).stem)
    return project, items
