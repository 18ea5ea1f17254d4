"""Centralized logging configuration for the timelog report.

Log output always goes to stderr (and optionally a rotating file) so that
reports written to stdout, JSON in particular, stay machine readable.
"""

import json
import logging
import logging.handlers
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional

from timelog_report.utils.logging_utils import _ContextFilter

if TYPE_CHECKING:
    from timelog_report.config.settings import TimelogReportConfig

STANDARD_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
STANDARD_DATEFMT = "%Y-%m-%d %H:%M:%S"
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB

# Attributes every LogRecord has; anything else came from extra= or LogContext
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Context fields (``project``, ``command``) and ``extra={...}`` values
    become top-level keys. Values that are not JSON serializable are
    rendered with ``str()``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        payload.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
        )
        return json.dumps(payload, default=str)


@dataclass
class LoggingConfig:
    """
    Logging options for one process run.

    Attributes:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (case-insensitive)
        log_format: 'standard' or 'json'
        log_file: Path of the rotating log file
        enable_console: Log to stderr
        enable_file: Log to ``log_file``
        max_file_size: Rotation threshold in bytes (default: 10MB)
        backup_count: Rotated files to keep (default: 5)

    Raises:
        ValueError: If the level or format is unknown, or file output is
            enabled without ``log_file``
    """

    log_level: str = "INFO"
    log_format: str = "standard"
    log_file: Optional[str] = None
    enable_console: bool = True
    enable_file: bool = False
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    backup_count: int = 5

    VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    VALID_FORMATS = ("standard", "json")

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in self.VALID_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level}. "
                f"Must be one of {', '.join(self.VALID_LEVELS)}"
            )
        if self.log_format not in self.VALID_FORMATS:
            raise ValueError(
                f"Invalid log format: {self.log_format}. "
                f"Must be one of {', '.join(self.VALID_FORMATS)}"
            )
        if self.enable_file and not self.log_file:
            raise ValueError("log_file must be specified when enable_file is True")

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """
        Read the logging options from environment variables.

        Environment Variables:
            LOG_LEVEL: Log level (default: INFO)
            LOG_FORMAT: Log format (default: standard)
            LOG_FILE: Log file path; enables file output when set
            LOG_CONSOLE: Enable stderr output (default: true)
            LOG_MAX_FILE_SIZE: Rotation threshold in bytes (default: 10485760)
            LOG_BACKUP_COUNT: Rotated files to keep (default: 5)
        """
        log_file = os.getenv("LOG_FILE") or None
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            log_file=log_file,
            enable_console=os.getenv("LOG_CONSOLE", "true").lower() == "true",
            enable_file=log_file is not None,
            max_file_size=int(os.getenv("LOG_MAX_FILE_SIZE", str(DEFAULT_MAX_FILE_SIZE))),
            backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
        )

    @classmethod
    def from_settings(
        cls, settings: "TimelogReportConfig", debug: bool = False
    ) -> "LoggingConfig":
        """
        Derive the logging options of a command run from the app settings.

        ``debug`` (the ``--debug`` flag) or ``DEBUG=true`` force DEBUG level.
        File output still follows ``LOG_FILE``.
        """
        log_file = os.getenv("LOG_FILE") or None
        return cls(
            log_level="DEBUG" if debug or settings.debug else settings.log_level,
            log_format=settings.log_format,
            log_file=log_file,
            enable_file=log_file is not None,
        )


def _build_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.log_format == "json":
        return JSONFormatter()
    return logging.Formatter(fmt=STANDARD_FORMAT, datefmt=STANDARD_DATEFMT)


def _build_handlers(config: LoggingConfig) -> Iterator[logging.Handler]:
    if config.enable_console:
        yield logging.StreamHandler(sys.stderr)

    if config.enable_file and config.log_file:
        Path(config.log_file).parent.mkdir(parents=True, exist_ok=True)
        yield logging.handlers.RotatingFileHandler(
            filename=config.log_file,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )


def configure_logging(config: LoggingConfig) -> None:
    """
    Install the handlers described by ``config`` on the root logger.

    Previous root handlers are closed and removed, so the CLI can call this
    once per command without duplicating output.
    """
    reset_logging()

    level = getattr(logging, config.log_level)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = _build_formatter(config)
    context_filter = _ContextFilter()
    for handler in _build_handlers(config):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the module logger; its output follows ``configure_logging``."""
    return logging.getLogger(name)


def reset_logging() -> None:
    """Close and remove all root handlers and restore the WARNING level."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.WARNING)
