"""
Configuration module for the timelog report.
"""
from .logging_config import LoggingConfig, configure_logging
from .settings import TimelogReportConfig, get_config, load_config, reload_config

__all__ = [
    'LoggingConfig',
    'TimelogReportConfig',
    'configure_logging',
    'get_config',
    'load_config',
    'reload_config'
]
