"""
Configuration management for the timelog report.
"""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from timelog_report.calculators.time_utils import parse_timestamp


class TimelogReportConfig(BaseSettings):
    """Configuration settings for the timelog report."""

    # Project defaults
    project_path: Optional[str] = Field(default=None, alias="PROJECT_PATH")
    default_range_from: Optional[str] = Field(default=None, alias="DEFAULT_RANGE_FROM")
    default_range_to: Optional[str] = Field(default=None, alias="DEFAULT_RANGE_TO")

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="standard", alias="LOG_FORMAT")

    # Presentation
    top_n: int = Field(default=10, ge=1, alias="TOP_N")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Ensure log format is valid."""
        valid_formats = ["standard", "json"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {valid_formats}")
        return v.lower()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @field_validator("default_range_from", "default_range_to")
    @classmethod
    def validate_range_bound(cls, v):
        """Reject default bounds that can never be applied."""
        if v and parse_timestamp(v) is None:
            raise ValueError(f"Range bound must be an ISO-8601 timestamp, got: {v}")
        return v or None


def load_config(env_file: Optional[str] = None) -> TimelogReportConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return TimelogReportConfig()


# Global configuration instance
_config: Optional[TimelogReportConfig] = None


def get_config() -> TimelogReportConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> TimelogReportConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
