"""
Logging Configuration.

Values come from ``HL_LOG_*`` environment variables or a ``.env`` file.

Usage:
    from harness_logging.config import settings

    settings.primary_name
    settings.log_level  # LogLevel
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .context import DEFAULT_PRIMARY_NAME
from .formatters import DEFAULT_TIMESTAMP_FORMAT
from .levels import LogLevel


class LogLevelName(str, Enum):
    FATAL = "FATAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"
    NOTSET = "NOTSET"


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class LoggingSettings(BaseSettings):
    """Logging infrastructure configuration."""

    model_config = SettingsConfigDict(
        env_prefix="HL_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    primary_name: str = Field(default=DEFAULT_PRIMARY_NAME, description="Name of the primary logger")
    level: LogLevelName = Field(default=LogLevelName.WARNING, description="Initial primary logger level")
    sinks: str = Field(default="stdio", description="Comma-separated sink names (stdio, file)")
    format: LogFormat = Field(default=LogFormat.CONSOLE, description="Output format")
    file_path: str = Field(default="logs/harness.log", description="Path for file sink")
    timestamp_format: str = Field(default=DEFAULT_TIMESTAMP_FORMAT, description="Line timestamp format")
    color: bool = Field(default=False, description="Colorize level words on tty streams")

    @property
    def log_level(self) -> LogLevel:
        return LogLevel.from_name(self.level.value)

    @property
    def sink_names(self) -> list[str]:
        return [s.strip().lower() for s in self.sinks.split(",") if s.strip()]


# Singleton instance
settings = LoggingSettings()

__all__ = ["LogFormat", "LogLevelName", "LoggingSettings", "settings"]
