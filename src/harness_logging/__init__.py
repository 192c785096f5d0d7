"""
Process-local logging facility.

Named loggers filter timestamped records by severity and route them to one
or more handlers (stream, file), each of which applies its own severity
filter before writing a line:

    2024-01-31 12:00:00 my_module INFO Message

Design Pattern: Strategy Pattern for handler abstraction.
Library: orjson for the JSON line format, pydantic-settings for configuration,
structlog and stdlib ``logging`` bridges in ``interceptors``.
"""

from .api import (
    create_logger,
    get_context,
    get_logger,
    log_debug,
    log_error,
    log_fatal,
    log_info,
    log_warning,
    register_handler,
    remove_logger,
    set_context,
    set_log_level,
    unregister_handler,
)
from .context import LoggingContext
from .core import configure_logging
from .exceptions import (
    ConfigurationError,
    DuplicateLoggerError,
    HandlerOpenError,
    LoggerNotFoundError,
    LoggingError,
    ResourceError,
)
from .formatters import JsonFormatter, LineFormatter
from .handlers import BaseHandler, FileHandler, StreamHandler
from .levels import LogLevel
from .logger import Logger
from .record import Record, make_record

__all__ = [
    "BaseHandler",
    "ConfigurationError",
    "DuplicateLoggerError",
    "FileHandler",
    "HandlerOpenError",
    "JsonFormatter",
    "LineFormatter",
    "LogLevel",
    "Logger",
    "LoggerNotFoundError",
    "LoggingContext",
    "LoggingError",
    "Record",
    "ResourceError",
    "StreamHandler",
    "configure_logging",
    "create_logger",
    "get_context",
    "get_logger",
    "log_debug",
    "log_error",
    "log_fatal",
    "log_info",
    "log_warning",
    "make_record",
    "register_handler",
    "remove_logger",
    "set_context",
    "set_log_level",
    "unregister_handler",
]
