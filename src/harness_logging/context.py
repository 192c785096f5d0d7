"""
Name to logger mapping plus the functional API bound to one primary logger.

Application start-up builds one ``LoggingContext`` and passes it to the code
that creates loggers. ``harness_logging.api`` keeps a default instance for
callers that prefer module-level functions.
"""

from __future__ import annotations

import threading

from .exceptions import DuplicateLoggerError, LoggerNotFoundError
from .handlers import BaseHandler
from .levels import LogLevel
from .logger import Logger
from .record import format_message, make_record

DEFAULT_PRIMARY_NAME = "harness"


class LoggingContext:
    """Registry of loggers with at most one logger per name.

    Args:
        primary_name: Name of the logger targeted by ``register_handler``,
            ``set_log_level`` and the ``log_*`` functions.
    """

    def __init__(self, primary_name: str = DEFAULT_PRIMARY_NAME):
        self._primary_name = primary_name
        self._loggers: dict[str, Logger] = {}
        self._lock = threading.RLock()

    @property
    def primary_name(self) -> str:
        return self._primary_name

    # =========================================================================
    # Registry
    # =========================================================================

    def create_logger(self, name: str, level: LogLevel | None = None) -> Logger:
        """Create and register a logger with no handlers.

        Raises:
            DuplicateLoggerError: ``name`` is already registered.
        """
        with self._lock:
            if name in self._loggers:
                raise DuplicateLoggerError(name=name)
            logger = Logger(name) if level is None else Logger(name, level)
            self._loggers[name] = logger
            return logger

    def remove_logger(self, name: str) -> None:
        """Unregister a logger. Its handlers are left open.

        Raises:
            LoggerNotFoundError: ``name`` is not registered.
        """
        with self._lock:
            if name not in self._loggers:
                raise LoggerNotFoundError(name=name)
            del self._loggers[name]

    def get_logger(self, name: str) -> Logger:
        """Raises ``LoggerNotFoundError`` if ``name`` is not registered."""
        with self._lock:
            try:
                return self._loggers[name]
            except KeyError:
                raise LoggerNotFoundError(name=name) from None

    def has_logger(self, name: str) -> bool:
        with self._lock:
            return name in self._loggers

    def loggers(self) -> list[str]:
        with self._lock:
            return sorted(self._loggers)

    def registered(self) -> list[Logger]:
        """Snapshot of the registered loggers."""
        with self._lock:
            return list(self._loggers.values())

    def _find_primary(self) -> Logger | None:
        with self._lock:
            return self._loggers.get(self._primary_name)

    @property
    def primary(self) -> Logger:
        return self.get_logger(self._primary_name)

    # =========================================================================
    # Functional API (primary logger)
    # =========================================================================

    def register_handler(self, handler: BaseHandler) -> None:
        self.primary.add_handler(handler)

    def unregister_handler(self, handler: BaseHandler) -> None:
        self.primary.remove_handler(handler)

    def set_log_level(self, level: LogLevel) -> None:
        self.primary.set_level(level)

    def log(self, level: LogLevel, fmt: str, *args: object) -> None:
        """Dispatch a formatted message to the primary logger.

        Does nothing if the primary logger has not been created yet.
        """
        logger = self._find_primary()
        if logger is None or not logger.is_enabled_for(level):
            return
        logger.handle(make_record(level, logger.get_name(), format_message(fmt, args)))

    def log_fatal(self, fmt: str, *args: object) -> None:
        self.log(LogLevel.FATAL, fmt, *args)

    def log_error(self, fmt: str, *args: object) -> None:
        self.log(LogLevel.ERROR, fmt, *args)

    def log_warning(self, fmt: str, *args: object) -> None:
        self.log(LogLevel.WARNING, fmt, *args)

    def log_info(self, fmt: str, *args: object) -> None:
        self.log(LogLevel.INFO, fmt, *args)

    def log_debug(self, fmt: str, *args: object) -> None:
        self.log(LogLevel.DEBUG, fmt, *args)
