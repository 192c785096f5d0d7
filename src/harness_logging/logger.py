"""
Named logger: a level filter in front of an ordered list of handlers.
"""

from __future__ import annotations

import threading

from .handlers import BaseHandler
from .levels import LogLevel
from .record import Record, format_message, make_record

DEFAULT_LEVEL = LogLevel.WARNING


class Logger:
    """Dispatch point for records.

    A record reaches a handler iff ``record.level <= min(logger.level, handler.level)``.
    The logger checks its own level first and only then offers the record to
    each handler in the order they were added.

    The handler list is replaced, never mutated in place, so ``handle`` can
    iterate a snapshot without holding the lock while writing.
    """

    def __init__(self, name: str, level: LogLevel = DEFAULT_LEVEL):
        self._name = name
        self._level = level
        self._handlers: tuple[BaseHandler, ...] = ()
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"<Logger {self._name} ({self._level.name})>"

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    def get_level(self) -> LogLevel:
        return self._level

    def set_level(self, level: LogLevel) -> None:
        self._level = LogLevel(level)

    level = property(get_level, set_level)

    @property
    def handlers(self) -> tuple[BaseHandler, ...]:
        return self._handlers

    def add_handler(self, handler: BaseHandler) -> None:
        """Append a handler. The same handler may be added more than once."""
        with self._lock:
            self._handlers = self._handlers + (handler,)

    def remove_handler(self, handler: BaseHandler) -> None:
        """Detach every attachment of ``handler``. No-op if it is not attached."""
        with self._lock:
            self._handlers = tuple(h for h in self._handlers if h is not handler)

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level <= self._level

    def handle(self, record: Record) -> None:
        if not self.is_enabled_for(record.level):
            return
        for handler in self._handlers:
            handler.handle(record)

    # -------------------------------------------------------------------------
    # Convenience emitters
    # -------------------------------------------------------------------------

    def log(self, level: LogLevel, msg: str, *args: object) -> None:
        """Format ``msg % args`` and dispatch it as a record from this logger."""
        if not self.is_enabled_for(level):
            return
        self.handle(make_record(level, self._name, format_message(msg, args)))

    def fatal(self, msg: str, *args: object) -> None:
        self.log(LogLevel.FATAL, msg, *args)

    def error(self, msg: str, *args: object) -> None:
        self.log(LogLevel.ERROR, msg, *args)

    def warning(self, msg: str, *args: object) -> None:
        self.log(LogLevel.WARNING, msg, *args)

    def info(self, msg: str, *args: object) -> None:
        self.log(LogLevel.INFO, msg, *args)

    def debug(self, msg: str, *args: object) -> None:
        self.log(LogLevel.DEBUG, msg, *args)
