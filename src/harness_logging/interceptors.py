"""
Interceptors routing stdlib ``logging`` and structlog events into a Logger.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

from .levels import LogLevel
from .logger import Logger
from .record import Record, make_record


class RedirectStdLibHandler(logging.Handler):
    """
    Redirect standard library logging events to a harness Logger.

    The stdlib record keeps its own logger name, process id and creation
    time; its level is mapped with ``LogLevel.from_stdlib``.
    """

    def __init__(self, target: Logger, level: int = logging.NOTSET):
        super().__init__(level)
        self._target = target

    @property
    def target(self) -> Logger:
        return self._target

    def emit(self, record: logging.LogRecord) -> None:
        try:
            # Format message using stdlib's formatting (handles %s args)
            msg = self.format(record)
            self._target.handle(
                Record(
                    level=LogLevel.from_stdlib(record.levelno),
                    process_id=record.process or os.getpid(),
                    timestamp=int(record.created),
                    logger_name=record.name,
                    message=msg,
                )
            )
        except Exception:
            self.handleError(record)


def intercept_stdlib(target: Logger, name: str | None = None) -> RedirectStdLibHandler:
    """Replace the handlers of a stdlib logger (root by default) with a redirect to ``target``."""
    std_logger = logging.getLogger(name)
    handler = RedirectStdLibHandler(target)
    std_logger.handlers = [handler]
    # stdlib NOTSET on a named logger defers to the parent level
    std_logger.setLevel(target.get_level().to_stdlib() or logging.DEBUG)
    return handler


# =============================================================================
# Structlog
# =============================================================================

EXCLUDED_KEYS = {"level", "event", "_name", "logger"}


class LoggerRenderer:
    """Final structlog processor: turn the event dict into a Record for ``target``.

    Keys other than the level, event and logger name are appended to the
    message as ``key=value`` text.
    """

    def __init__(self, target: Logger):
        self._target = target

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        level = LogLevel.from_name(str(event_dict.get("level", method_name)))
        name = event_dict.get("_name") or event_dict.get("logger") or self._target.get_name()
        message = str(event_dict.get("event", ""))

        extras = [f"{k}={v}" for k, v in event_dict.items() if k not in EXCLUDED_KEYS]
        if extras:
            message = f"{message} " + " ".join(extras)

        self._target.handle(make_record(level, str(name), message))
        return ""


class _NopFile:
    def write(self, s: str) -> None:
        pass

    def flush(self) -> None:
        pass


_NOP_FILE = _NopFile()


class SilentPrintLoggerFactory:
    """Logger factory that returns a logger writing to nowhere."""

    def __call__(self, *args: Any) -> structlog.PrintLogger:
        return structlog.PrintLogger(file=_NOP_FILE)


def configure_structlog(target: Logger) -> None:
    """Route every structlog logger into ``target``.

    Events below the target's level at configuration time are dropped by the
    bound logger before any processor runs.
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            LoggerRenderer(target),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(target.get_level().to_stdlib()),
        context_class=dict,
        logger_factory=SilentPrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
