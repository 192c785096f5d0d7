"""
Module-level functional API over a default ``LoggingContext``.

The default context is created lazily from ``settings.primary_name`` the first
time it is needed. Tests and embedding applications may swap it with
``set_context``.
"""

from __future__ import annotations

import threading

from .config import settings
from .context import LoggingContext
from .handlers import BaseHandler
from .levels import LogLevel
from .logger import Logger

_context: LoggingContext | None = None
_context_lock = threading.Lock()


def get_context() -> LoggingContext:
    global _context
    with _context_lock:
        if _context is None:
            _context = LoggingContext(settings.primary_name)
        return _context


def set_context(context: LoggingContext | None) -> LoggingContext | None:
    """Replace the default context and return the previous one.

    ``None`` drops it; the next call recreates it from settings.
    """
    global _context
    with _context_lock:
        previous, _context = _context, context
        return previous


def create_logger(name: str, level: LogLevel | None = None) -> Logger:
    return get_context().create_logger(name, level)


def remove_logger(name: str) -> None:
    get_context().remove_logger(name)


def get_logger(name: str | None = None) -> Logger:
    """Get a registered logger, the primary logger when ``name`` is omitted."""
    context = get_context()
    return context.get_logger(name if name is not None else context.primary_name)


def register_handler(handler: BaseHandler) -> None:
    get_context().register_handler(handler)


def unregister_handler(handler: BaseHandler) -> None:
    get_context().unregister_handler(handler)


def set_log_level(level: LogLevel) -> None:
    get_context().set_log_level(level)


def log_fatal(fmt: str, *args: object) -> None:
    get_context().log_fatal(fmt, *args)


def log_error(fmt: str, *args: object) -> None:
    get_context().log_error(fmt, *args)


def log_warning(fmt: str, *args: object) -> None:
    get_context().log_warning(fmt, *args)


def log_info(fmt: str, *args: object) -> None:
    get_context().log_info(fmt, *args)


def log_debug(fmt: str, *args: object) -> None:
    get_context().log_debug(fmt, *args)
