"""
Bootstrap of the primary logger from ``LoggingSettings``.
"""

from __future__ import annotations

import sys
import weakref

from .api import get_context
from .config import LoggingSettings, settings as default_settings
from .context import LoggingContext
from .exceptions import DuplicateLoggerError
from .formatters import make_formatter
from .handlers import BaseHandler, FileHandler, StreamHandler
from .logger import Logger

# Handlers created by configure_logging, per context. Only these are closed on reconfigure.
_owned_handlers: weakref.WeakKeyDictionary[LoggingContext, list[BaseHandler]] = weakref.WeakKeyDictionary()


def _build_handlers(settings: LoggingSettings, stream) -> list[BaseHandler]:
    """Create one handler per configured sink name. Unknown names are rejected."""
    handlers: list[BaseHandler] = []
    for name in settings.sink_names:
        if name == "stdio":
            use_color = settings.color and bool(getattr(stream, "isatty", lambda: False)())
            formatter = make_formatter(
                settings.format.value,
                timestamp_format=settings.timestamp_format,
                use_color=use_color,
            )
            handlers.append(StreamHandler(stream, formatter=formatter))
        elif name == "file":
            formatter = make_formatter(settings.format.value, timestamp_format=settings.timestamp_format)
            handlers.append(FileHandler(settings.file_path, formatter=formatter))
        else:
            for handler in handlers:
                handler.close()
            raise ValueError(f"Unknown log sink: {name!r}")
    return handlers


def configure_logging(
    settings: LoggingSettings | None = None,
    *,
    context: LoggingContext | None = None,
    stream=None,
) -> Logger:
    """
    Configure the primary logger of a context.

    The primary logger is created if missing, otherwise its current handlers
    are detached. Handlers created by an earlier call are closed unless another
    registered logger still uses them; handlers attached by other code are
    left open. Its level is set from the settings and one handler
    is attached per configured sink.

    Args:
        settings: Logging settings (default: the ``HL_LOG_*`` environment)
        context: Target context (default: the module-level default context)
        stream: Stream for the stdio sink (default: stderr)

    Returns:
        The primary logger.
    """
    settings = settings or default_settings
    context = context or get_context()
    handlers = _build_handlers(settings, stream or sys.stderr)

    try:
        logger = context.create_logger(context.primary_name)
    except DuplicateLoggerError:
        logger = context.primary
        for handler in logger.handlers:
            logger.remove_handler(handler)
        _close_owned(context)

    logger.set_level(settings.log_level)
    for handler in handlers:
        logger.add_handler(handler)
    _owned_handlers[context] = handlers
    return logger


def _close_owned(context: LoggingContext) -> None:
    owned = _owned_handlers.pop(context, [])
    in_use = {id(handler) for logger in context.registered() for handler in logger.handlers}
    for handler in owned:
        if id(handler) not in in_use:
            handler.close()
