"""
Record formatters and color utilities.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal

import orjson

from .record import Record

LogFormat = Literal["console", "json"]

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# =============================================================================
# ANSI Color Codes
# =============================================================================

COLORS = {
    "reset": "\033[0m",
    "fatal": "\033[1;31m",
    "error": "\033[31m",
    "warning": "\033[33m",
    "info": "\033[32m",
    "debug": "\033[36m",
    "timestamp": "\033[90m",
    "logger": "\033[35m",
}


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Fast JSON serialization using orjson."""
    return orjson.dumps(v, default=default, option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC).decode()


# =============================================================================
# Formatters
# =============================================================================


class LineFormatter:
    """Renders ``<timestamp> <logger> <LEVEL> <message>`` without a trailing newline.

    The timestamp is the record's second-resolution time in local time.
    """

    def __init__(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT, *, use_color: bool = False):
        self.timestamp_format = timestamp_format
        self.use_color = use_color

    def format_timestamp(self, timestamp: int) -> str:
        return datetime.fromtimestamp(timestamp).strftime(self.timestamp_format)

    def _maybe_color(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return colorize(text, color)

    def format(self, record: Record) -> str:
        word = record.level.word
        parts = [
            self._maybe_color(self.format_timestamp(record.timestamp), "timestamp"),
            self._maybe_color(record.logger_name, "logger"),
            self._maybe_color(word, word.lower()),
        ]
        if record.message:
            parts.append(record.message)
        return " ".join(parts)


class JsonFormatter:
    """Renders a record as a single JSON object."""

    def format(self, record: Record) -> str:
        return orjson_dumps(
            {
                "timestamp": datetime.fromtimestamp(record.timestamp, tz=timezone.utc),
                "logger": record.logger_name,
                "level": record.level.word,
                "pid": record.process_id,
                "message": record.message,
            }
        )


def make_formatter(
    fmt: LogFormat = "console",
    *,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    use_color: bool = False,
) -> LineFormatter | JsonFormatter:
    if fmt == "json":
        return JsonFormatter()
    return LineFormatter(timestamp_format, use_color=use_color)
