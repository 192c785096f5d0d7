"""
The immutable value carried from an emitter to the handlers.
"""

from __future__ import annotations

import os
import time
from dataclasses import dataclass

from .levels import LogLevel


@dataclass(frozen=True)
class Record:
    """One log event.

    Created once per log call and handed to exactly one ``Logger.handle``.
    Handlers may render it any number of times but never change it.
    """

    level: LogLevel
    process_id: int
    timestamp: int  # seconds since the epoch
    logger_name: str
    message: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", LogLevel(self.level))


def make_record(level: LogLevel, logger_name: str, message: str) -> Record:
    """Build a record stamped with the current process id and time."""
    return Record(
        level=level,
        process_id=os.getpid(),
        timestamp=int(time.time()),
        logger_name=logger_name,
        message=message,
    )


def format_message(template: str, args: tuple) -> str:
    """Expand a printf-style template. Without args the template is kept verbatim."""
    if not args:
        return template
    return template % args
