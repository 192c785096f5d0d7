"""
Severity scale.

Smaller values are more severe. ``NOTSET`` is the largest value and is only
ever used as a filter threshold, where it admits everything.
"""

from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    FATAL = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    NOTSET = 5

    @property
    def word(self) -> str:
        """Upper-case name used in rendered lines."""
        return self.name

    @classmethod
    def from_name(cls, name: str) -> LogLevel:
        """Parse a level name, case-insensitive (``CRITICAL`` and ``WARN`` accepted)."""
        key = name.strip().upper()
        key = _NAME_ALIASES.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown log level: {name!r}") from None

    @classmethod
    def from_stdlib(cls, levelno: int) -> LogLevel:
        """Map a stdlib ``logging`` level number onto this scale."""
        if levelno >= logging.CRITICAL:
            return cls.FATAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG

    def to_stdlib(self) -> int:
        return _TO_STDLIB[self]


_NAME_ALIASES = {
    "CRITICAL": "FATAL",
    "WARN": "WARNING",
    "EXCEPTION": "ERROR",
}

_TO_STDLIB = {
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.NOTSET: logging.NOTSET,
}
