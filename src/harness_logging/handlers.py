"""
Handler abstractions and concrete implementations.

A handler owns its own level filter: a record is written iff
``record.level <= handler.level``. Every admitted record is rendered and
written as one newline-terminated line, then flushed, while the handler's lock
is held, so lines from concurrent callers never interleave.
"""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Protocol

from .exceptions import HandlerOpenError
from .formatters import LineFormatter
from .levels import LogLevel
from .record import Record


class Formatter(Protocol):
    def format(self, record: Record) -> str: ...


# =============================================================================
# Handler Abstraction (Strategy Pattern)
# =============================================================================


class BaseHandler(ABC):
    """Abstract base class for handlers."""

    def __init__(self, level: LogLevel = LogLevel.NOTSET, formatter: Formatter | None = None):
        self.level = level
        self.formatter = formatter or LineFormatter()
        self._lock = threading.Lock()

    def admits(self, record: Record) -> bool:
        return record.level <= self.level

    def format(self, record: Record) -> str:
        return self.formatter.format(record) + "\n"

    def handle(self, record: Record) -> None:
        """Write the record if it passes this handler's filter.

        Sink errors propagate to the caller.
        """
        if not self.admits(record):
            return
        line = self.format(record)
        with self._lock:
            self.emit(line)

    @abstractmethod
    def emit(self, line: str) -> None:
        """Write one rendered line to the sink. Called with the lock held."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release resources owned by the handler."""
        ...


class StreamHandler(BaseHandler):
    """Writes to an already open text stream.

    The stream is borrowed: ``close`` leaves it open.

    Args:
        stream: Writable text stream (default: stderr)
        level: Handler threshold
        formatter: Record formatter (default: ``LineFormatter``)
    """

    def __init__(
        self,
        stream: Any = None,
        level: LogLevel = LogLevel.NOTSET,
        formatter: Formatter | None = None,
    ):
        super().__init__(level, formatter)
        self._stream = stream or sys.stderr

    @property
    def stream(self) -> Any:
        return self._stream

    def emit(self, line: str) -> None:
        self._stream.write(line)
        self._stream.flush()

    def close(self) -> None:
        pass


class FileHandler(BaseHandler):
    """Appends to a file it opens at construction and owns until ``close``."""

    def __init__(
        self,
        path: str | Path,
        level: LogLevel = LogLevel.NOTSET,
        formatter: Formatter | None = None,
    ):
        super().__init__(level, formatter)
        self._path = Path(path)
        try:
            self._file = open(self._path, "a", encoding="utf-8")
        except OSError as exc:
            raise HandlerOpenError(path=str(self._path), reason=exc.strerror or str(exc)) from exc

    @property
    def path(self) -> Path:
        return self._path

    def emit(self, line: str) -> None:
        self._file.write(line)
        self._file.flush()

    def close(self) -> None:
        with self._lock:
            self._file.close()
