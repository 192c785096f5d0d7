"""
Error taxonomy for the logging facility.

Configuration errors leave the registry untouched. Resource errors are raised
while constructing a handler, so no half-built handler is ever returned.
Write-time I/O errors are not wrapped: the sink's own ``OSError`` reaches the
caller of the logging call.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class LoggingError(Exception):
    """Root of all errors raised by harness_logging."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


# ================================
# Configuration errors
# ================================


class ConfigurationError(LoggingError):
    """The registry was asked for something inconsistent with its contents."""

    pass


class DuplicateLoggerError(ConfigurationError):
    """A logger with this name is already registered."""

    def __init__(self, *, name: str) -> None:
        super().__init__(
            f"Logger '{name}' already exists",
            code="DUPLICATE_LOGGER",
            details={"name": name},
        )
        self.name = name


class LoggerNotFoundError(ConfigurationError):
    """No logger with this name is registered."""

    def __init__(self, *, name: str) -> None:
        super().__init__(
            f"Logger '{name}' not found",
            code="LOGGER_NOT_FOUND",
            details={"name": name},
        )
        self.name = name


# ================================
# Resource errors
# ================================


class ResourceError(LoggingError):
    pass


class HandlerOpenError(ResourceError):
    """A file handler could not open its target for append."""

    def __init__(self, *, path: str, reason: str) -> None:
        super().__init__(
            f"Cannot open log file '{path}': {reason}",
            code="HANDLER_OPEN_FAILED",
            details={"path": path, "reason": reason},
        )
        self.path = path
