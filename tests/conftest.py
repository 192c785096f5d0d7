import io
import os
import time

import pytest
import structlog

from harness_logging import api
from harness_logging.context import LoggingContext
from harness_logging.levels import LogLevel
from harness_logging.logger import Logger
from harness_logging.record import Record


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def logger() -> Logger:
    """Detached logger admitting everything, handlers decide."""
    return Logger("my_module", LogLevel.NOTSET)


@pytest.fixture
def new_record():
    """Factory for records stamped with this process and a fixed time."""
    now = int(time.time())

    def _make(level: LogLevel = LogLevel.INFO, message: str = "Message", timestamp: int = now) -> Record:
        return Record(
            level=level,
            process_id=os.getpid(),
            timestamp=timestamp,
            logger_name="my_module",
            message=message,
        )

    return _make


@pytest.fixture
def context() -> LoggingContext:
    return LoggingContext("my_domain")


@pytest.fixture(autouse=True)
def isolate_default_context():
    """
    Give every test its own default context so module-level
    create_logger/log_* calls never leak between tests.
    """
    previous = api.set_context(LoggingContext("my_domain"))
    yield
    api.set_context(previous)


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()
