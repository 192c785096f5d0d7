"""
Bridges from stdlib logging and structlog.
"""

from __future__ import annotations

import logging
import os

import pytest
import structlog

from harness_logging.handlers import StreamHandler
from harness_logging.interceptors import (
    LoggerRenderer,
    RedirectStdLibHandler,
    configure_structlog,
    intercept_stdlib,
)
from harness_logging.levels import LogLevel
from harness_logging.logger import Logger


@pytest.fixture
def target(buffer) -> Logger:
    logger = Logger("bridge", LogLevel.DEBUG)
    logger.add_handler(StreamHandler(buffer))
    return logger


@pytest.fixture
def std_logger():
    std = logging.getLogger("tests.interceptors")
    saved = (std.handlers[:], std.level, std.propagate)
    std.propagate = False
    yield std
    std.handlers = saved[0]
    std.setLevel(saved[1])
    std.propagate = saved[2]


class TestRedirectStdLibHandler:
    def test_forwards_formatted_message(self, target, std_logger, buffer) -> None:
        std_logger.handlers = [RedirectStdLibHandler(target)]
        std_logger.setLevel(logging.DEBUG)

        std_logger.warning("pool %s exhausted after %d tries", "main", 3)

        assert buffer.getvalue().endswith(" tests.interceptors WARNING pool main exhausted after 3 tries\n")

    @pytest.mark.parametrize(
        "method, word",
        [("critical", "FATAL"), ("error", "ERROR"), ("warning", "WARNING"), ("info", "INFO"), ("debug", "DEBUG")],
    )
    def test_level_mapping(self, target, std_logger, buffer, method, word) -> None:
        std_logger.handlers = [RedirectStdLibHandler(target)]
        std_logger.setLevel(logging.DEBUG)
        getattr(std_logger, method)("x")
        assert f" {word} x\n" in buffer.getvalue()

    def test_target_level_applies(self, target, std_logger, buffer) -> None:
        target.set_level(LogLevel.ERROR)
        std_logger.handlers = [RedirectStdLibHandler(target)]
        std_logger.setLevel(logging.DEBUG)

        std_logger.info("dropped")
        std_logger.error("kept")

        assert "dropped" not in buffer.getvalue()
        assert "kept" in buffer.getvalue()

    def test_write_failure_goes_to_handle_error(self, std_logger, monkeypatch) -> None:
        class Failing(StreamHandler):
            def emit(self, line: str) -> None:
                raise OSError("boom")

        target = Logger("bridge", LogLevel.NOTSET)
        target.add_handler(Failing())
        handler = RedirectStdLibHandler(target)
        seen = []
        monkeypatch.setattr(handler, "handleError", lambda record: seen.append(record.getMessage()))
        std_logger.handlers = [handler]
        std_logger.setLevel(logging.DEBUG)

        std_logger.error("lost")

        assert seen == ["lost"]

    def test_intercept_stdlib(self, target, std_logger, buffer) -> None:
        target.set_level(LogLevel.INFO)
        handler = intercept_stdlib(target, "tests.interceptors")

        assert std_logger.handlers == [handler]
        assert std_logger.level == logging.INFO
        std_logger.info("hello")
        assert buffer.getvalue().endswith("INFO hello\n")


class TestStructlog:
    def test_renderer(self, target, buffer) -> None:
        renderer = LoggerRenderer(target)
        result = renderer(None, "info", {"level": "info", "event": "user login", "user": "ada"})

        assert result == ""
        assert buffer.getvalue().endswith(" bridge INFO user login user=ada\n")

    def test_renderer_uses_bound_name(self, target, buffer) -> None:
        LoggerRenderer(target)(None, "error", {"event": "failed", "_name": "router.pool"})
        assert " router.pool ERROR failed\n" in buffer.getvalue()

    def test_configure_structlog(self, target, buffer, reset_structlog) -> None:
        configure_structlog(target)
        log = structlog.get_logger()

        log.info("connected", port=6446)
        log.debug("details")
        log.critical("meltdown")

        lines = buffer.getvalue().splitlines()
        assert lines[0].endswith(" bridge INFO connected port=6446")
        assert lines[1].endswith(" bridge DEBUG details")
        assert lines[2].endswith(" bridge FATAL meltdown")
        assert len(lines) == 3

    def test_configure_structlog_filters(self, target, buffer, reset_structlog) -> None:
        target.set_level(LogLevel.WARNING)
        configure_structlog(target)
        log = structlog.get_logger()

        log.info("quiet")
        log.warning("loud")

        assert buffer.getvalue().count("\n") == 1
        assert "loud" in buffer.getvalue()

    def test_record_carries_pid(self, buffer) -> None:
        import orjson

        from harness_logging.formatters import JsonFormatter

        target = Logger("bridge", LogLevel.NOTSET)
        target.add_handler(StreamHandler(buffer, formatter=JsonFormatter()))
        LoggerRenderer(target)(None, "info", {"event": "e"})
        assert orjson.loads(buffer.getvalue())["pid"] == os.getpid()


class TestInterceptStdlibLevels:
    def test_notset_target_admits_info_on_named_logger(self, buffer, std_logger) -> None:
        """A NOTSET target must not fall back to the parent's WARNING level"""
        target = Logger("bridge", LogLevel.NOTSET)
        target.add_handler(StreamHandler(buffer))

        intercept_stdlib(target, "tests.interceptors")

        assert std_logger.level == logging.DEBUG
        std_logger.info("passes through")
        std_logger.debug("also passes")
        assert "INFO passes through\n" in buffer.getvalue()
        assert "DEBUG also passes\n" in buffer.getvalue()
