"""Tests for the process-wide output slot and the stdlib logging bridge."""

from __future__ import annotations

import logging

import pytest

from logroute import output
from logroute.records import LogLocation, Severity
from logroute.sinks import ConsoleSink


class Capture:
    def __init__(self) -> None:
        self.events: list[tuple] = []

    def __call__(self, location, severity, name, timestamp_ns, message) -> None:
        self.events.append((location, severity, name, timestamp_ns, message))


@pytest.fixture
def capture() -> Capture:
    cap = Capture()
    output.set_output_handler(cap)
    return cap


class TestOutputSlot:
    def test_console_is_default(self):
        assert isinstance(output.get_output_handler(), ConsoleSink)

    def test_log_reaches_installed_handler(self, capture):
        loc = LogLocation("a.py", "f", 3)
        output.log(Severity.WARN, "nav", "hello", location=loc, timestamp_ns=42)
        assert capture.events == [(loc, Severity.WARN, "nav", 42, "hello")]

    def test_log_stamps_current_time(self, capture):
        output.log(Severity.INFO, "nav", "hello")
        [(_, _, _, ts, _)] = capture.events
        assert ts > 1_600_000_000 * 1_000_000_000

    def test_threshold_filters(self, capture):
        output.set_default_severity(Severity.WARN)
        output.log(Severity.INFO, "nav", "dropped")
        output.log(Severity.ERROR, "nav", "kept")
        assert [e[4] for e in capture.events] == ["kept"]

    def test_handler_exception_is_contained(self):
        def broken(*args):
            raise RuntimeError("boom")

        output.set_output_handler(broken)
        output.log(Severity.INFO, "nav", "hello")

    def test_use_console_handler(self, capture):
        output.use_console_handler()
        assert isinstance(output.get_output_handler(), ConsoleSink)

    def test_reset(self, capture):
        output.set_default_severity(Severity.FATAL)
        output.reset()
        assert output.get_default_severity() == Severity.INFO
        assert isinstance(output.get_output_handler(), ConsoleSink)


class TestLogRouteHandler:
    @pytest.fixture
    def app_logger(self):
        logger = logging.getLogger("robot.nav")
        handler = output.LogRouteHandler()
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        yield logger
        logger.removeHandler(handler)
        logger.propagate = True

    def test_stdlib_record_is_routed(self, capture, app_logger):
        app_logger.warning("obstacle at %d m", 3)
        [(location, severity, name, ts, message)] = capture.events
        assert severity == Severity.WARN
        assert name == "robot.nav"
        assert message == "obstacle at 3 m"
        assert location.function == "test_stdlib_record_is_routed"
        assert location.file.endswith("test_output.py")
        assert ts > 0

    def test_logroute_namespace_is_skipped(self, capture):
        logger = logging.getLogger("logroute.registry")
        handler = output.LogRouteHandler()
        logger.addHandler(handler)
        try:
            logger.error("diagnostic")
        finally:
            logger.removeHandler(handler)
        assert capture.events == []
