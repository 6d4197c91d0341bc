"""Process-wide output slot: the one handler every log event goes through.

    log(severity, name, message)   - timestamp an event and hand it to the handler
    set_output_handler(handler)    - install a handler (the router installs its chain)
    use_console_handler()          - fall back to the plain console sink
    set_default_severity(level)    - events below this are dropped before dispatch

LogRouteHandler bridges stdlib ``logging`` into the same slot, so existing
``logging.getLogger(...)`` call sites are routed without code changes.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from logroute.observe.logging import ROOT_LOGGER_NAME, get_logger
from logroute.records import LogLocation, Severity
from logroute.sinks.console import ConsoleSink

OutputHandler = Callable[[LogLocation | None, int, str, int, str], None]

_console: ConsoleSink = ConsoleSink()
_handler: OutputHandler = _console
_default_severity: int = Severity.INFO


def get_output_handler() -> OutputHandler:
    return _handler


def set_output_handler(handler: OutputHandler) -> None:
    global _handler
    _handler = handler


def use_console_handler() -> None:
    set_output_handler(_console)


def get_default_severity() -> int:
    return _default_severity


def set_default_severity(level: int) -> None:
    global _default_severity
    _default_severity = int(level)


def is_enabled_for(severity: int) -> bool:
    return severity >= _default_severity


def log(
    severity: int,
    name: str,
    message: str,
    location: LogLocation | None = None,
    timestamp_ns: int | None = None,
) -> None:
    """Emit one event through the installed handler. Never raises."""
    if not is_enabled_for(severity):
        return
    if timestamp_ns is None:
        timestamp_ns = time.time_ns()
    try:
        _handler(location, severity, name, timestamp_ns, message)
    except Exception as exc:
        get_logger("logroute.output").debug("output.handler_failed", logger_name=name, error=str(exc))


def reset() -> None:
    """Reset for testing."""
    global _handler, _default_severity
    _handler = _console
    _default_severity = Severity.INFO


class LogRouteHandler(logging.Handler):
    """stdlib ``logging`` handler feeding records into the output slot.

    Records from the ``logroute`` namespace (diagnostics and the stdlib
    backend) are skipped so they never loop back into dispatch.
    """

    def emit(self, record: logging.LogRecord) -> None:
        if record.name == ROOT_LOGGER_NAME or record.name.startswith(ROOT_LOGGER_NAME + "."):
            return
        try:
            location = LogLocation(
                file=record.pathname,
                function=record.funcName or "",
                line=record.lineno,
            )
            log(
                record.levelno,
                record.name,
                record.getMessage(),
                location=location,
                timestamp_ns=int(record.created * 1_000_000_000),
            )
        except Exception:
            self.handleError(record)
