"""Diagnostics logging for logroute itself.

A LogFormatter (structlog or stdlib JSON) decides how records look, a
LogDestination (stderr or a JSONL file) decides where they go.
setup_logging() pairs the two from ObservabilityConfig and hangs the
resulting handler on the ``logroute`` logger. Records keep propagating, so
an application's root handlers and pytest's caplog see them too.

Every logger handed out here lives under ``logroute``. The stdlib bridge in
logroute.output skips that namespace, so diagnostics never re-enter the
dispatch chain they describe.

Extra formatters or destinations can be added by name:

    from logroute.observe.logging import register_destination
    register_destination("syslog", MySyslogDestination)
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from logroute.observe.config import ObservabilityConfig

ROOT_LOGGER_NAME = "logroute"


@runtime_checkable
class LogFormatter(Protocol):
    """setup() returns the logging.Formatter handlers use; get_logger() a kwargs-style logger."""

    def setup(self, config: ObservabilityConfig) -> logging.Formatter: ...

    def get_logger(self, name: str, **kwargs: Any) -> Any: ...


@runtime_checkable
class LogDestination(Protocol):
    def create_handler(self, formatter: logging.Formatter) -> logging.Handler: ...

    def shutdown(self) -> None: ...


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


class StructlogFormatter:
    """structlog processors rendered through the stdlib handler chain."""

    def setup(self, config: ObservabilityConfig) -> logging.Formatter:
        import structlog

        if config.log_format == "console":
            renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
        else:
            renderer = structlog.processors.JSONRenderer()

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.format_exc_info,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )
        return structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )

    def get_logger(self, name: str, **kwargs: Any) -> Any:
        import structlog

        return structlog.get_logger(name, **kwargs)


class StdlibFormatter:
    """One JSON object per record, or a plain line for log_format=console."""

    def setup(self, config: ObservabilityConfig) -> logging.Formatter:
        if config.log_format == "console":
            return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        return _JsonFormatter()

    def get_logger(self, name: str, **kwargs: Any) -> Any:
        return _KeywordLogger(logging.getLogger(name))


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        out: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
            **getattr(record, "fields", {}),
        }
        return json.dumps(out, default=str)


class _KeywordLogger:
    """stdlib logger taking ``logger.info("event", key=value)``.

    Keyword fields travel on the record as ``fields`` for _JsonFormatter.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _log(self, level: int, event: str, fields: dict[str, Any]) -> None:
        self._logger.log(level, event, extra={"fields": fields}, stacklevel=3)

    def debug(self, event: str, **fields: Any) -> None:
        self._log(logging.DEBUG, event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._log(logging.INFO, event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._log(logging.WARNING, event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._log(logging.ERROR, event, fields)


# ---------------------------------------------------------------------------
# Destinations
# ---------------------------------------------------------------------------


class StderrDestination:
    def create_handler(self, formatter: logging.Formatter) -> logging.Handler:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        return handler

    def shutdown(self) -> None:
        pass


class JsonlFileDestination:
    """Append diagnostics to ``log_path`` (default ./logroute.jsonl)."""

    def __init__(self, config: ObservabilityConfig) -> None:
        self._path = Path(config.log_path or "logroute.jsonl")
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._handler: logging.Handler | None = None

    def create_handler(self, formatter: logging.Formatter) -> logging.Handler:
        self._handler = logging.FileHandler(str(self._path), mode="a", encoding="utf-8")
        self._handler.setFormatter(formatter)
        return self._handler

    def shutdown(self) -> None:
        if self._handler is not None:
            self._handler.close()
            self._handler = None


_FORMATTERS: dict[str, type] = {
    "structlog": StructlogFormatter,
    "stdlib": StdlibFormatter,
}

_DESTINATIONS: dict[str, type] = {
    "stderr": StderrDestination,
    "jsonl": JsonlFileDestination,
}


def register_formatter(name: str, cls: type) -> None:
    _FORMATTERS[name] = cls


def register_destination(name: str, cls: type) -> None:
    _DESTINATIONS[name] = cls


# ---------------------------------------------------------------------------
# Module state
# ---------------------------------------------------------------------------

_active_formatter: LogFormatter | None = None
_active_destination: LogDestination | None = None
_active_handler: logging.Handler | None = None


def _lookup(table: dict[str, type], kind: str, name: str) -> type:
    try:
        return table[name]
    except KeyError:
        raise ValueError(f"Unknown log {kind}: {name!r}. Available: {list(table)}") from None


def setup_logging(config: ObservabilityConfig) -> None:
    """Build the handler for ``config`` and swap it onto the logroute logger."""
    global _active_formatter, _active_destination, _active_handler

    formatter = _lookup(_FORMATTERS, "formatter", config.log_formatter)()
    dest_cls = _lookup(_DESTINATIONS, "destination", config.log_destination)
    destination = dest_cls(config) if dest_cls is JsonlFileDestination else dest_cls()

    handler = destination.create_handler(formatter.setup(config))

    shutdown_logging()

    lib_logger = logging.getLogger(ROOT_LOGGER_NAME)
    lib_logger.addHandler(handler)
    lib_logger.setLevel(getattr(logging, config.log_level.upper(), logging.WARNING))

    _active_formatter = formatter
    _active_destination = destination
    _active_handler = handler


def get_logger(name: str = ROOT_LOGGER_NAME, **kwargs: Any) -> Any:
    """Diagnostics logger for ``name``, nested under ``logroute`` if it is not already.

    Before setup_logging() this is a plain stdlib logger that still takes
    keyword fields.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}" if name else ROOT_LOGGER_NAME
    if _active_formatter is not None:
        return _active_formatter.get_logger(name, **kwargs)
    return _KeywordLogger(logging.getLogger(name))


def shutdown_logging() -> None:
    global _active_formatter, _active_destination, _active_handler

    if _active_handler is not None:
        logging.getLogger(ROOT_LOGGER_NAME).removeHandler(_active_handler)
        _active_handler.close()
    if _active_destination is not None:
        _active_destination.shutdown()
    _active_formatter = None
    _active_destination = None
    _active_handler = None
