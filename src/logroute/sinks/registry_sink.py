"""Registry sink: route an event to the endpoint registered for its logger."""

from __future__ import annotations

from logroute.observe.logging import get_logger
from logroute.records import LogLocation, build_log_message
from logroute.registry import LoggerRegistry


class RegistrySink:
    """Publish a LogMessage through the endpoint registered under ``logger_name``.

    Events for loggers without an endpoint are dropped silently. Publish
    failures are logged and swallowed.
    """

    name = "registry"

    def __init__(self, registry: LoggerRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> LoggerRegistry:
        return self._registry

    def __call__(
        self,
        location: LogLocation | None,
        severity: int,
        logger_name: str,
        timestamp_ns: int,
        message: str,
    ) -> None:
        entry = self._registry.lookup(logger_name)
        if entry is None:
            return
        try:
            record = build_log_message(location, severity, logger_name, timestamp_ns, message)
            entry.endpoint.publish(record)
        except Exception as exc:
            get_logger("logroute.sinks").debug(
                "registry.publish_failed", logger_name=logger_name, error=str(exc)
            )
