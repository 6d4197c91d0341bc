"""External sink: hand the event to a third-party logging backend."""

from __future__ import annotations

from logroute.backends import ExternalBackend
from logroute.observe.logging import get_logger
from logroute.records import LogLocation


class ExternalSink:
    """Forward ``(severity, logger_name, message)`` to an ExternalBackend."""

    name = "external"

    def __init__(self, backend: ExternalBackend) -> None:
        self._backend = backend

    def __call__(
        self,
        location: LogLocation | None,
        severity: int,
        logger_name: str,
        timestamp_ns: int,
        message: str,
    ) -> None:
        try:
            self._backend.log(severity, logger_name, message)
        except Exception as exc:
            get_logger("logroute.sinks").debug(
                "external.log_failed", logger_name=logger_name, error=str(exc)
            )
