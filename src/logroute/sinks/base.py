"""Sink protocol: one side effect per log event."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from logroute.records import LogLocation


@runtime_checkable
class Sink(Protocol):
    """Consumes a log event. Never raises to the caller."""

    name: str

    def __call__(
        self,
        location: LogLocation | None,
        severity: int,
        logger_name: str,
        timestamp_ns: int,
        message: str,
    ) -> None: ...
