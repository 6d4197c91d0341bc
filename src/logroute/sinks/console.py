"""Console sink: one formatted line per event."""

from __future__ import annotations

import sys
from typing import TextIO

from logroute.observe.logging import get_logger
from logroute.records import LogLocation, severity_label, split_timestamp

DEFAULT_FORMAT = "[{severity}] [{sec}.{nanosec:09d}] [{name}]: {message}"


class ConsoleSink:
    """Write ``[SEVERITY] [sec.nanosec] [name]: message`` lines.

    Writes to ``sys.stdout`` looked up at call time unless a stream is given.
    """

    name = "console"

    def __init__(self, stream: TextIO | None = None, fmt: str = DEFAULT_FORMAT) -> None:
        self._stream = stream
        self._fmt = fmt

    def format(
        self,
        location: LogLocation | None,
        severity: int,
        logger_name: str,
        timestamp_ns: int,
        message: str,
    ) -> str:
        stamp = split_timestamp(timestamp_ns)
        return self._fmt.format(
            severity=severity_label(severity),
            sec=stamp.sec,
            nanosec=stamp.nanosec,
            name=logger_name,
            message=message,
            file=location.file if location else "",
            function=location.function if location else "",
            line=location.line if location else 0,
        )

    def __call__(
        self,
        location: LogLocation | None,
        severity: int,
        logger_name: str,
        timestamp_ns: int,
        message: str,
    ) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        try:
            stream.write(self.format(location, severity, logger_name, timestamp_ns, message) + "\n")
            stream.flush()
        except Exception as exc:
            get_logger("logroute.sinks").debug("console.write_failed", error=str(exc))
