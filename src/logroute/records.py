"""Log event and published-record types.

All records are frozen dataclasses: sinks build them, endpoints publish them,
nothing mutates them afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

NANOSECONDS_PER_SECOND = 1_000_000_000


class Severity(IntEnum):
    """Severity levels. Numerically aligned with the stdlib ``logging`` levels."""

    UNSET = 0
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50

    @classmethod
    def parse(cls, value: int | str) -> int:
        """Accept an int, a digit string, or a level name (``"info"``, ``"warning"``)."""
        if isinstance(value, int):
            return value
        text = value.strip()
        if text.lstrip("-").isdigit():
            return int(text)
        key = text.upper()
        if key == "WARNING":
            key = "WARN"
        elif key == "CRITICAL":
            key = "FATAL"
        try:
            return int(cls[key])
        except KeyError:
            raise ValueError(f"Unknown severity: {value!r}") from None


def severity_label(severity: int) -> str:
    try:
        return Severity(severity).name
    except ValueError:
        return str(severity)


@dataclass(frozen=True)
class LogLocation:
    file: str
    function: str
    line: int


@dataclass(frozen=True)
class Time:
    sec: int
    nanosec: int


@dataclass(frozen=True)
class LogMessage:
    stamp: Time
    level: int
    name: str
    msg: str
    file: str = ""
    function: str = ""
    line: int = 0


def split_timestamp(timestamp_ns: int) -> Time:
    """Split nanoseconds since the epoch into (sec, nanosec).

    Floors towards negative infinity so ``nanosec`` always lands in
    ``[0, 1e9)``, including for pre-epoch timestamps.
    """
    sec, nanosec = divmod(timestamp_ns, NANOSECONDS_PER_SECOND)
    return Time(sec=sec, nanosec=nanosec)


def build_log_message(
    location: LogLocation | None,
    severity: int,
    name: str,
    timestamp_ns: int,
    message: str,
) -> LogMessage:
    if location is None:
        file, function, line = "", "", 0
    else:
        file, function, line = location.file or "", location.function or "", location.line
    return LogMessage(
        stamp=split_timestamp(timestamp_ns),
        level=int(severity),
        name=name,
        msg=message,
        file=file,
        function=function,
        line=line,
    )
