"""Dispatch chain: fan one log event out to an ordered, bounded set of sinks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from logroute.observe.emitter import emit
from logroute.observe.events import SinkFailed
from logroute.records import LogLocation
from logroute.sinks.base import Sink

MAX_SINKS = 4


class DispatchChain:
    """Immutable ordered sink list. Rebuilt, never edited, on reconfiguration.

    Every sink runs for every event. Sinks are expected to swallow their own
    errors; anything that still escapes one is reported and the remaining
    sinks run anyway.
    """

    def __init__(self, sinks: Iterable[Sink] = (), max_sinks: int = MAX_SINKS) -> None:
        sinks = tuple(sinks)
        if len(sinks) > max_sinks:
            raise ValueError(f"Dispatch chain holds at most {max_sinks} sinks, got {len(sinks)}")
        self._sinks = sinks

    @property
    def sinks(self) -> tuple[Sink, ...]:
        return self._sinks

    def names(self) -> tuple[str, ...]:
        return tuple(getattr(s, "name", type(s).__name__) for s in self._sinks)

    def __len__(self) -> int:
        return len(self._sinks)

    def __iter__(self) -> Iterator[Sink]:
        return iter(self._sinks)

    def __call__(
        self,
        location: LogLocation | None,
        severity: int,
        logger_name: str,
        timestamp_ns: int,
        message: str,
    ) -> None:
        for sink in self._sinks:
            try:
                sink(location, severity, logger_name, timestamp_ns, message)
            except Exception as exc:
                emit(
                    SinkFailed(
                        sink=getattr(sink, "name", type(sink).__name__),
                        logger_name=logger_name,
                        error=str(exc),
                    )
                )

    def __repr__(self) -> str:
        return f"DispatchChain({', '.join(self.names())})"
