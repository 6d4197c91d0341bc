"""ExternalBackend protocol: a third-party logging library behind the external sink."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ExternalBackend(Protocol):
    """Strategy: where the external sink forwards events.

    initialize() and shutdown() raise BackendError on failure. log() is on
    the hot path; the sink swallows anything it raises.
    """

    def initialize(self, config_path: str | None) -> None: ...

    def set_logger_level(self, name: str | None, level: int) -> None: ...

    def log(self, severity: int, name: str, message: str) -> None: ...

    def shutdown(self) -> None: ...
