"""Return codes for registry and router lifecycle calls.

Lifecycle operations return a Status rather than raising. Collaborators
(transport, external backend) raise EndpointError / BackendError, which the
registry and router translate back into a Status.
"""

from __future__ import annotations

from enum import Enum


class Status(str, Enum):
    OK = "ok"
    ALREADY_INIT = "already_init"
    NOT_INIT = "not_init"
    INVALID_ARGUMENT = "invalid_argument"
    BAD_ALLOC = "bad_alloc"
    ERROR = "error"

    @property
    def ok(self) -> bool:
        return self is Status.OK


class LogRouteError(Exception):
    """Base for errors raised by collaborators."""

    def __init__(self, message: str = "", status: Status = Status.ERROR) -> None:
        super().__init__(message)
        self.status = status


class EndpointError(LogRouteError):
    """Raised by an EndpointProvider when an endpoint cannot be created or destroyed."""


class BackendError(LogRouteError):
    """Raised by an ExternalBackend when it cannot initialize or shut down."""


def status_from_exception(exc: BaseException) -> Status:
    if isinstance(exc, LogRouteError):
        return exc.status
    if isinstance(exc, MemoryError):
        return Status.BAD_ALLOC
    return Status.ERROR
