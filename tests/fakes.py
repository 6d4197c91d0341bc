"""In-memory transport and backend doubles.

FakeProvider stands in for the transport that owns endpoints; it records
every create/destroy and can be told to fail for specific logger names.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from logroute.records import LogMessage
from logroute.status import BackendError, EndpointError


@dataclass(frozen=True)
class FakeOwner:
    """An owner whose logger name is ``namespace.name``."""

    name: str
    namespace: str = ""

    @property
    def logger_name(self) -> str | None:
        if not self.name:
            return None
        return f"{self.namespace}.{self.name}" if self.namespace else self.name


@dataclass
class FakeEndpoint:
    logger_name: str
    topic: str
    published: list[LogMessage] = field(default_factory=list)
    fail_publish: bool = False

    def publish(self, message: LogMessage) -> None:
        if self.fail_publish:
            raise RuntimeError("transport down")
        self.published.append(message)


class FakeProvider:
    def __init__(self) -> None:
        self.created: list[FakeEndpoint] = []
        self.destroyed: list[str] = []
        self.destroy_tokens: list[object] = []
        self.fail_create: set[str] = set()
        self.fail_destroy: set[str] = set()

    def resolve_name(self, owner: FakeOwner) -> str | None:
        return owner.logger_name

    def owner_token(self, owner: FakeOwner) -> object:
        return ("owner", owner.namespace, owner.name)

    def create_endpoint(self, owner: FakeOwner, topic: str) -> FakeEndpoint:
        name = owner.logger_name
        if name in self.fail_create:
            raise EndpointError(f"cannot create endpoint for {name}")
        endpoint = FakeEndpoint(logger_name=name, topic=topic)
        self.created.append(endpoint)
        return endpoint

    def destroy_endpoint(self, endpoint: FakeEndpoint, owner_token: object) -> None:
        self.destroyed.append(endpoint.logger_name)
        self.destroy_tokens.append(owner_token)
        if endpoint.logger_name in self.fail_destroy:
            raise EndpointError(f"cannot destroy endpoint for {endpoint.logger_name}")

    @property
    def publish_calls(self) -> list[LogMessage]:
        return [m for e in self.created for m in e.published]


class FakeBackend:
    def __init__(self, calls: list | None = None) -> None:
        self.calls = calls if calls is not None else []
        self.logged: list[tuple[int, str, str]] = []
        self.levels: dict[str | None, int] = {}
        self.fail_initialize = False
        self.fail_shutdown = False
        self.fail_log = False
        self.initialized_with: str | None = None
        self.shutdowns = 0

    def initialize(self, config_path: str | None) -> None:
        if self.fail_initialize:
            raise BackendError("backend init failed")
        self.initialized_with = config_path

    def set_logger_level(self, name: str | None, level: int) -> None:
        self.levels[name] = level

    def log(self, severity: int, name: str, message: str) -> None:
        self.calls.append("external")
        if self.fail_log:
            raise RuntimeError("backend exploded")
        self.logged.append((severity, name, message))

    def shutdown(self) -> None:
        self.shutdowns += 1
        if self.fail_shutdown:
            raise BackendError("backend shutdown failed")


class FailingInsertMap(dict):
    """A map whose insertions always fail."""

    def __init__(self, exc: type[BaseException] = MemoryError) -> None:
        super().__init__()
        self._exc = exc

    def __setitem__(self, key, value) -> None:
        raise self._exc("no room")
