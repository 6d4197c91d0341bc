"""Endpoint collaborator: the transport that owns publishing endpoints.

logroute never creates network resources itself. An EndpointProvider
resolves the logger name of an owner, creates an endpoint for it on a topic,
and destroys it again. Failures are raised as EndpointError.
"""

from __future__ import annotations

from typing import Any, Hashable, Protocol, runtime_checkable

from logroute.records import LogMessage

DEFAULT_TOPIC = "rosout"


@runtime_checkable
class Endpoint(Protocol):
    """A handle able to publish one structured log record."""

    def publish(self, message: LogMessage) -> None: ...


@runtime_checkable
class EndpointProvider(Protocol):
    """Strategy: how endpoints are created and torn down for an owner.

    owner_token() returns an opaque value the registry keeps instead of the
    owner itself; it is handed back unchanged to destroy_endpoint().
    """

    def resolve_name(self, owner: Any) -> str | None: ...

    def owner_token(self, owner: Any) -> Hashable: ...

    def create_endpoint(self, owner: Any, topic: str) -> Endpoint: ...

    def destroy_endpoint(self, endpoint: Endpoint, owner_token: Hashable) -> None: ...
