"""Typed lifecycle events emitted by the registry, dispatcher and router.

All events are frozen (immutable) dataclasses. Components emit these and
don't know whether anything is listening. Subscribers handle routing.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RegistryInitialized:
    topic: str


@dataclass(frozen=True)
class RegistryFinalized:
    endpoints_destroyed: int


@dataclass(frozen=True)
class EndpointCreated:
    logger_name: str
    topic: str
    registry_size: int


@dataclass(frozen=True)
class EndpointDestroyed:
    logger_name: str
    registry_size: int


@dataclass(frozen=True)
class EndpointRolledBack:
    logger_name: str
    status: str
    error: str


@dataclass(frozen=True)
class EndpointTeardownFailed:
    logger_name: str
    status: str
    error: str
    remaining: int


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SinkFailed:
    sink: str
    logger_name: str
    error: str


# ---------------------------------------------------------------------------
# Router
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RouterConfigured:
    sinks: tuple[str, ...]
    status: str
    default_severity: int


@dataclass(frozen=True)
class RouterShutdown:
    status: str


ALL_EVENTS = (
    RegistryInitialized,
    RegistryFinalized,
    EndpointCreated,
    EndpointDestroyed,
    EndpointRolledBack,
    EndpointTeardownFailed,
    SinkFailed,
    RouterConfigured,
    RouterShutdown,
)
