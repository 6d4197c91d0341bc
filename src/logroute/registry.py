"""Logger registry: at most one live publishing endpoint per logger name.

LoggerRegistry is an explicit context object. It owns every endpoint it
creates until unregister() or fini() destroys it, and keeps only an opaque
owner token (never the owner itself) to hand back at teardown.

While uninitialized, register() and unregister() succeed without doing
anything: call sites that create or destroy owners never need to know
whether endpoint logging is enabled.

Not thread-safe. Callers serialize register/unregister/fini and dispatch.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, MutableMapping
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Hashable

from logroute.endpoints import DEFAULT_TOPIC, Endpoint, EndpointProvider
from logroute.observe.emitter import emit
from logroute.observe.events import (
    EndpointCreated,
    EndpointDestroyed,
    EndpointRolledBack,
    EndpointTeardownFailed,
    RegistryFinalized,
    RegistryInitialized,
)
from logroute.observe.logging import get_logger
from logroute.status import Status, status_from_exception

MapFactory = Callable[[], MutableMapping[str, "RegistryEntry"]]


@dataclass(frozen=True)
class RegistryEntry:
    name: str
    endpoint: Endpoint
    owner_token: Hashable


class LoggerRegistry:
    """Maps logger names to the endpoint created for their owner."""

    def __init__(self, provider: EndpointProvider, topic: str = DEFAULT_TOPIC) -> None:
        self._provider = provider
        self._topic = topic
        self._entries: MutableMapping[str, RegistryEntry] | None = None

    @property
    def topic(self) -> str:
        return self._topic

    @property
    def initialized(self) -> bool:
        return self._entries is not None

    def __len__(self) -> int:
        return 0 if self._entries is None else len(self._entries)

    def __contains__(self, name: object) -> bool:
        return self._entries is not None and name in self._entries

    def names(self) -> list[str]:
        return [] if self._entries is None else list(self._entries)

    def lookup(self, name: str) -> RegistryEntry | None:
        if self._entries is None:
            return None
        return self._entries.get(name)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init(self, map_factory: MapFactory | None = dict) -> Status:
        """Create the empty name map. A second call while initialized is a no-op."""
        if map_factory is None:
            return Status.INVALID_ARGUMENT
        if self._entries is not None:
            return Status.OK
        try:
            entries = map_factory()
        except Exception as exc:
            get_logger("logroute.registry").error("registry.init_failed", error=str(exc))
            return status_from_exception(exc)
        self._entries = entries
        emit(RegistryInitialized(topic=self._topic))
        return Status.OK

    def fini(self) -> Status:
        """Destroy every outstanding endpoint, then drop the map.

        Stops at the first endpoint that fails to tear down and returns its
        status. Entries already torn down are gone; the failed entry and
        everything after it stay registered, and the registry stays
        initialized so the caller can retry.
        """
        if self._entries is None:
            return Status.OK

        destroyed = 0
        for name, entry in list(self._entries.items()):
            status, error = self._destroy(entry)
            if not status.ok:
                emit(
                    EndpointTeardownFailed(
                        logger_name=name,
                        status=status.value,
                        error=error,
                        remaining=len(self._entries),
                    )
                )
                return status
            del self._entries[name]
            destroyed += 1

        self._entries = None
        emit(RegistryFinalized(endpoints_destroyed=destroyed))
        return Status.OK

    # ------------------------------------------------------------------
    # Per-owner endpoints
    # ------------------------------------------------------------------

    def register(self, owner: Any) -> Status:
        """Create and record an endpoint for ``owner``'s logger name."""
        if self._entries is None:
            return Status.OK
        if owner is None:
            return Status.INVALID_ARGUMENT

        name = self._resolve_name(owner)
        if name is None:
            return Status.INVALID_ARGUMENT
        if name in self._entries:
            return Status.ALREADY_INIT

        try:
            token = self._provider.owner_token(owner)
            endpoint = self._provider.create_endpoint(owner, self._topic)
        except Exception as exc:
            get_logger("logroute.registry").warning(
                "endpoint.create_failed", logger_name=name, error=str(exc)
            )
            return status_from_exception(exc)

        entry = RegistryEntry(name=name, endpoint=endpoint, owner_token=token)
        try:
            self._entries[name] = entry
        except Exception as exc:
            # The insertion error wins over whatever the rollback reports.
            self._destroy(entry)
            status = status_from_exception(exc)
            emit(EndpointRolledBack(logger_name=name, status=status.value, error=str(exc)))
            return status

        emit(EndpointCreated(logger_name=name, topic=self._topic, registry_size=len(self._entries)))
        return Status.OK

    def unregister(self, owner: Any) -> Status:
        """Destroy ``owner``'s endpoint. The entry is removed only if teardown succeeds."""
        if self._entries is None:
            return Status.OK
        if owner is None:
            return Status.INVALID_ARGUMENT

        name = self._resolve_name(owner)
        if name is None:
            return Status.ERROR
        entry = self._entries.get(name)
        if entry is None:
            return Status.NOT_INIT

        status, error = self._destroy(entry)
        if not status.ok:
            emit(
                EndpointTeardownFailed(
                    logger_name=name,
                    status=status.value,
                    error=error,
                    remaining=len(self._entries),
                )
            )
            return status

        del self._entries[name]
        emit(EndpointDestroyed(logger_name=name, registry_size=len(self._entries)))
        return Status.OK

    @contextmanager
    def registered(self, owner: Any) -> Iterator[Status]:
        """Register ``owner`` for the duration of the block.

        Unregisters on every exit path, but only if this block's register()
        actually created the entry.
        """
        created_here = self._entries is not None and self._resolve_name(owner) not in self
        status = self.register(owner)
        try:
            yield status
        finally:
            if status.ok and created_here:
                self.unregister(owner)

    # ------------------------------------------------------------------

    def _resolve_name(self, owner: Any) -> str | None:
        if owner is None:
            return None
        try:
            return self._provider.resolve_name(owner)
        except Exception as exc:
            get_logger("logroute.registry").warning("logger_name.unresolved", error=str(exc))
            return None

    def _destroy(self, entry: RegistryEntry) -> tuple[Status, str]:
        """Destroy one endpoint. Returns the status and, on failure, the error text."""
        try:
            self._provider.destroy_endpoint(entry.endpoint, entry.owner_token)
        except Exception as exc:
            get_logger("logroute.registry").error(
                "endpoint.destroy_failed", logger_name=entry.name, error=str(exc)
            )
            return status_from_exception(exc), str(exc)
        return Status.OK, ""
