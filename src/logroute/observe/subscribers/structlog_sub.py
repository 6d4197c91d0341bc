"""Routes lifecycle events to structured log lines via the configured LogFormatter.

Always-on subscriber, registered by emitter.configure().
"""

from __future__ import annotations

from dataclasses import asdict

from logroute.observe.events import (
    EndpointCreated,
    EndpointDestroyed,
    EndpointRolledBack,
    EndpointTeardownFailed,
    RegistryFinalized,
    RegistryInitialized,
    RouterConfigured,
    RouterShutdown,
    SinkFailed,
)
from logroute.observe.linker import LogRouteEventLinker
from logroute.observe.logging import get_logger

_registered = False


def _get_logger():
    """Lazy logger -- always reflects the active formatter, not stale import-time state."""
    return get_logger("logroute.events")


def _to_dict(event: object) -> dict:
    return asdict(event)  # type: ignore[arg-type]


def register_structlog_subscriber() -> None:
    """Register log handlers for all lifecycle events. Safe to call repeatedly."""
    global _registered
    if _registered:
        return

    # Registry
    @LogRouteEventLinker.on(RegistryInitialized)
    def _log_registry_initialized(event: RegistryInitialized) -> None:
        _get_logger().info("registry.initialized", **_to_dict(event))

    @LogRouteEventLinker.on(RegistryFinalized)
    def _log_registry_finalized(event: RegistryFinalized) -> None:
        _get_logger().info("registry.finalized", **_to_dict(event))

    @LogRouteEventLinker.on(EndpointCreated)
    def _log_endpoint_created(event: EndpointCreated) -> None:
        _get_logger().debug("endpoint.created", **_to_dict(event))

    @LogRouteEventLinker.on(EndpointDestroyed)
    def _log_endpoint_destroyed(event: EndpointDestroyed) -> None:
        _get_logger().debug("endpoint.destroyed", **_to_dict(event))

    @LogRouteEventLinker.on(EndpointRolledBack)
    def _log_endpoint_rolled_back(event: EndpointRolledBack) -> None:
        _get_logger().error("endpoint.rolled_back", **_to_dict(event))

    @LogRouteEventLinker.on(EndpointTeardownFailed)
    def _log_teardown_failed(event: EndpointTeardownFailed) -> None:
        _get_logger().error("endpoint.teardown_failed", **_to_dict(event))

    # Dispatch
    @LogRouteEventLinker.on(SinkFailed)
    def _log_sink_failed(event: SinkFailed) -> None:
        _get_logger().warning("sink.failed", **_to_dict(event))

    # Router
    @LogRouteEventLinker.on(RouterConfigured)
    def _log_router_configured(event: RouterConfigured) -> None:
        _get_logger().info("router.configured", **_to_dict(event))

    @LogRouteEventLinker.on(RouterShutdown)
    def _log_router_shutdown(event: RouterShutdown) -> None:
        _get_logger().info("router.shutdown", **_to_dict(event))

    _registered = True
