"""logroute diagnostics: lifecycle events and structured self-logging.

Public API:
    emit(event)     - Fire-and-forget event emission (no-op if not configured)
    configure(cfg)  - Initialize logging + emitter + subscribers
    reset()         - Reset for testing
    get_logger(n)   - Structured logger under the ``logroute`` namespace
"""

from logroute.observe.config import ObservabilityConfig
from logroute.observe.emitter import configure, emit, is_configured, reset
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
from logroute.observe.logging import (
    LogDestination,
    LogFormatter,
    get_logger,
    register_destination,
    register_formatter,
)

__all__ = [
    "ObservabilityConfig",
    "emit",
    "configure",
    "is_configured",
    "reset",
    "get_logger",
    "LogFormatter",
    "LogDestination",
    "register_formatter",
    "register_destination",
    "RegistryInitialized",
    "RegistryFinalized",
    "EndpointCreated",
    "EndpointDestroyed",
    "EndpointRolledBack",
    "EndpointTeardownFailed",
    "SinkFailed",
    "RouterConfigured",
    "RouterShutdown",
]
