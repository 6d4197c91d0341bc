"""logroute: route log events to console, per-logger endpoints and an external backend.

Public API:
    LoggerRegistry    - logger name -> publishing endpoint, with rollback
    DispatchChain     - ordered, bounded fan-out to sinks
    LogRouter         - options -> initialized subsystems + installed chain
    configure(opts)   - configure the default router
    shutdown()        - tear the default router down
    log(sev, name, m) - emit one event through the installed handler
"""

from logroute.backends import ExternalBackend, StdlibBackend
from logroute.dispatch import MAX_SINKS, DispatchChain
from logroute.endpoints import DEFAULT_TOPIC, Endpoint, EndpointProvider
from logroute.options import LoggingOptions, get_options
from logroute.output import LogRouteHandler, log, set_output_handler
from logroute.records import LogLocation, LogMessage, Severity, Time, split_timestamp
from logroute.registry import LoggerRegistry, RegistryEntry
from logroute.router import LogRouter, SubsystemOutcome, configure, get_router, shutdown
from logroute.sinks import ConsoleSink, ExternalSink, RegistrySink, Sink
from logroute.status import BackendError, EndpointError, LogRouteError, Status

__all__ = [
    # Registry
    "LoggerRegistry",
    "RegistryEntry",
    "Endpoint",
    "EndpointProvider",
    "DEFAULT_TOPIC",
    # Sinks and dispatch
    "Sink",
    "ConsoleSink",
    "RegistrySink",
    "ExternalSink",
    "DispatchChain",
    "MAX_SINKS",
    # Backends
    "ExternalBackend",
    "StdlibBackend",
    # Router
    "LogRouter",
    "SubsystemOutcome",
    "LoggingOptions",
    "get_options",
    "configure",
    "shutdown",
    "get_router",
    # Output
    "log",
    "set_output_handler",
    "LogRouteHandler",
    # Records
    "Severity",
    "LogLocation",
    "LogMessage",
    "Time",
    "split_timestamp",
    # Status
    "Status",
    "LogRouteError",
    "EndpointError",
    "BackendError",
]
