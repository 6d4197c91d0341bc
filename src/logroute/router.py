"""LogRouter: turn LoggingOptions into an installed dispatch chain.

    configure(options)  - init subsystems, build the chain, install it
    shutdown()          - console fallback first, then fail-fast teardown

configure() keeps the last-failure return policy: if both the registry and
the external backend fail, only the backend's status is returned. Every
subsystem outcome is kept in ``outcomes`` so earlier failures stay visible.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from logroute import output
from logroute.backends import ExternalBackend, StdlibBackend
from logroute.dispatch import DispatchChain
from logroute.endpoints import EndpointProvider
from logroute.observe.emitter import emit
from logroute.observe.events import RouterConfigured, RouterShutdown
from logroute.observe.logging import get_logger
from logroute.options import LoggingOptions
from logroute.registry import LoggerRegistry
from logroute.sinks import ConsoleSink, ExternalSink, RegistrySink
from logroute.sinks.base import Sink
from logroute.status import Status, status_from_exception


def _nothing_enabled() -> LoggingOptions:
    return LoggingOptions(console_enabled=False, registry_enabled=False, external_enabled=False)


class RouterState(str, Enum):
    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"


@dataclass(frozen=True)
class SubsystemOutcome:
    name: str
    status: Status


class LogRouter:
    """Owns the registry, the external backend and the active dispatch chain."""

    def __init__(
        self,
        registry: LoggerRegistry | None = None,
        backend: ExternalBackend | None = None,
        console: ConsoleSink | None = None,
    ) -> None:
        self._registry = registry
        self._backend: ExternalBackend = backend if backend is not None else StdlibBackend()
        self._console = console if console is not None else ConsoleSink()
        self._chain = DispatchChain()
        self._options = _nothing_enabled()
        self._state = RouterState.UNCONFIGURED
        self._outcomes: list[SubsystemOutcome] = []

    @classmethod
    def with_provider(cls, provider: EndpointProvider, **kwargs) -> LogRouter:
        return cls(registry=LoggerRegistry(provider), **kwargs)

    @property
    def registry(self) -> LoggerRegistry | None:
        return self._registry

    @property
    def backend(self) -> ExternalBackend:
        return self._backend

    @property
    def chain(self) -> DispatchChain:
        return self._chain

    @property
    def state(self) -> RouterState:
        return self._state

    @property
    def options(self) -> LoggingOptions:
        return self._options

    @property
    def outcomes(self) -> list[SubsystemOutcome]:
        return list(self._outcomes)

    def configure(self, options: LoggingOptions | None = None) -> Status:
        opts = options if options is not None else LoggingOptions()
        self._options = opts
        self._outcomes = []
        status = Status.OK

        if opts.default_severity >= 0:
            output.set_default_severity(opts.default_severity)

        sinks: list[Sink] = []
        if opts.console_enabled:
            sinks.append(self._console)

        if opts.registry_enabled:
            result = self._init_registry()
            self._outcomes.append(SubsystemOutcome("registry", result))
            if result.ok:
                sinks.append(RegistrySink(self._registry))
            else:
                status = result

        if opts.external_enabled:
            result = self._init_backend(opts)
            self._outcomes.append(SubsystemOutcome("external", result))
            if result.ok:
                sinks.append(ExternalSink(self._backend))
            else:
                status = result

        self._chain = DispatchChain(sinks)
        output.set_output_handler(self._chain)
        self._state = RouterState.CONFIGURED

        emit(
            RouterConfigured(
                sinks=self._chain.names(),
                status=status.value,
                default_severity=opts.default_severity,
            )
        )
        return status

    def shutdown(self) -> Status:
        output.set_output_handler(self._console)
        self._chain = DispatchChain()
        status = Status.OK

        if self._options.registry_enabled and self._registry is not None:
            status = self._registry.fini()
        if status.ok and self._options.external_enabled:
            try:
                self._backend.shutdown()
            except Exception as exc:
                get_logger("logroute.router").error("backend.shutdown_failed", error=str(exc))
                status = status_from_exception(exc)

        if status.ok:
            self._state = RouterState.UNCONFIGURED
            self._options = _nothing_enabled()
        emit(RouterShutdown(status=status.value))
        return status

    def _init_registry(self) -> Status:
        if self._registry is None:
            get_logger("logroute.router").warning(
                "registry.unavailable", hint="LogRouter was built without an EndpointProvider"
            )
            return Status.INVALID_ARGUMENT
        return self._registry.init()

    def _init_backend(self, opts: LoggingOptions) -> Status:
        try:
            self._backend.initialize(opts.external_config_path)
            if opts.default_severity >= 0:
                self._backend.set_logger_level(None, opts.default_severity)
        except Exception as exc:
            get_logger("logroute.router").error(
                "backend.initialize_failed",
                config_path=opts.external_config_path,
                error=str(exc),
            )
            return status_from_exception(exc)
        return Status.OK


# Singleton
_router: LogRouter | None = None


def get_router() -> LogRouter:
    """Get the default router, creating a registry-less one on first use."""
    global _router
    if _router is None:
        _router = LogRouter()
    return _router


def set_router(router: LogRouter) -> None:
    global _router
    _router = router


def configure(options: LoggingOptions | None = None) -> Status:
    return get_router().configure(options)


def shutdown() -> Status:
    return get_router().shutdown()


def reset() -> None:
    """Reset for testing."""
    global _router
    _router = None
    output.reset()
