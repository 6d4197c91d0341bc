"""Singleton emitter: configure once, emit everywhere.

The global emit() function is the only API the registry, dispatcher and
router need. It's a no-op when not configured (zero overhead in tests).
"""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any

from pyventus.core.processing import ProcessingService
from pyventus.core.utils import is_callable_async
from pyventus.events import EventEmitter

if TYPE_CHECKING:
    from logroute.observe.config import ObservabilityConfig


class InlineProcessingService(ProcessingService):
    """Run every emission to completion before emit() returns.

    Outside an event loop the emission runs on a fresh loop. Inside one the
    caller's loop cannot be re-entered, so the emission runs on a helper
    thread and emit() blocks until it finishes. No task outlives the call.
    """

    __slots__ = ()

    def submit(self, callback, *args, **kwargs) -> None:
        if not is_callable_async(callback):
            callback(*args, **kwargs)
            return
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(callback(*args, **kwargs))
            return
        with ThreadPoolExecutor(max_workers=1) as pool:
            pool.submit(asyncio.run, callback(*args, **kwargs)).result()


_emitter: EventEmitter | None = None
_configured: bool = False


def emit(event: Any) -> None:
    """Deliver ``event`` to every subscriber before returning. No-op if not configured."""
    if _emitter is not None:
        _emitter.emit(event)


def configure(config: ObservabilityConfig | None = None) -> EventEmitter:
    """Initialize diagnostics logging, the global emitter and its subscribers.

    Idempotent -- second call returns existing emitter.
    """
    global _emitter, _configured

    if _configured and _emitter is not None:
        return _emitter

    from logroute.observe.config import ObservabilityConfig

    cfg = config or ObservabilityConfig()

    from logroute.observe.logging import setup_logging

    setup_logging(cfg)

    from logroute.observe.linker import LogRouteEventLinker

    _emitter = EventEmitter(
        event_linker=LogRouteEventLinker,
        event_processor=InlineProcessingService(),
    )

    from logroute.observe.subscribers.structlog_sub import register_structlog_subscriber

    register_structlog_subscriber()

    from logroute.observe.subscribers.jsonl import set_jsonl_path

    set_jsonl_path(cfg.events_path)

    _configured = True
    return _emitter


def is_configured() -> bool:
    return _configured


def reset() -> None:
    """Reset for testing."""
    global _emitter, _configured

    from logroute.observe.logging import shutdown_logging
    from logroute.observe.subscribers.jsonl import set_jsonl_path

    shutdown_logging()
    set_jsonl_path(None)

    _emitter = None
    _configured = False
