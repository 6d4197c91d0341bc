"""Diagnostics configuration, env-var driven.

Controls how logroute reports on itself (registry lifecycle, sink
failures), not where application log events are routed; that is
LoggingOptions in logroute.options.

    Formatter: LOGROUTE_LOG_FORMATTER=structlog (default) | stdlib
    Destination: LOGROUTE_LOG_DESTINATION=stderr (default) | jsonl
    Renderer: LOGROUTE_LOG_FORMAT=json (default) | console
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class ObservabilityConfig:
    """Diagnostics configuration, env-var driven."""

    log_formatter: str = field(
        default_factory=lambda: os.environ.get("LOGROUTE_LOG_FORMATTER", "structlog")
    )  # "structlog" | "stdlib"

    log_destination: str = field(
        default_factory=lambda: os.environ.get("LOGROUTE_LOG_DESTINATION", "stderr")
    )  # "stderr" | "jsonl"

    log_level: str = field(
        default_factory=lambda: os.environ.get("LOGROUTE_LOG_LEVEL", "WARNING")
    )

    log_format: str = field(
        default_factory=lambda: os.environ.get("LOGROUTE_LOG_FORMAT", "json")
    )  # "json" | "console"

    # JSONL file destination for diagnostics log lines
    log_path: str | None = field(
        default_factory=lambda: os.environ.get("LOGROUTE_LOG_PATH")
    )

    # Lifecycle events as JSON lines, one object per event
    events_path: str | None = field(
        default_factory=lambda: os.environ.get("LOGROUTE_EVENTS_PATH")
    )
