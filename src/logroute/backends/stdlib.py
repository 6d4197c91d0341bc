"""Stdlib backend: forward events to Python's ``logging`` module.

Each logroute logger name maps to a stdlib logger under a fixed prefix
(``logroute.external.<name>`` by default), so dotted names keep their
hierarchy. The bridge in logroute.output skips the ``logroute`` namespace, so
external output never loops back into dispatch.

A config file, when given, is applied with ``logging.config``:
    *.yaml / *.yml  -> dictConfig (parsed with PyYAML)
    *.json          -> dictConfig
    anything else   -> fileConfig (INI format)
Without one, a stderr handler is attached to the prefix logger and the
prefix logger stops propagating. With one, propagation is left to the config,
so handlers it attaches to root receive external events.
"""

from __future__ import annotations

import json
import logging
import logging.config
import sys
from pathlib import Path

import yaml

from logroute.status import BackendError, Status

DEFAULT_PREFIX = "logroute.external"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class StdlibBackend:
    def __init__(self, prefix: str = DEFAULT_PREFIX) -> None:
        self._prefix = prefix
        self._handler: logging.Handler | None = None
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def base_logger(self) -> logging.Logger:
        return logging.getLogger(self._prefix)

    def logger_for(self, name: str) -> logging.Logger:
        return logging.getLogger(f"{self._prefix}.{name}" if name else self._prefix)

    def initialize(self, config_path: str | None) -> None:
        if config_path:
            self._remove_default_handler()
            self._apply_config(Path(config_path))
        elif self._handler is None:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
            self.base_logger.addHandler(handler)
            self.base_logger.propagate = False
            self._handler = handler
        self._initialized = True

    def set_logger_level(self, name: str | None, level: int) -> None:
        logger = self.base_logger if name is None else self.logger_for(name)
        logger.setLevel(_to_stdlib_level(level))

    def log(self, severity: int, name: str, message: str) -> None:
        self.logger_for(name).log(_to_stdlib_level(severity) or logging.INFO, message)

    def shutdown(self) -> None:
        self._remove_default_handler()
        self._initialized = False

    def _remove_default_handler(self) -> None:
        if self._handler is None:
            return
        self.base_logger.removeHandler(self._handler)
        self.base_logger.propagate = True
        try:
            self._handler.close()
        except OSError as exc:
            raise BackendError(f"Failed to close handler: {exc}") from exc
        finally:
            self._handler = None

    def _apply_config(self, path: Path) -> None:
        if not path.exists():
            raise BackendError(f"Logging config not found: {path}", Status.INVALID_ARGUMENT)
        try:
            if path.suffix in (".yaml", ".yml"):
                logging.config.dictConfig(yaml.safe_load(path.read_text()) or {})
            elif path.suffix == ".json":
                logging.config.dictConfig(json.loads(path.read_text()))
            else:
                logging.config.fileConfig(str(path), disable_existing_loggers=False)
        except (ValueError, TypeError, KeyError, OSError, yaml.YAMLError) as exc:
            raise BackendError(f"Invalid logging config {path}: {exc}") from exc


def _to_stdlib_level(severity: int) -> int:
    # Severity values share the stdlib numbering; UNSET maps to NOTSET.
    return max(int(severity), logging.NOTSET)
