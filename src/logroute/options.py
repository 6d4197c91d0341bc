"""Routing options: YAML config + env var overrides.

Priority: env var > YAML file > default.
Env vars use LOGROUTE_{FIELD_NAME} (e.g. LOGROUTE_REGISTRY_ENABLED=off,
LOGROUTE_DEFAULT_SEVERITY=warn).
YAML file default: ~/.logroute/logging.yaml
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from logroute.records import Severity

_TRUTHY = {"1", "true", "on", "yes"}
_FALSY = {"0", "false", "off", "no"}
_DEFAULT_PATH = Path("~/.logroute/logging.yaml").expanduser()
_ENV_PREFIX = "LOGROUTE_"


@dataclass
class LoggingOptions:
    # Negative means "leave the current threshold alone".
    default_severity: int = -1
    console_enabled: bool = True
    registry_enabled: bool = True
    external_enabled: bool = True
    external_config_path: str | None = None

    @classmethod
    def load(cls, path: Path | None = None) -> LoggingOptions:
        """Load options from a YAML file, then override with env vars."""
        file_path = path or _DEFAULT_PATH
        file_values: dict[str, Any] = {}

        if file_path.exists():
            raw = yaml.safe_load(file_path.read_text()) or {}
            if isinstance(raw, dict):
                file_values = raw

        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            name = f.name
            env_key = f"{_ENV_PREFIX}{name.upper()}"

            if env_key in os.environ:
                value = _coerce(name, os.environ[env_key])
            elif name in file_values:
                value = _coerce(name, file_values[name])
            else:
                continue
            if value is not None:
                kwargs[name] = value

        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def enabled_sinks(self) -> list[str]:
        names = []
        if self.console_enabled:
            names.append("console")
        if self.registry_enabled:
            names.append("registry")
        if self.external_enabled:
            names.append("external")
        return names


def _coerce(name: str, value: Any) -> Any:
    """Convert a raw YAML/env value for field ``name``; None means ignore it."""
    if name == "default_severity":
        if isinstance(value, bool):
            return None
        try:
            return Severity.parse(value)
        except (ValueError, AttributeError):
            return None
    if name == "external_config_path":
        if value is None or value == "":
            return None
        return str(value)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False
    return None


# Singleton
_options: LoggingOptions | None = None


def get_options(path: Path | None = None) -> LoggingOptions:
    """Get the singleton LoggingOptions instance."""
    global _options
    if _options is None:
        _options = LoggingOptions.load(path)
    return _options


def reset_options() -> None:
    """Reset for testing."""
    global _options
    _options = None
