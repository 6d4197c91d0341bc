"""JSONL file subscriber: writes every lifecycle event to a JSONL file.

Each line is a complete JSON object with the event type name and all fields.
The subscriber is registered once; set_jsonl_path() retargets or disables it.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

from logroute.observe.events import ALL_EVENTS
from logroute.observe.linker import LogRouteEventLinker


class JsonlWriter:
    """Append JSON lines to a file."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    def write(self, event_dict: dict) -> None:
        line = json.dumps(event_dict, default=str) + "\n"
        with open(self._path, "a") as f:
            f.write(line)


_writer: JsonlWriter | None = None
_registered = False


def set_jsonl_path(path: str | None) -> None:
    """Point the JSONL subscriber at ``path``; None disables it."""
    global _writer
    _writer = JsonlWriter(Path(path)) if path else None
    if _writer is not None:
        _register()


def _register() -> None:
    global _registered
    if _registered:
        return

    @LogRouteEventLinker.on(*ALL_EVENTS)
    def _write_jsonl(event: object) -> None:
        if _writer is not None:
            _writer.write({"event": type(event).__name__, **asdict(event)})  # type: ignore[arg-type]

    _registered = True
