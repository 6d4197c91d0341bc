"""Sink handlers: console, registry-backed endpoint, external backend."""

from logroute.sinks.base import Sink
from logroute.sinks.console import ConsoleSink
from logroute.sinks.external import ExternalSink
from logroute.sinks.registry_sink import RegistrySink

__all__ = ["Sink", "ConsoleSink", "RegistrySink", "ExternalSink"]
