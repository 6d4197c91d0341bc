"""Tests for sink handlers: console, registry-backed, external backend."""

from __future__ import annotations

import io

from fakes import FakeBackend, FakeOwner
from logroute.records import LogLocation, Severity, Time
from logroute.sinks import ConsoleSink, ExternalSink, RegistrySink, Sink


class TestConsoleSink:
    def test_writes_formatted_line(self):
        stream = io.StringIO()
        sink = ConsoleSink(stream)
        sink(None, Severity.INFO, "robot.nav", 12_000_000_034, "hello")
        assert stream.getvalue() == "[INFO] [12.000000034] [robot.nav]: hello\n"

    def test_defaults_to_stdout(self, capsys):
        ConsoleSink()(None, Severity.ERROR, "arm", 0, "stuck")
        assert "[ERROR] [0.000000000] [arm]: stuck" in capsys.readouterr().out

    def test_custom_format_with_location(self):
        stream = io.StringIO()
        sink = ConsoleSink(stream, fmt="{file}:{line} {function} {message}")
        sink(LogLocation("nav.py", "plan", 7), Severity.DEBUG, "nav", 0, "go")
        assert stream.getvalue() == "nav.py:7 plan go\n"

    def test_closed_stream_does_not_raise(self):
        stream = io.StringIO()
        stream.close()
        ConsoleSink(stream)(None, Severity.INFO, "nav", 0, "lost")

    def test_conforms_to_protocol(self):
        assert isinstance(ConsoleSink(), Sink)


class TestRegistrySink:
    def test_publishes_to_registered_endpoint(self, registry, provider):
        registry.register(FakeOwner("nav", "robot"))
        sink = RegistrySink(registry)
        loc = LogLocation("nav.py", "plan", 9)

        sink(loc, Severity.INFO, "robot.nav", 5_000_000_001, "hello")

        [record] = provider.publish_calls
        assert record.stamp == Time(5, 1)
        assert record.level == Severity.INFO
        assert record.name == "robot.nav"
        assert record.msg == "hello"
        assert (record.file, record.function, record.line) == ("nav.py", "plan", 9)

    def test_unknown_logger_is_dropped(self, registry, provider):
        registry.register(FakeOwner("nav"))
        RegistrySink(registry)(None, Severity.INFO, "arm", 0, "hello")
        assert provider.publish_calls == []

    def test_uninitialized_registry_is_dropped(self, provider):
        from logroute.registry import LoggerRegistry

        RegistrySink(LoggerRegistry(provider))(None, Severity.INFO, "nav", 0, "hello")
        assert provider.publish_calls == []

    def test_publish_failure_is_swallowed(self, registry, provider):
        registry.register(FakeOwner("nav"))
        provider.created[0].fail_publish = True
        RegistrySink(registry)(None, Severity.INFO, "nav", 0, "hello")
        assert provider.publish_calls == []

    def test_routes_only_to_matching_endpoint(self, registry, provider):
        registry.register(FakeOwner("nav"))
        registry.register(FakeOwner("arm"))
        RegistrySink(registry)(None, Severity.INFO, "arm", 0, "reach")
        nav, arm = provider.created
        assert nav.published == []
        assert [m.msg for m in arm.published] == ["reach"]


class TestExternalSink:
    def test_forwards_severity_name_message(self, backend):
        ExternalSink(backend)(LogLocation("f", "g", 1), Severity.WARN, "nav", 99, "careful")
        assert backend.logged == [(30, "nav", "careful")]

    def test_backend_failure_is_swallowed(self):
        backend = FakeBackend()
        backend.fail_log = True
        ExternalSink(backend)(None, Severity.INFO, "nav", 0, "hello")
        assert backend.logged == []
