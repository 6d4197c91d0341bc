"""Tests for StdlibBackend: forwarding to Python logging, config files."""

from __future__ import annotations

import logging

import pytest
import yaml

from logroute.backends import ExternalBackend, StdlibBackend
from logroute.records import Severity
from logroute.status import BackendError, Status


@pytest.fixture
def backend():
    b = StdlibBackend(prefix="logroute.external.test")
    yield b
    b.shutdown()
    base = b.base_logger
    for handler in list(base.handlers):
        base.removeHandler(handler)
        handler.close()
    base.setLevel(logging.NOTSET)
    base.propagate = True


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if type(handler) is logging.FileHandler:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestStdlibBackend:
    def test_conforms_to_protocol(self):
        assert isinstance(StdlibBackend(), ExternalBackend)

    def test_default_handler_writes_stderr(self, backend, capsys):
        backend.initialize(None)
        backend.set_logger_level(None, Severity.DEBUG)
        backend.log(Severity.WARN, "robot.nav", "obstacle")
        err = capsys.readouterr().err
        assert "WARNING logroute.external.test.robot.nav: obstacle" in err

    def test_does_not_propagate(self, backend):
        backend.initialize(None)
        assert backend.base_logger.propagate is False
        assert backend.initialized

    def test_level_filters(self, backend, capsys):
        backend.initialize(None)
        backend.set_logger_level(None, Severity.ERROR)
        backend.log(Severity.INFO, "nav", "quiet")
        assert capsys.readouterr().err == ""

    def test_per_logger_level(self, backend):
        backend.initialize(None)
        backend.set_logger_level("nav", Severity.DEBUG)
        assert backend.logger_for("nav").level == logging.DEBUG

    def test_initialize_twice_adds_one_handler(self, backend):
        backend.initialize(None)
        backend.initialize(None)
        assert len(backend.base_logger.handlers) == 1

    def test_shutdown_removes_handler(self, backend):
        backend.initialize(None)
        backend.shutdown()
        assert backend.base_logger.handlers == []
        assert not backend.initialized

    def test_yaml_dict_config(self, backend, tmp_path):
        out = tmp_path / "external.log"
        cfg = tmp_path / "logging.yaml"
        cfg.write_text(yaml.dump({
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"plain": {"format": "%(name)s|%(message)s"}},
            "handlers": {"file": {"class": "logging.FileHandler", "filename": str(out), "formatter": "plain"}},
            "loggers": {"logroute.external.test": {"handlers": ["file"], "level": "DEBUG"}},
        }))
        backend.initialize(str(cfg))
        backend.log(Severity.INFO, "nav", "hello")
        for handler in backend.base_logger.handlers:
            handler.flush()
        assert out.read_text().strip() == "logroute.external.test.nav|hello"

    def test_missing_config_is_invalid_argument(self, backend, tmp_path):
        with pytest.raises(BackendError) as info:
            backend.initialize(str(tmp_path / "absent.yaml"))
        assert info.value.status is Status.INVALID_ARGUMENT

    def test_bad_config_raises(self, backend, tmp_path):
        cfg = tmp_path / "logging.yaml"
        cfg.write_text(yaml.dump({"version": 99}))
        with pytest.raises(BackendError, match="Invalid logging config"):
            backend.initialize(str(cfg))

    def test_root_handlers_from_config_receive_events(self, backend, restore_root, tmp_path, capsys):
        out = tmp_path / "root.log"
        cfg = tmp_path / "logging.yaml"
        cfg.write_text(yaml.dump({
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"plain": {"format": "%(levelname)s|%(message)s"}},
            "handlers": {"file": {"class": "logging.FileHandler", "filename": str(out), "formatter": "plain"}},
            "root": {"handlers": ["file"], "level": "INFO"},
        }))
        backend.initialize(str(cfg))
        backend.log(Severity.ERROR, "nav", "collision")
        for handler in restore_root.handlers:
            handler.flush()

        assert out.read_text().strip() == "ERROR|collision"
        assert "collision" not in capsys.readouterr().err

    def test_config_after_default_restores_propagation(self, backend, tmp_path):
        backend.initialize(None)
        cfg = tmp_path / "logging.yaml"
        cfg.write_text(yaml.dump({"version": 1, "disable_existing_loggers": False}))
        backend.initialize(str(cfg))
        assert backend.base_logger.propagate is True
        assert backend.base_logger.handlers == []
