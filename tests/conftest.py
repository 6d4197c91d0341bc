"""Shared fixtures: process-wide state reset and transport/backend doubles."""

from __future__ import annotations

import pytest

from fakes import FakeBackend, FakeProvider
from logroute import output, router
from logroute.observe import emitter
from logroute.options import reset_options
from logroute.registry import LoggerRegistry
from logroute.status import Status


@pytest.fixture(autouse=True)
def _reset_state():
    """Reset process-wide state before and after each test."""
    emitter.reset()
    router.reset()
    output.reset()
    reset_options()
    yield
    emitter.reset()
    router.reset()
    output.reset()
    reset_options()


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def registry(provider: FakeProvider) -> LoggerRegistry:
    reg = LoggerRegistry(provider)
    assert reg.init() is Status.OK
    return reg


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()
