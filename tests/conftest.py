"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from hostkit import HostLogger, HostSettings, LifecycleRegistry, LocalHost, ScriptContext


@pytest.fixture
def host():
    """Fresh LocalHost at t=0."""
    return LocalHost()


@pytest.fixture
def settings():
    """Server-side settings with debug logging."""
    return HostSettings(role="server", log_level="DEBUG")


@pytest.fixture
def logger(settings):
    return HostLogger(settings)


@pytest.fixture
def registry(host, logger):
    """Open registry bound to the LocalHost fixture."""
    return LifecycleRegistry(host, logger=logger)


@pytest.fixture
def ctx(host, settings):
    """ScriptContext over the LocalHost fixture, without touching handlers."""
    return ScriptContext(host=host, settings=settings, configure_log=False)
