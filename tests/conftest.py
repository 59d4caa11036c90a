"""Shared pytest fixtures."""

import logging
import os

import pytest

from gofpatterns.config.manager import reset_config_manager
from gofpatterns.config.schemas.demo_schema import DemoConfig
from gofpatterns.domain.base.output import RecordingOutput
from gofpatterns.infrastructure.patterns.singleton_registry import SingletonRegistry

ENV_PREFIX = "GOF_PATTERNS_"


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep process-wide state and GOF_PATTERNS_* variables out of each test."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)

    SingletonRegistry.get_instance().reset()
    reset_config_manager()
    yield
    SingletonRegistry.get_instance().reset()
    reset_config_manager()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers installed by setup_logging, they hold per-test streams."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def output():
    """In-memory output port."""
    return RecordingOutput()


@pytest.fixture
def demo_config():
    """Default demo inputs."""
    return DemoConfig()


@pytest.fixture
def sample_data():
    """The extraction sample used throughout the strategy tests."""
    return ["c", "e", "a", "d", "b"]
