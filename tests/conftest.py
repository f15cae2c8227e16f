import logging

import pytest

from questpatterns.config.schemas import AppConfig
from questpatterns.domain.registry import Registry
from questpatterns.infrastructure.narrative import BufferedNarrativeSink


@pytest.fixture
def sink():
    """In-memory narrative sink."""
    return BufferedNarrativeSink()


@pytest.fixture
def app_config():
    return AppConfig()


@pytest.fixture(autouse=True)
def fresh_registry(monkeypatch):
    """Start every test without a shared registry instance."""
    monkeypatch.setattr(Registry, "_instance", None)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
