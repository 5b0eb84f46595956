"""Pytest configuration and shared fixtures."""

import pytest

from patterns_app.config.loader import ConfigLoader
from patterns_app.console import MemoryConsole
from patterns_app.creational.singleton import DatabaseConnection
from patterns_app.logging import configure_logging


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Route structlog through stdlib logging at WARNING for the whole run."""
    configure_logging(level="WARNING")


@pytest.fixture
def console() -> MemoryConsole:
    """Console capturing example output lines."""
    return MemoryConsole("test")


@pytest.fixture(autouse=True)
def fresh_singleton():
    """Every test starts without a database connection."""
    DatabaseConnection.reset_instance()
    yield
    DatabaseConnection.reset_instance()


@pytest.fixture
def write_catalog(tmp_path):
    """Write a catalog.yaml into a temp config dir and return a loader for it."""
    def _write(content: str) -> ConfigLoader:
        (tmp_path / "catalog.yaml").write_text(content)
        return ConfigLoader.create(tmp_path)
    return _write


@pytest.fixture
def empty_loader(tmp_path) -> ConfigLoader:
    """Loader pointed at a directory with no catalog.yaml."""
    return ConfigLoader.create(tmp_path)
