"""
Shared pytest fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from diff_backend.main import app
from diff_backend.services.config_manager import CONFIG_DIR_ENV, ConfigManager
from diff_backend.services.diff_generator import DiffGenerator


@pytest.fixture
def generator() -> DiffGenerator:
    """Fresh diff generator."""
    return DiffGenerator()


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the config manager at an isolated directory."""
    directory = tmp_path / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(directory))
    ConfigManager.reset_instance()
    yield directory
    ConfigManager.reset_instance()


@pytest.fixture
def client(config_dir) -> TestClient:
    """Test client with isolated configuration."""
    with TestClient(app) as test_client:
        yield test_client
