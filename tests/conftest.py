import pytest
from fastapi.testclient import TestClient

from services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    """Isolate every test in its own config directory"""
    monkeypatch.setenv("TEXT_DIFF_CONFIG_DIR", str(tmp_path))
    ConfigManager.reset_instance()
    yield tmp_path
    ConfigManager.reset_instance()


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as test_client:
        yield test_client
