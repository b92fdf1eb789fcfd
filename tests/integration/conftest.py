"""
Shared fixtures for integration tests.

Runs the real application (lifespan included) with settings taken from
environment variables set per test.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.api.main import app
from src.config.settings import get_settings
from tests.fakes import GATE_SECRET


@pytest.fixture
def app_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Environment for an in-memory app with the demo gate secret."""
    monkeypatch.setenv("GATE_SECRET", GATE_SECRET)
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client(app_env: None) -> Generator[TestClient, None, None]:
    """Test client with lifespan startup and shutdown."""
    with TestClient(app) as test_client:
        yield test_client
