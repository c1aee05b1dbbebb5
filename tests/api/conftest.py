"""API test fixtures: TestClient over the real zone database."""

import pytest
from starlette.testclient import TestClient

from api import create_app
from core.config import ConverterConfig


@pytest.fixture
def app():
    """Converter app with local zone detection off, so defaults are deterministic."""
    return create_app(ConverterConfig(detect_local_zone=False))


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)
