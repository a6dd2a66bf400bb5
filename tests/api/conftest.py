"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from gqlbridge.config import Settings
from gqlbridge.main import create_gqlbridge_app


@pytest.fixture
def settings() -> Settings:
    """Settings without CORS policy (wildcard origin)."""
    return Settings(_env_file=None)


@pytest.fixture
def app(settings: Settings):
    """Falcon ASGI app wired with the example schema."""
    return create_gqlbridge_app(settings)


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
