"""Shared fixtures for the Greeting API tests."""

import pytest
from fastapi.testclient import TestClient

from greeting_api.app.main import create_app


@pytest.fixture
def app():
    """A freshly created application, equivalent to a restarted process."""
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def anyio_backend():
    return "asyncio"
