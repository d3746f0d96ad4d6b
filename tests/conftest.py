"""Shared test fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from devcareer.main import app
from devcareer.tools import AIToolService
from tests.helpers import FakeProvider


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def install_provider(client):
    """Swap the app's AI tool service for one backed by the given provider."""

    def _install(provider: FakeProvider) -> FakeProvider:
        client.app.state.tools = AIToolService(provider)
        return provider

    return _install
