"""
Integration test fixtures
"""

import pytest
from fastapi.testclient import TestClient

from shopstats.api.dependencies import get_store
from shopstats.api.main import app
from shopstats.api.middleware import get_latency_tracker
from shopstats.db import reset_data_store, set_data_store


@pytest.fixture
def client(store):
    """API test client serving the sample dataset."""
    set_data_store(store)
    app.dependency_overrides[get_store] = lambda: store
    get_latency_tracker().reset()

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    reset_data_store()
