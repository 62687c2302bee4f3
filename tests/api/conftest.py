import pytest
from fastapi.testclient import TestClient

from API_LAYER.app import app


@pytest.fixture(scope="session")
def client():
    # Unhandled errors must come back as 500 envelopes, not re-raise in tests
    return TestClient(app, raise_server_exceptions=False)
