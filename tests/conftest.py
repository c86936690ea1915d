import pytest
from fastapi.testclient import TestClient

from stellar_api.app.main import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())
