import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.users.store import InMemoryUserStore


@pytest.fixture
def store():
    return InMemoryUserStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as test_client:
        yield test_client
