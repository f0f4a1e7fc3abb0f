import pytest
from fastapi.testclient import TestClient

from string_analyzer.main import app
from string_analyzer.store import RecordStore, get_store
from string_analyzer.utils import analyze_string


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def populated_store(store):
    for value in ["a", "ab", "aba", "Racecar", "hello world", "zebra"]:
        store.create(analyze_string(value))
    return store


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
