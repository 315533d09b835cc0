"""Shared fixtures for the test suite."""

import pytest
from fastapi.testclient import TestClient

from core.store import MemoryStore
from main import build_stores, create_app


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Lowest bcrypt cost so user creation stays quick."""
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.delenv("EXPOSE_ERROR_DETAILS", raising=False)
    monkeypatch.delenv("API_KEY_TTL_DAYS", raising=False)


@pytest.fixture
def stores():
    """In-memory stores keyed by table name."""
    return build_stores("memory")


@pytest.fixture
def ohlc_store(stores):
    return stores["ohlc"]


@pytest.fixture
def user_store(stores):
    return stores["users"]


@pytest.fixture
def api_key_store(stores):
    return stores["apikeys"]


@pytest.fixture
def client(stores):
    app = create_app(stores=stores)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def ohlc_payload():
    """Factory fixture. Call it with overrides to get an OHLC body."""
    def _make(**overrides):
        payload = {
            "symbol": "BTC",
            "open": 42000.5,
            "close": 42800.0,
            "high": 43100.25,
            "low": 41850.0,
            "idx_date": "2024-01-15",
        }
        payload.update(overrides)
        return payload
    return _make


@pytest.fixture
def user_payload():
    """Factory fixture. Call it with overrides to get a user body."""
    def _make(**overrides):
        payload = {"username": "alice", "password": "p", "mail": "a@b.com"}
        payload.update(overrides)
        return payload
    return _make


@pytest.fixture
def empty_memory_store():
    return MemoryStore()
