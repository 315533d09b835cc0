"""Tests for the key-value stores: MemoryStore directly, PostgresStore against a fake db module."""

import asyncio
import json
from datetime import datetime, timezone

import pytest
from fastapi import FastAPI
from starlette.requests import Request

from core import store as store_module
from core.store import MemoryStore, PostgresStore, StoreError, app_store, open_store
from ohlc.schemas import PriceRecord


def _record(record_id, symbol="BTC"):
    stamp = datetime(2024, 1, 15, tzinfo=timezone.utc)
    return PriceRecord(
        id=record_id,
        symbol=symbol,
        open=1.0,
        close=2.0,
        high=3.0,
        low=0.5,
        idx_date=stamp,
        created_at=stamp,
    )


# ---------------------------------------------------------------------------
# MemoryStore
# ---------------------------------------------------------------------------

class TestMemoryStore:
    def test_get_missing(self, empty_memory_store):
        assert asyncio.run(empty_memory_store.get("nope")) is None

    def test_insert_returns_previous(self, empty_memory_store):
        first = _record("k1", symbol="BTC")
        second = _record("k1", symbol="ETH")
        assert asyncio.run(empty_memory_store.insert("k1", first)) is None
        assert asyncio.run(empty_memory_store.insert("k1", second)) == first
        assert asyncio.run(empty_memory_store.get("k1")).symbol == "ETH"
        assert len(empty_memory_store) == 1

    def test_remove(self, empty_memory_store):
        rec = _record("k1")
        asyncio.run(empty_memory_store.insert("k1", rec))
        assert asyncio.run(empty_memory_store.remove("k1")) == rec
        assert asyncio.run(empty_memory_store.remove("k1")) is None
        assert len(empty_memory_store) == 0

    def test_values_in_key_order(self, empty_memory_store):
        for key in ["c", "a", "b"]:
            asyncio.run(empty_memory_store.insert(key, _record(key)))
        assert [r.id for r in asyncio.run(empty_memory_store.values())] == ["a", "b", "c"]


# ---------------------------------------------------------------------------
# PostgresStore
# ---------------------------------------------------------------------------

class FakeDb:
    """Records calls and replays canned rows."""

    def __init__(self, one=None, many=None):
        self.one = one
        self.many = many or []
        self.calls = []

    async def fetch_one(self, sql, *args):
        self.calls.append((sql, args))
        return self.one

    async def fetch_all(self, sql, *args):
        self.calls.append((sql, args))
        return self.many


@pytest.fixture
def fake_db(monkeypatch):
    def _install(**kwargs):
        fake = FakeDb(**kwargs)
        monkeypatch.setattr(store_module.db, "fetch_one", fake.fetch_one)
        monkeypatch.setattr(store_module.db, "fetch_all", fake.fetch_all)
        return fake
    return _install


def _encoded(record):
    return json.dumps(record.model_dump(mode="json", by_alias=True))


class TestPostgresStore:
    def test_get_decodes_json_text(self, fake_db):
        rec = _record("k1")
        fake = fake_db(one={"value": _encoded(rec)})
        pg = PostgresStore("ohlc", PriceRecord)

        assert asyncio.run(pg.get("k1")) == rec
        assert fake.calls[0][1] == ("ohlc", "k1")

    def test_get_missing(self, fake_db):
        fake_db(one=None)
        assert asyncio.run(PostgresStore("ohlc", PriceRecord).get("k1")) is None

    def test_insert_sends_camel_case_json(self, fake_db):
        fake = fake_db(one={"value": None})
        rec = _record("k1")

        assert asyncio.run(PostgresStore("ohlc", PriceRecord).insert("k1", rec)) is None
        table_name, key, payload = fake.calls[0][1]
        assert (table_name, key) == ("ohlc", "k1")
        assert json.loads(payload)["createdAt"] == "2024-01-15T00:00:00Z"

    def test_insert_returns_previous(self, fake_db):
        old = _record("k1", symbol="OLD")
        fake_db(one={"value": _encoded(old)})
        assert asyncio.run(PostgresStore("ohlc", PriceRecord).insert("k1", _record("k1"))) == old

    def test_remove(self, fake_db):
        rec = _record("k1")
        fake = fake_db(one={"value": _encoded(rec)})
        assert asyncio.run(PostgresStore("ohlc", PriceRecord).remove("k1")) == rec
        assert "DELETE FROM kv_records" in fake.calls[0][0]

    def test_values_accepts_decoded_dicts(self, fake_db):
        a, b = _record("a"), _record("b")
        fake = fake_db(many=[{"value": a.model_dump(mode="json", by_alias=True)}, {"value": _encoded(b)}])
        assert asyncio.run(PostgresStore("ohlc", PriceRecord).values()) == [a, b]
        assert 'ORDER BY key COLLATE "C"' in fake.calls[0][0]


# ---------------------------------------------------------------------------
# Factory / lookup
# ---------------------------------------------------------------------------

class TestOpenStore:
    def test_memory(self):
        assert isinstance(open_store("memory", "ohlc", PriceRecord), MemoryStore)

    def test_postgres(self):
        pg = open_store("postgres", "ohlc", PriceRecord)
        assert isinstance(pg, PostgresStore)
        assert pg.table_name == "ohlc"

    def test_unknown_backend(self):
        with pytest.raises(StoreError):
            open_store("redis", "ohlc", PriceRecord)


class TestAppStore:
    def _request(self, stores):
        app = FastAPI()
        app.state.stores = stores
        return Request({"type": "http", "app": app})

    def test_lookup(self):
        mem = MemoryStore()
        assert app_store(self._request({"ohlc": mem}), "ohlc") is mem

    def test_uninitialized(self):
        with pytest.raises(StoreError):
            app_store(self._request(None), "ohlc")

    def test_missing_table(self):
        with pytest.raises(StoreError):
            app_store(self._request({"ohlc": MemoryStore()}), "users")
