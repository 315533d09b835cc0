"""
Ordered key-value stores for record tables.

A store maps an opaque string key to one pydantic record and returns values
in key order. Backends:
- `MemoryStore`: process-local dict, used for development and tests.
- `PostgresStore`: one row per record in `kv_records`, durable across restarts.

Stores are created once per app (see `api/main.py`) and handed to routes
through FastAPI dependencies; nothing here is a module-level singleton.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from fastapi import Request
from pydantic import BaseModel

from . import db

RecordT = TypeVar("RecordT", bound=BaseModel)


class StoreError(RuntimeError):
    pass


class RecordStore(ABC, Generic[RecordT]):
    @abstractmethod
    async def get(self, key: str) -> RecordT | None:
        ...

    @abstractmethod
    async def insert(self, key: str, record: RecordT) -> RecordT | None:
        """
        Insert or overwrite `key`. Returns the previous record, if any.
        """

    @abstractmethod
    async def remove(self, key: str) -> RecordT | None:
        """
        Delete `key`. Returns the removed record, if any.
        """

    @abstractmethod
    async def values(self) -> list[RecordT]:
        """
        All records, ordered by key.
        """


class MemoryStore(RecordStore[RecordT]):
    def __init__(self) -> None:
        self._records: dict[str, RecordT] = {}

    def __len__(self) -> int:
        return len(self._records)

    async def get(self, key: str) -> RecordT | None:
        return self._records.get(key)

    async def insert(self, key: str, record: RecordT) -> RecordT | None:
        previous = self._records.get(key)
        self._records[key] = record
        return previous

    async def remove(self, key: str) -> RecordT | None:
        return self._records.pop(key, None)

    async def values(self) -> list[RecordT]:
        return [self._records[key] for key in sorted(self._records)]


class PostgresStore(RecordStore[RecordT]):
    def __init__(self, table_name: str, model: type[RecordT]) -> None:
        self.table_name = table_name
        self.model = model

    def _encode(self, record: RecordT) -> str:
        return json.dumps(record.model_dump(mode="json", by_alias=True), ensure_ascii=True)

    def _decode(self, raw: Any) -> RecordT:
        # asyncpg hands jsonb back as text unless a codec is registered.
        data = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
        return self.model.model_validate(data)

    def _decode_row(self, row: dict[str, Any] | None) -> RecordT | None:
        if row is None or row.get("value") is None:
            return None
        return self._decode(row["value"])

    async def get(self, key: str) -> RecordT | None:
        row = await db.fetch_one(
            """
            SELECT value
            FROM kv_records
            WHERE table_name = $1
              AND key = $2
            """,
            self.table_name,
            key,
        )
        return self._decode_row(row)

    async def insert(self, key: str, record: RecordT) -> RecordT | None:
        # Every CTE sees the pre-statement snapshot, so `previous` is the old value.
        row = await db.fetch_one(
            """
            WITH previous AS (
                SELECT value
                FROM kv_records
                WHERE table_name = $1
                  AND key = $2
            ),
            upserted AS (
                INSERT INTO kv_records (table_name, key, value)
                VALUES ($1, $2, $3::jsonb)
                ON CONFLICT (table_name, key) DO UPDATE
                SET value = EXCLUDED.value,
                    updated_at = now()
                RETURNING key
            )
            SELECT (SELECT value FROM previous) AS value
            FROM upserted
            """,
            self.table_name,
            key,
            self._encode(record),
        )
        return self._decode_row(row)

    async def remove(self, key: str) -> RecordT | None:
        row = await db.fetch_one(
            """
            DELETE FROM kv_records
            WHERE table_name = $1
              AND key = $2
            RETURNING value
            """,
            self.table_name,
            key,
        )
        return self._decode_row(row)

    async def values(self) -> list[RecordT]:
        rows = await db.fetch_all(
            """
            SELECT value
            FROM kv_records
            WHERE table_name = $1
            ORDER BY key COLLATE "C"
            """,
            self.table_name,
        )
        return [self._decode(row["value"]) for row in rows]


def open_store(backend: str, table_name: str, model: type[RecordT]) -> RecordStore[RecordT]:
    if backend == "memory":
        return MemoryStore()
    if backend == "postgres":
        return PostgresStore(table_name, model)
    raise StoreError(f"Unknown store backend: {backend!r}.")


def app_store(request: Request, table_name: str) -> RecordStore:
    """
    Look up the store registered on the app for `table_name`.
    """
    stores: dict[str, RecordStore] | None = getattr(request.app.state, "stores", None)
    if not stores or table_name not in stores:
        raise StoreError(f"Store {table_name!r} is not initialized.")
    return stores[table_name]
