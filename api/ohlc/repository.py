"""
OHLC persistence helpers on top of the record store.
"""

from __future__ import annotations

from datetime import datetime

from core.store import RecordStore

from .schemas import PriceRecord

TABLE_NAME = "ohlc"


async def insert_record(store: RecordStore[PriceRecord], record: PriceRecord) -> PriceRecord:
    await store.insert(record.id, record)
    return record


async def get_record(store: RecordStore[PriceRecord], record_id: str) -> PriceRecord | None:
    return await store.get(record_id)


async def delete_record(store: RecordStore[PriceRecord], record_id: str) -> PriceRecord | None:
    return await store.remove(record_id)


async def list_by_symbol(store: RecordStore[PriceRecord], symbol: str) -> list[PriceRecord]:
    return [record for record in await store.values() if record.symbol == symbol]


async def list_by_idx_date_range(
    store: RecordStore[PriceRecord],
    *,
    start: datetime,
    end: datetime,
) -> list[PriceRecord]:
    """
    Records whose `idx_date` falls in [start, end], both ends inclusive.
    """
    return [record for record in await store.values() if start <= record.idx_date <= end]
