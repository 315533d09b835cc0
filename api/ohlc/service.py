"""
OHLC business logic.

Every operation validates its input before touching the store, so a rejected
request never leaves a partial write behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

from core.errors import InvalidInput, NotFound
from core.store import RecordStore
from core.validation import current_timestamp, parse_date

from . import repository, schemas

logger = logging.getLogger(__name__)

RECORD_NOT_FOUND = "Record not found"


@dataclass(frozen=True)
class ValidatedOhlc:
    symbol: str
    open: float
    close: float
    high: float
    low: float
    idx_date: datetime


def validate_payload(payload: schemas.OhlcPayload) -> ValidatedOhlc:
    symbol = payload.symbol or ""
    idx_date = parse_date(payload.idx_date)
    if not symbol.strip() or idx_date is None:
        raise InvalidInput("Invalid input")
    return ValidatedOhlc(
        symbol=symbol,
        open=payload.open,
        close=payload.close,
        high=payload.high,
        low=payload.low,
        idx_date=idx_date,
    )


def _build_record(record_id: str, fields: ValidatedOhlc) -> schemas.PriceRecord:
    return schemas.PriceRecord(
        id=record_id,
        symbol=fields.symbol,
        open=fields.open,
        close=fields.close,
        high=fields.high,
        low=fields.low,
        idx_date=fields.idx_date,
        created_at=current_timestamp(),
    )


async def create_record(
    store: RecordStore[schemas.PriceRecord],
    payload: schemas.OhlcPayload,
) -> schemas.PriceRecord:
    fields = validate_payload(payload)
    record = await repository.insert_record(store, _build_record(str(uuid4()), fields))
    logger.info("ohlc_created id=%s symbol=%s", record.id, record.symbol)
    return record


async def update_record(
    store: RecordStore[schemas.PriceRecord],
    record_id: str,
    payload: schemas.OhlcPayload,
) -> schemas.PriceRecord:
    """
    Full replacement: every field except `id` is overwritten and
    `createdAt` is re-stamped.
    """
    fields = validate_payload(payload)
    existing = await repository.get_record(store, record_id)
    if existing is None:
        raise NotFound(RECORD_NOT_FOUND)

    record = await repository.insert_record(store, _build_record(existing.id, fields))
    logger.info("ohlc_updated id=%s symbol=%s", record.id, record.symbol)
    return record


async def delete_record(store: RecordStore[schemas.PriceRecord], record_id: str) -> None:
    existing = await repository.get_record(store, record_id)
    if existing is None:
        raise NotFound(RECORD_NOT_FOUND)

    await repository.delete_record(store, record_id)
    logger.info("ohlc_deleted id=%s", record_id)


async def list_by_symbol(
    store: RecordStore[schemas.PriceRecord],
    symbol: str | None,
) -> list[schemas.PriceRecord]:
    if not isinstance(symbol, str) or not symbol.strip():
        raise InvalidInput("Invalid or missing symbol")
    return await repository.list_by_symbol(store, symbol)


async def list_by_date_range(
    store: RecordStore[schemas.PriceRecord],
    start_date: str | None,
    end_date: str | None,
) -> list[schemas.PriceRecord]:
    start = parse_date(start_date)
    end = parse_date(end_date)
    if start is None or end is None:
        raise InvalidInput("Invalid or missing startDate/endDate")
    return await repository.list_by_idx_date_range(store, start=start, end=end)


async def get_summary(
    store: RecordStore[schemas.PriceRecord],
    record_id: str,
) -> schemas.PriceRecordSummary:
    record = await repository.get_record(store, record_id)
    if record is None:
        raise NotFound(RECORD_NOT_FOUND)
    return schemas.PriceRecordSummary(
        id=record.id,
        symbol=record.symbol,
        idx_date=record.idx_date,
        created_at=record.created_at,
    )
