"""
OHLC price record API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from core.store import RecordStore

from . import schemas, service
from .dependencies import get_ohlc_store

router = APIRouter()


@router.post("/ohlc", status_code=status.HTTP_201_CREATED, response_model=schemas.PriceRecord)
async def create_ohlc(
    payload: schemas.OhlcPayload,
    store: RecordStore = Depends(get_ohlc_store),
) -> schemas.PriceRecord:
    return await service.create_record(store, payload)


@router.get("/ohlc", response_model=list[schemas.PriceRecord])
async def list_ohlc_by_symbol(
    symbol: str | None = Query(default=None),
    store: RecordStore = Depends(get_ohlc_store),
) -> list[schemas.PriceRecord]:
    return await service.list_by_symbol(store, symbol)


# Registered before /ohlc/{record_id} so "by_date" is not taken as an id.
@router.get("/ohlc/by_date", response_model=list[schemas.PriceRecord])
async def list_ohlc_by_date(
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    store: RecordStore = Depends(get_ohlc_store),
) -> list[schemas.PriceRecord]:
    return await service.list_by_date_range(store, start_date, end_date)


@router.get("/ohlc/{record_id}", response_model=schemas.PriceRecordSummary)
async def get_ohlc(
    record_id: str,
    store: RecordStore = Depends(get_ohlc_store),
) -> schemas.PriceRecordSummary:
    return await service.get_summary(store, record_id)


@router.put("/ohlc/{record_id}", response_model=schemas.PriceRecord)
async def update_ohlc(
    record_id: str,
    payload: schemas.OhlcPayload,
    store: RecordStore = Depends(get_ohlc_store),
) -> schemas.PriceRecord:
    return await service.update_record(store, record_id, payload)


@router.delete("/ohlc/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ohlc(
    record_id: str,
    store: RecordStore = Depends(get_ohlc_store),
) -> Response:
    await service.delete_record(store, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
