"""
OHLC price record schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class OhlcPayload(BaseModel):
    """
    Body for create and full-replace updates.

    Text fields are optional here so the service can report them as invalid
    input instead of a framework validation error.
    """

    symbol: str | None = None
    open: float = Field(..., allow_inf_nan=False)
    close: float = Field(..., allow_inf_nan=False)
    high: float = Field(..., allow_inf_nan=False)
    low: float = Field(..., allow_inf_nan=False)
    idx_date: str | None = None


class PriceRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    symbol: str
    open: float
    close: float
    high: float
    low: float
    idx_date: datetime
    created_at: datetime = Field(alias="createdAt")


class PriceRecordSummary(BaseModel):
    """
    Single-get projection: no price fields.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    symbol: str
    idx_date: datetime
    created_at: datetime = Field(alias="createdAt")
