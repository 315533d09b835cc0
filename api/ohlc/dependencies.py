"""
Store dependency for OHLC routes.
"""

from __future__ import annotations

from fastapi import Request

from core.store import RecordStore, app_store

from .repository import TABLE_NAME


def get_ohlc_store(request: Request) -> RecordStore:
    return app_store(request, TABLE_NAME)
