"""
Store dependencies for user and API key routes.
"""

from __future__ import annotations

from fastapi import Request

from core.store import RecordStore, app_store

from .repository import API_KEYS_TABLE, USERS_TABLE


def get_user_store(request: Request) -> RecordStore:
    return app_store(request, USERS_TABLE)


def get_api_key_store(request: Request) -> RecordStore:
    return app_store(request, API_KEYS_TABLE)
