"""
User and API key endpoints.

Keys are issued here only; no route checks a presented key.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.store import RecordStore

from . import schemas, service
from .dependencies import get_api_key_store, get_user_store

router = APIRouter()


# The stored record is returned as-is, hash and salt included.
@router.post("/users", status_code=status.HTTP_201_CREATED, response_model=schemas.User)
async def create_user(
    payload: schemas.UserCreateRequest,
    users: RecordStore = Depends(get_user_store),
) -> schemas.User:
    return await service.create_user(users, payload)


@router.post("/apikeys", status_code=status.HTTP_201_CREATED, response_model=schemas.ApiKey)
async def create_api_key(
    payload: schemas.ApiKeyCreateRequest,
    users: RecordStore = Depends(get_user_store),
    api_keys: RecordStore = Depends(get_api_key_store),
) -> schemas.ApiKey:
    return await service.create_api_key(users, api_keys, payload)
