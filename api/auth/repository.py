"""
User and API key persistence helpers.
"""

from __future__ import annotations

from core.store import RecordStore

from .schemas import ApiKey, User

USERS_TABLE = "users"
API_KEYS_TABLE = "apikeys"


async def insert_user(store: RecordStore[User], user: User) -> User:
    await store.insert(user.id, user)
    return user


async def find_user_by_username(store: RecordStore[User], username: str) -> User | None:
    # Usernames are not unique; the first match in key order wins.
    for user in await store.values():
        if user.username == username:
            return user
    return None


async def insert_api_key(store: RecordStore[ApiKey], api_key: ApiKey) -> ApiKey:
    await store.insert(api_key.id, api_key)
    return api_key
