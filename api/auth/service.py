"""
User and API key business logic.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from uuid import uuid4

from core import settings
from core.errors import InvalidInput, NotFound
from core.store import RecordStore
from core.validation import current_timestamp, validate_email

from . import repository, schemas, security

logger = logging.getLogger(__name__)


def _present(value: str | None) -> bool:
    return isinstance(value, str) and bool(value.strip())


async def create_user(
    store: RecordStore[schemas.User],
    payload: schemas.UserCreateRequest,
) -> schemas.User:
    username = payload.username
    password = payload.password
    mail = payload.mail
    if not _present(username) or not password or not validate_email(mail):
        raise InvalidInput("Invalid input")

    salt = security.generate_salt()
    user = schemas.User(
        id=str(uuid4()),
        username=username,
        password_hash=security.hash_password(password, salt),
        salt=salt,
        mail=mail,
        created_at=current_timestamp(),
    )
    await repository.insert_user(store, user)
    logger.info("user_created id=%s username=%s", user.id, user.username)
    return user


async def create_api_key(
    users: RecordStore[schemas.User],
    api_keys: RecordStore[schemas.ApiKey],
    payload: schemas.ApiKeyCreateRequest,
) -> schemas.ApiKey:
    username = payload.username
    if not _present(username):
        raise InvalidInput("Username is required")

    user = await repository.find_user_by_username(users, username)
    if user is None:
        raise NotFound("User not found")

    created_at = current_timestamp()
    api_key = schemas.ApiKey(
        id=str(uuid4()),
        username=username,
        created_at=created_at,
        expires_at=created_at + timedelta(days=settings.api_key_ttl_days()),
    )
    await repository.insert_api_key(api_keys, api_key)
    logger.info("api_key_created id=%s username=%s expires_at=%s", api_key.id, username, api_key.expires_at)
    return api_key
