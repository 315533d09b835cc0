"""
Password hashing helpers.

Passwords are pre-hashed with SHA-256 and base64-encoded before bcrypt, so
inputs longer than bcrypt's 72-byte limit still contribute every byte.
"""

from __future__ import annotations

import base64
import hashlib

import bcrypt

from core import settings


def _prehash(plain_password: str) -> bytes:
    digest = hashlib.sha256(plain_password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def generate_salt() -> str:
    return bcrypt.gensalt(rounds=settings.bcrypt_rounds()).decode("utf-8")


def hash_password(plain_password: str, salt: str) -> str:
    return bcrypt.hashpw(_prehash(plain_password), salt.encode("utf-8")).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    hashed = (password_hash or "").encode("utf-8")
    if not plain_password or not hashed:
        return False
    try:
        return bcrypt.checkpw(_prehash(plain_password), hashed)
    except ValueError:
        return False
