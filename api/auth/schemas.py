"""
User and API key schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserCreateRequest(BaseModel):
    username: str | None = None
    password: str | None = None
    mail: str | None = None


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    username: str
    password_hash: str = Field(alias="passwordHash")
    salt: str
    mail: str
    created_at: datetime = Field(alias="createdAt")


class ApiKeyCreateRequest(BaseModel):
    username: str | None = None


class ApiKey(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    username: str
    created_at: datetime = Field(alias="createdAt")
    expires_at: datetime = Field(alias="expiresAt")
