"""
Environment-driven settings.

Every value is read at call time so tests can override it with
`monkeypatch.setenv` without rebuilding the app.
"""

from __future__ import annotations

import os

DEFAULT_STORE_BACKEND = "memory"
DEFAULT_API_KEY_TTL_DAYS = 30
DEFAULT_BCRYPT_ROUNDS = 12
DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def store_backend() -> str:
    return os.environ.get("STORE_BACKEND", DEFAULT_STORE_BACKEND).strip().lower() or DEFAULT_STORE_BACKEND


def api_key_ttl_days() -> int:
    days = _env_int("API_KEY_TTL_DAYS", DEFAULT_API_KEY_TTL_DAYS)
    return days if days > 0 else DEFAULT_API_KEY_TTL_DAYS


def bcrypt_rounds() -> int:
    # bcrypt only accepts cost factors in [4, 31].
    return max(4, min(_env_int("BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS), 31))


def expose_error_details() -> bool:
    return _env_bool("EXPOSE_ERROR_DETAILS", False)


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
