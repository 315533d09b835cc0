"""
Input validation helpers shared by the feature services.
"""

from __future__ import annotations

import re
import time
from datetime import datetime, timedelta, timezone

# Loose on purpose: "something@something.something", not RFC 5322.
_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def validate_email(text: str | None) -> bool:
    if not isinstance(text, str):
        return False
    return _EMAIL_RE.search(text) is not None


def parse_date(text: str | None) -> datetime | None:
    """
    Parse an ISO 8601 date or date-time into an aware UTC datetime.

    Naive values are read as UTC. Returns None when `text` is not parseable.
    """
    if not isinstance(text, str):
        return None
    raw = text.strip()
    if not raw:
        return None
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def is_valid_date(text: str | None) -> bool:
    return parse_date(text) is not None


def current_timestamp() -> datetime:
    millis = time.time_ns() // 1_000_000
    return _EPOCH + timedelta(milliseconds=millis)
