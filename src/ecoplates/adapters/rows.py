"""Helpers for decoding Supabase rows."""

from datetime import datetime
from uuid import UUID


def parse_timestamp(value: object) -> datetime | None:
    """Return a datetime for an ISO timestamp column, if set."""
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None


def parse_uuid(value: object) -> UUID | None:
    """Return a UUID for a nullable reference column."""
    if value is None or value == "":
        return None
    return UUID(str(value))


def optional_text(value: object) -> str | None:
    """Return a text column, mapping empty strings to None."""
    if value is None:
        return None
    text = str(value)
    return text or None
