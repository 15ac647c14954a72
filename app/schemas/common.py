"""
Shared schema helpers.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel


def blank_to_none(value: Any) -> Any:
    """Treat an empty or whitespace-only form value as not provided."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert to an aware UTC datetime; naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class DeleteResult(BaseModel):
    """Outcome of a delete command; unconfirmed deletes are no-ops."""
    id: int
    deleted: bool
