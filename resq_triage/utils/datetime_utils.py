"""Timestamp helpers for incident records."""

from datetime import datetime, timezone

__all__ = [
    "get_current_timestamp",
    "ensure_utc",
]

def get_current_timestamp() -> datetime:
    """Return the current UTC datetime.

    Stored as-is in MongoDB, where it becomes a BSON Date (millisecond
    precision).
    """
    return datetime.now(tz=timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from the store."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
