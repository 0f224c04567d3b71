"""
DateTime utilities
==================

All timestamps persisted to MongoDB are timezone-aware UTC datetimes.
Calendar dates (experience/education ranges) have no BSON type of their own,
so they are stored as midnight-UTC datetimes and converted back on read.
"""
from datetime import date, datetime, time, timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def date_to_datetime(value: Optional[date]) -> Optional[datetime]:
    """Convert a calendar date to midnight UTC for BSON storage"""
    if value is None:
        return None
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def datetime_to_date(value: Optional[datetime]) -> Optional[date]:
    """Convert a stored BSON datetime back to its calendar date"""
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_utc(value).date()
    return value
