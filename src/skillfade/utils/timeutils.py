"""Timestamp helpers."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """
    Current UTC time as a naive datetime.

    SQLite's DateTime columns drop tzinfo, so every stored timestamp is
    naive UTC.

    Returns:
        Naive datetime in UTC
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_utc(value: datetime) -> datetime:
    """
    Normalize a datetime to an aware UTC datetime.

    Naive values are assumed to already be UTC.

    Examples:
        >>> as_utc(datetime(2024, 1, 1)).tzinfo
        datetime.timezone.utc
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_naive_utc(value: datetime) -> datetime:
    """
    Convert a datetime to naive UTC for storage.

    Examples:
        >>> to_naive_utc(datetime(2024, 1, 1, 12, tzinfo=timezone.utc))
        datetime.datetime(2024, 1, 1, 12, 0)
    """
    return as_utc(value).replace(tzinfo=None)
