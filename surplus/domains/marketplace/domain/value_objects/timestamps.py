"""
Timestamp normalization for availability windows.

Listings may arrive with naive timestamps (stored as UTC) or aware ones;
comparisons always happen on aware UTC values.
"""

from datetime import UTC, datetime


def as_utc(value: datetime) -> datetime:
    """Aware UTC copy of ``value``; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


__all__ = ["as_utc"]
