"""
Calendar-day bucketing shared by the analytics components.

A "day key" is a ``datetime.date`` in local time. Naive timestamps are
taken to be local already; aware timestamps are converted to the local
zone first, so two records created on the same local calendar day always
land in the same bucket.

Usage:
    from app.services.analytics.dates import day_key, days_between

    day_key(record.created_at)                 # date(2025, 3, 14)
    days_between(date(2025, 3, 14), date(2025, 3, 12))  # 2
"""

from datetime import date, datetime
from typing import Optional, Union

Timestamp = Union[datetime, date, str]


def day_key(timestamp: Timestamp) -> date:
    """
    Map a timestamp to its local calendar day.

    Args:
        timestamp: ``datetime`` (naive = local, aware = converted to local),
            ``date`` (returned unchanged), or an ISO-8601 string such as
            ``"2025-03-14T09:30:00Z"``.

    Returns:
        The calendar day the timestamp falls on.
    """
    if isinstance(timestamp, str):
        # fromisoformat only accepts "Z" from 3.11 on
        timestamp = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))

    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is not None:
            timestamp = timestamp.astimezone()
        return timestamp.date()

    return timestamp


def days_between(a: date, b: date) -> int:
    """Signed number of calendar days from ``b`` to ``a`` (``a - b``)."""
    return (a - b).days


def today_key(today: Optional[date] = None) -> date:
    """Reference day for trailing-window computations (injectable for tests)."""
    return today if today is not None else date.today()
