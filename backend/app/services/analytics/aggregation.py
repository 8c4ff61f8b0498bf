"""
Record History Aggregation

Read-only views over a content history used by the dashboard charts:
- trailing_window_series: records per day for the last N days (oldest first)
- subject_breakdown / content_type_breakdown: counts in first-seen order
- count_active_days: distinct active days inside a trailing window

Every function is total: an empty history yields an all-zero series and
empty breakdowns.
"""

from collections import Counter
from datetime import date, timedelta
from enum import Enum
from typing import Any, Iterable, Optional, Sequence

from app.models.analytics import CategoryCount, DayCount
from app.models.content import ContentRecord
from app.services.analytics.dates import day_key, days_between, today_key

DEFAULT_WINDOW_DAYS = 7
DAY_LABEL_FORMAT = "%b %d"


def _category_name(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _count_by(records: Iterable[ContentRecord], attribute: str) -> list[CategoryCount]:
    # Counter keeps first-insertion order for its keys
    counts = Counter(_category_name(getattr(record, attribute)) for record in records)
    return [CategoryCount(name=name, count=count) for name, count in counts.items()]


def trailing_window_series(
    records: Iterable[ContentRecord],
    today: Optional[date] = None,
    days: int = DEFAULT_WINDOW_DAYS,
) -> list[DayCount]:
    """
    Count records per calendar day over a trailing window.

    Args:
        records: Content history, any order.
        today: Last day of the window (defaults to the local current date).
        days: Window length, today included.

    Returns:
        list[DayCount]: Exactly ``days`` entries ordered oldest first.
            Days without records report 0; records outside the window are
            ignored.
    """
    end = today_key(today)
    window = [end - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    counts = Counter(day_key(record.created_at) for record in records)

    return [
        DayCount(date=day, label=day.strftime(DAY_LABEL_FORMAT), count=counts.get(day, 0))
        for day in window
    ]


def subject_breakdown(records: Iterable[ContentRecord]) -> list[CategoryCount]:
    """Records per subject, in the order subjects first appear."""
    return _count_by(records, "subject")


def content_type_breakdown(records: Iterable[ContentRecord]) -> list[CategoryCount]:
    """Records per content type, in the order types first appear."""
    return _count_by(records, "content_type")


def records_in_window(
    records: Iterable[ContentRecord],
    today: Optional[date] = None,
    days: int = DEFAULT_WINDOW_DAYS,
) -> list[ContentRecord]:
    """Records whose day falls inside the trailing window, input order kept."""
    end = today_key(today)
    return [
        record
        for record in records
        if 0 <= days_between(end, day_key(record.created_at)) < days
    ]


def count_active_days(
    records: Sequence[ContentRecord],
    days: int,
    today: Optional[date] = None,
) -> int:
    """Number of distinct days with activity inside a trailing window."""
    return len({day_key(r.created_at) for r in records_in_window(records, today, days)})
