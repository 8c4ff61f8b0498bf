"""
Study Streak Calculation

Pure functions that turn record timestamps into streak figures.

Current streak rule:
    Days are bucketed and deduplicated, then scanned from the most recent
    backward with a cursor starting at today. A day 0 or 1 days before the
    cursor extends the streak and becomes the new cursor; the first larger
    gap ends the scan. A user who studied yesterday but not yet today still
    has an active streak.

    Because days are deduplicated first, several records on the same day
    count once and never interrupt the scan.

Usage:
    from app.services.analytics.streaks import calculate_current_streak

    streak = calculate_current_streak(r.created_at for r in records)
"""

from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from app.services.analytics.dates import Timestamp, day_key, days_between, today_key

# A day this close to the cursor continues the streak
_MAX_STREAK_GAP = 1


def distinct_days(timestamps: Iterable[Timestamp]) -> list[date]:
    """
    Bucket timestamps into days and deduplicate.

    Returns:
        list[date]: Distinct days, most recent first.
    """
    return sorted({day_key(ts) for ts in timestamps}, reverse=True)


def calculate_streak_details(
    timestamps: Iterable[Timestamp], today: Optional[date] = None
) -> tuple[int, Optional[date]]:
    """
    Calculate the current streak and the day it started.

    Args:
        timestamps: Record creation times, any order, duplicates allowed.
        today: Reference day (defaults to the local current date).

    Returns:
        tuple[int, Optional[date]]: Tuple containing:
            - streak_count: Consecutive active days counted back from today.
            - streak_start: Oldest day of the current streak, or None.
    """
    days = distinct_days(timestamps)
    if not days:
        return 0, None

    streak = 0
    streak_start = None
    cursor = today_key(today)

    for day in days:
        gap = days_between(cursor, day)
        if gap < 0 or gap > _MAX_STREAK_GAP:
            break
        streak += 1
        streak_start = day
        cursor = day

    return streak, streak_start


def calculate_current_streak(
    timestamps: Iterable[Timestamp], today: Optional[date] = None
) -> int:
    """
    Count consecutive study days ending today, with one day of grace.

    Examples:
        With today = D: days [D, D-1, D-1, D-3] -> 2; [D-1, D-2] -> 2;
        [D-2] -> 0; [] -> 0. A day after today ends the scan, so [D+1, D] -> 0.
    """
    streak, _ = calculate_streak_details(timestamps, today)
    return streak


def calculate_longest_streak(timestamps: Iterable[Timestamp]) -> int:
    """
    Calculate the longest run of consecutive active days ever achieved.

    Unlike the current streak this ignores today entirely.
    """
    days = sorted(distinct_days(timestamps))
    if not days:
        return 0

    longest = 1
    current = 1

    for previous, day in zip(days, days[1:]):
        if day == previous + timedelta(days=1):
            current += 1
            longest = max(longest, current)
        else:
            current = 1

    return longest


def reached_milestones(longest_streak: int, milestones: Sequence[int]) -> list[int]:
    """Milestones (in days) the user has hit at least once."""
    return [m for m in sorted(milestones) if longest_streak >= m]


def next_milestone(current_streak: int, milestones: Sequence[int]) -> Optional[int]:
    """The next milestone above the current streak, or None past the last one."""
    return next((m for m in sorted(milestones) if m > current_streak), None)
