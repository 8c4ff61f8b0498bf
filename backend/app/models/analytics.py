"""
Learning Analytics API Models (Pydantic)

Response schemas for insights derived from the content history:
- DayCount: one point of the trailing activity series
- CategoryCount: one row of a subject/content-type breakdown
- StreakData: current and longest study streaks with milestones
- LearningAnalytics: everything the dashboard shows in one payload
- WeeklyReport: the figures for the weekly learning summary

All values are recomputed from the full record history on every request;
nothing here is persisted.
"""

from datetime import date
from typing import Optional

from pydantic import Field

from app.models.base import StrictResponse


class DayCount(StrictResponse):
    """Records created on one calendar day."""

    date: date
    label: str  # e.g. "Oct 19"
    count: int = 0


class CategoryCount(StrictResponse):
    """Records grouped under one subject or content type."""

    name: str
    count: int


class StreakData(StrictResponse):
    """
    Study streak information.

    ``current_streak`` counts consecutive days with at least one generated
    item, allowing one day of grace: studying yesterday but not yet today
    keeps the streak alive.
    """

    current_streak: int  # Days
    longest_streak: int
    streak_start: Optional[date] = None
    last_activity: Optional[date] = None
    is_active_today: bool = False
    days_this_week: int = 0
    days_this_month: int = 0
    # Milestones
    milestones_reached: list[int] = Field(default_factory=list)
    next_milestone: Optional[int] = None


class RecommendationsResponse(StrictResponse):
    """Suggested next topics, most relevant first."""

    topics: list[str] = Field(default_factory=list)


class LearningAnalytics(StrictResponse):
    """Dashboard payload combining every analytics view."""

    total_items: int
    streak: StreakData
    daily_activity: list[DayCount]
    subject_breakdown: list[CategoryCount] = Field(default_factory=list)
    content_type_breakdown: list[CategoryCount] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class WeeklyReport(StrictResponse):
    """
    Weekly learning summary.

    Breakdowns cover only the trailing week; ``current_streak`` is computed
    over the whole history.
    """

    period_start: date
    period_end: date
    total_topics: int
    current_streak: int
    subject_breakdown: list[CategoryCount] = Field(default_factory=list)
    content_type_breakdown: list[CategoryCount] = Field(default_factory=list)
    has_activity: bool = False
