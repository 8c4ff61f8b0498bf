"""
Learning Analytics Service

Composes the pure analytics components over one content history.

Responsibilities:
- Streak data (current/longest streak, milestones, activity counts)
- Dashboard overview (daily series, breakdowns, recommendations)
- Weekly learning report figures

The service holds configuration only. Callers pass the full, current
record history on every call and nothing is cached between calls.

Usage:
    from app.services.analytics import LearningAnalyticsService

    service = LearningAnalyticsService()
    overview = service.get_overview(records)
    report = service.build_weekly_report(records)
"""

import logging
from datetime import date, timedelta
from typing import Optional, Sequence

from app.config import settings
from app.models.analytics import LearningAnalytics, StreakData, WeeklyReport
from app.models.content import ContentRecord
from app.services.analytics.aggregation import (
    content_type_breakdown,
    count_active_days,
    records_in_window,
    subject_breakdown,
    trailing_window_series,
)
from app.services.analytics.dates import today_key
from app.services.analytics.recommendations import (
    RecommendationStrategy,
    recommend_topics,
)
from app.services.analytics.streaks import (
    calculate_longest_streak,
    calculate_streak_details,
    distinct_days,
    next_milestone,
    reached_milestones,
)

logger = logging.getLogger(__name__)

DAYS_IN_WEEK = 7
DAYS_IN_MONTH = 30


class LearningAnalyticsService:
    """
    Stateless facade over streak, aggregation and recommendation functions.

    Args:
        window_days: Length of the daily activity series.
        recommendation_limit: Maximum suggested topics.
        milestones: Streak milestones in days.
        strategy: Recommendation strategy (defaults to the rule table).
    """

    def __init__(
        self,
        window_days: Optional[int] = None,
        recommendation_limit: Optional[int] = None,
        milestones: Optional[Sequence[int]] = None,
        strategy: Optional[RecommendationStrategy] = None,
    ):
        self.window_days = window_days or settings.ANALYTICS_WINDOW_DAYS
        self.recommendation_limit = recommendation_limit or settings.RECOMMENDATION_LIMIT
        self.milestones = list(milestones or settings.STREAK_MILESTONES)
        self.strategy = strategy

    def get_streak_data(
        self, records: Sequence[ContentRecord], today: Optional[date] = None
    ) -> StreakData:
        """Current and longest streak plus activity counts and milestones."""
        today = today_key(today)
        timestamps = [record.created_at for record in records]

        if not timestamps:
            return StreakData(
                current_streak=0,
                longest_streak=0,
                next_milestone=next_milestone(0, self.milestones),
            )

        current_streak, streak_start = calculate_streak_details(timestamps, today)
        longest_streak = calculate_longest_streak(timestamps)
        last_activity = distinct_days(timestamps)[0]

        return StreakData(
            current_streak=current_streak,
            longest_streak=longest_streak,
            streak_start=streak_start,
            last_activity=last_activity,
            is_active_today=last_activity == today,
            days_this_week=count_active_days(records, DAYS_IN_WEEK, today),
            days_this_month=count_active_days(records, DAYS_IN_MONTH, today),
            milestones_reached=reached_milestones(longest_streak, self.milestones),
            next_milestone=next_milestone(current_streak, self.milestones),
        )

    def get_recommendations(self, records: Sequence[ContentRecord]) -> list[str]:
        return recommend_topics(
            records, strategy=self.strategy, limit=self.recommendation_limit
        )

    def get_overview(
        self, records: Sequence[ContentRecord], today: Optional[date] = None
    ) -> LearningAnalytics:
        """Everything the analytics dashboard renders, from one history."""
        overview = LearningAnalytics(
            total_items=len(records),
            streak=self.get_streak_data(records, today),
            daily_activity=trailing_window_series(records, today, self.window_days),
            subject_breakdown=subject_breakdown(records),
            content_type_breakdown=content_type_breakdown(records),
            recommendations=self.get_recommendations(records),
        )
        logger.debug(
            f"Analytics overview: {overview.total_items} items, "
            f"streak={overview.streak.current_streak}"
        )
        return overview

    def build_weekly_report(
        self, records: Sequence[ContentRecord], today: Optional[date] = None
    ) -> WeeklyReport:
        """
        Figures for the weekly learning summary.

        Counts and breakdowns cover the trailing seven days (today
        included). The streak uses the whole history.
        """
        today = today_key(today)
        weekly = records_in_window(records, today, DAYS_IN_WEEK)
        current_streak, _ = calculate_streak_details(
            [record.created_at for record in records], today
        )

        return WeeklyReport(
            period_start=today - timedelta(days=DAYS_IN_WEEK - 1),
            period_end=today,
            total_topics=len(weekly),
            current_streak=current_streak,
            subject_breakdown=subject_breakdown(weekly),
            content_type_breakdown=content_type_breakdown(weekly),
            has_activity=bool(weekly),
        )
