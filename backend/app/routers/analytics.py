"""
Analytics API Router

Learning insights derived from the full content history.

Endpoints:
- GET /api/analytics/overview - Everything the dashboard shows
- GET /api/analytics/streak - Current/longest study streak
- GET /api/analytics/daily - Records per day for the trailing window
- GET /api/analytics/subjects - Records per subject
- GET /api/analytics/content-types - Records per content type
- GET /api/analytics/recommendations - Suggested next topics
- GET /api/analytics/weekly-report - Weekly learning summary figures
"""

import logging

from fastapi import APIRouter, Depends, Request

from app.dependencies import get_analytics_service, get_history_service
from app.middleware.error_handling import handle_endpoint_errors
from app.middleware.rate_limit import limit_analytics
from app.models.analytics import (
    CategoryCount,
    DayCount,
    LearningAnalytics,
    RecommendationsResponse,
    StreakData,
    WeeklyReport,
)
from app.services.analytics import (
    LearningAnalyticsService,
    content_type_breakdown,
    subject_breakdown,
    trailing_window_series,
)
from app.services.content_history import ContentHistoryService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/overview", response_model=LearningAnalytics)
@limit_analytics
@handle_endpoint_errors("Get analytics overview")
async def get_overview(
    request: Request,
    history: ContentHistoryService = Depends(get_history_service),
    analytics: LearningAnalyticsService = Depends(get_analytics_service),
) -> LearningAnalytics:
    """
    Get the full analytics dashboard payload.

    Returns:
    - Study streak with milestones
    - Records per day for the last 7 days
    - Subject and content type breakdowns
    - Recommended next topics
    """
    records = await history.list_records()
    return analytics.get_overview(records)


@router.get("/streak", response_model=StreakData)
@handle_endpoint_errors("Get study streak")
async def get_streak(
    history: ContentHistoryService = Depends(get_history_service),
    analytics: LearningAnalyticsService = Depends(get_analytics_service),
) -> StreakData:
    """Get current and longest study streak."""
    records = await history.list_records()
    return analytics.get_streak_data(records)


@router.get("/daily", response_model=list[DayCount])
@handle_endpoint_errors("Get daily activity")
async def get_daily_activity(
    history: ContentHistoryService = Depends(get_history_service),
    analytics: LearningAnalyticsService = Depends(get_analytics_service),
) -> list[DayCount]:
    """Records per calendar day, oldest first, always one entry per day."""
    records = await history.list_records()
    return trailing_window_series(records, days=analytics.window_days)


@router.get("/subjects", response_model=list[CategoryCount])
@handle_endpoint_errors("Get subject breakdown")
async def get_subject_breakdown(
    history: ContentHistoryService = Depends(get_history_service),
) -> list[CategoryCount]:
    """Records per subject in first-seen order."""
    return subject_breakdown(await history.list_records())


@router.get("/content-types", response_model=list[CategoryCount])
@handle_endpoint_errors("Get content type breakdown")
async def get_content_type_breakdown(
    history: ContentHistoryService = Depends(get_history_service),
) -> list[CategoryCount]:
    """Records per content type in first-seen order."""
    return content_type_breakdown(await history.list_records())


@router.get("/recommendations", response_model=RecommendationsResponse)
@handle_endpoint_errors("Get recommendations")
async def get_recommendations(
    history: ContentHistoryService = Depends(get_history_service),
    analytics: LearningAnalyticsService = Depends(get_analytics_service),
) -> RecommendationsResponse:
    """Suggested next topics based on what has been studied."""
    records = await history.list_records()
    return RecommendationsResponse(topics=analytics.get_recommendations(records))


@router.get("/weekly-report", response_model=WeeklyReport)
@limit_analytics
@handle_endpoint_errors("Get weekly report")
async def get_weekly_report(
    request: Request,
    history: ContentHistoryService = Depends(get_history_service),
    analytics: LearningAnalyticsService = Depends(get_analytics_service),
) -> WeeklyReport:
    """
    Figures for the weekly learning summary.

    Totals and breakdowns cover the last 7 days; the streak covers the
    whole history.
    """
    records = await history.list_records()
    return analytics.build_weekly_report(records)
