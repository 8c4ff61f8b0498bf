"""Pydantic models for the application."""

from app.models.analytics import (
    CategoryCount,
    DayCount,
    LearningAnalytics,
    RecommendationsResponse,
    StreakData,
    WeeklyReport,
)
from app.models.content import (
    ContentHistoryResponse,
    ContentRecord,
    ContentRecordCreate,
    GenerateContentRequest,
    GeneratedContentResponse,
    RenderContentRequest,
    RenderedContentResponse,
)

__all__ = [
    "CategoryCount",
    "ContentHistoryResponse",
    "ContentRecord",
    "ContentRecordCreate",
    "DayCount",
    "GenerateContentRequest",
    "GeneratedContentResponse",
    "LearningAnalytics",
    "RecommendationsResponse",
    "RenderContentRequest",
    "RenderedContentResponse",
    "StreakData",
    "WeeklyReport",
]
