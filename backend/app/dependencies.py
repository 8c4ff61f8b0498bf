"""
FastAPI Dependencies

Service providers shared by the routers. Tests swap them out through
``app.dependency_overrides``.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import get_db
from app.services.analytics import LearningAnalyticsService
from app.services.content_history import ContentHistoryService
from app.services.generation import GenerationService, get_generation_service


async def get_history_service(
    db: AsyncSession = Depends(get_db),
) -> ContentHistoryService:
    """Get content history service bound to the request's session."""
    return ContentHistoryService(db)


def get_analytics_service() -> LearningAnalyticsService:
    """Get analytics service configured from settings."""
    return LearningAnalyticsService()


def get_generator() -> GenerationService:
    """Get the shared generation service."""
    return get_generation_service()
