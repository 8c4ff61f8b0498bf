"""API Routers package."""

from app.routers import analytics as analytics_router
from app.routers import content as content_router
from app.routers import health as health_router

__all__ = ["analytics_router", "content_router", "health_router"]
