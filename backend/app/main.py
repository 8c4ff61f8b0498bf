"""
EduContent AI API

FastAPI application serving content generation, content history and
learning analytics.

Run locally:
    uvicorn app.main:app --reload --app-dir backend
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.db.base import engine, init_db
from app.middleware import setup_error_handling, setup_rate_limiting
from app.routers import analytics_router, content_router, health_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    logger.info(f"Starting {settings.APP_NAME}...")
    if settings.DB_INIT_ON_STARTUP:
        await init_db()
        logger.info("Database tables ready")

    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")
    await engine.dispose()


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware and routers."""
    app = FastAPI(
        title=settings.APP_NAME,
        description="Educational content generation with learning analytics.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_error_handling(app, debug=settings.DEBUG)
    setup_rate_limiting(app, enabled=settings.RATE_LIMIT_ENABLED)

    app.include_router(health_router.router)
    app.include_router(content_router.router)
    app.include_router(analytics_router.router)

    @app.get("/", tags=["health"])
    async def root():
        return {"service": settings.APP_NAME, "status": "ok"}

    return app


app = create_app()
