"""
Health Check Endpoints

Provides health check endpoints for monitoring and orchestration.

Endpoints:
- GET /api/health - Basic health check
- GET /api/health/detailed - Database and generation backend status
- GET /api/health/ready - Readiness probe for orchestration systems
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.db.base import get_db

router = APIRouter(prefix="/api/health", tags=["health"])


async def _postgres_status(db: AsyncSession) -> dict:
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        return {"status": "unhealthy", "error": str(e)}
    return {"status": "healthy"}


def _generation_status() -> dict:
    """The selected model's provider must have an API key, if it takes one."""
    provider = settings.GENERATION_MODEL.split("/", 1)[0]
    provider_keys = {
        "openai": settings.OPENAI_API_KEY,
        "anthropic": settings.ANTHROPIC_API_KEY,
        "gemini": settings.GEMINI_API_KEY,
    }
    # Local providers (ollama etc.) are not in the table
    if provider in provider_keys and not provider_keys[provider]:
        return {"status": "unhealthy", "error": f"No API key configured for {provider}"}
    return {"status": "healthy", "model": settings.GENERATION_MODEL}


@router.get("")
async def health_check():
    """Liveness: the API process is up."""
    return {"status": "healthy", "service": settings.APP_NAME}


@router.get("/detailed")
async def detailed_health_check(db: AsyncSession = Depends(get_db)):
    """
    Status of each dependency.

    The overall status is "degraded" when any dependency is unhealthy.
    """
    dependencies = {
        "postgres": await _postgres_status(db),
        "generation": _generation_status(),
    }
    degraded = any(dep["status"] != "healthy" for dep in dependencies.values())
    return {
        "status": "degraded" if degraded else "healthy",
        "service": settings.APP_NAME,
        "dependencies": dependencies,
    }


@router.get("/ready")
async def readiness_check(db: AsyncSession = Depends(get_db)):
    """
    Readiness probe for orchestration systems.

    Only the database is critical; a missing LLM key still lets history
    and analytics work.
    """
    postgres = await _postgres_status(db)
    if postgres["status"] != "healthy":
        return {"ready": False, "error": postgres["error"]}
    return {"ready": True}
