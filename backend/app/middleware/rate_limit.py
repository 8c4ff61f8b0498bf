"""
Rate Limiting Middleware

Caps how often clients may hit expensive endpoints, using SlowAPI.

Usage:
    from app.middleware.rate_limit import limit_analytics, limit_llm

    @router.post("/generate")
    @limit_llm
    async def generate_content(request: Request, ...):
        ...

    @router.get("/overview")
    @limit_analytics
    async def get_overview(request: Request, ...):
        ...

Rate limit configurations (from settings):
- DEFAULT: General API endpoints (100/minute)
- LLM_HEAVY: Endpoints that call the generation backend (10/minute)
- ANALYTICS: Analytics endpoints (30/minute)
"""

import logging

from fastapi import FastAPI, Request
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from app.config import settings
from app.enums import RateLimitType

logger = logging.getLogger(__name__)


def get_client_identifier(request: Request) -> str:
    """
    Get client identifier for rate limiting.

    Uses the first X-Forwarded-For entry when behind a proxy, otherwise the
    direct client address.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    return get_remote_address(request)


limiter = Limiter(
    key_func=get_client_identifier,
    default_limits=[settings.get_rate_limit(RateLimitType.DEFAULT)],
    enabled=settings.RATE_LIMIT_ENABLED,
)


def setup_rate_limiting(app: FastAPI, enabled: bool = True) -> None:
    """
    Configure rate limiting on the FastAPI app.

    Args:
        app: FastAPI application instance
        enabled: Whether to enforce limits
    """
    limiter.enabled = enabled
    app.state.limiter = limiter

    if not enabled:
        logger.info("Rate limiting disabled")
        return

    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    logger.info("Rate limiting enabled")


def limit_llm(func):
    """Decorator for endpoints that call the generation backend."""
    return limiter.limit(settings.get_rate_limit(RateLimitType.LLM_HEAVY))(func)


def limit_analytics(func):
    """Decorator for endpoints that aggregate the whole content history."""
    return limiter.limit(settings.get_rate_limit(RateLimitType.ANALYTICS))(func)
