"""
Middleware Package

Provides FastAPI middleware for:
- Rate limiting
- Error handling

Rate limiting usage:
    from app.middleware import limit_llm

    @router.post("/generate")
    @limit_llm
    async def generate(request: Request):
        ...
"""

from app.middleware.error_handling import (
    ErrorHandlingMiddleware,
    LLMError,
    NotFoundError,
    QuotaExceededError,
    RateLimitError,
    ServiceError,
    setup_error_handling,
)
from app.middleware.rate_limit import (
    limit_analytics,
    limit_llm,
    limiter,
    setup_rate_limiting,
)

__all__ = [
    "setup_rate_limiting",
    "limiter",
    "limit_llm",
    "limit_analytics",
    "setup_error_handling",
    "ErrorHandlingMiddleware",
    "ServiceError",
    "LLMError",
    "NotFoundError",
    "QuotaExceededError",
    "RateLimitError",
]
