"""
API-related enums.

Rate limit categories used by the SlowAPI decorators in
app/middleware/rate_limit.py.
"""

from enum import Enum


class RateLimitType(str, Enum):
    """
    Endpoint cost classes, each mapped to a limit string in settings.

    Usage:
        limit = settings.get_rate_limit(RateLimitType.LLM_HEAVY)
    """

    DEFAULT = "default"  # everything without a stricter class
    LLM_HEAVY = "llm_heavy"  # calls the generation backend
    ANALYTICS = "analytics"  # recomputes insights over the full history
