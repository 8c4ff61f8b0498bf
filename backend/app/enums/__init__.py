"""
Centralized enum definitions for the application.

All enums are organized by domain:
- content.py: Subjects, difficulty levels, content (output) types
- api.py: Rate limit categories

Usage:
    from app.enums import ContentType, Difficulty, Subject

    # Or import from specific module
    from app.enums.api import RateLimitType
"""

from app.enums.content import (
    ContentType,
    Difficulty,
    Subject,
)
from app.enums.api import (
    RateLimitType,
)

__all__ = [
    # Content
    "ContentType",
    "Difficulty",
    "Subject",
    # API
    "RateLimitType",
]
