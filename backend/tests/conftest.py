"""
Shared Test Fixtures and Configuration

This module provides pytest fixtures used across the unit tests.
"""

import os
import sys
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add the backend directory to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Settings are read when app modules are first imported, so the test
# environment must be in place before any test module imports them.
os.environ.update(
    {
        "DEBUG": "true",
        "POSTGRES_HOST": "localhost",
        "POSTGRES_USER": "testuser",
        "POSTGRES_PASSWORD": "testpass",
        "POSTGRES_DB": "testdb",
        "GEMINI_API_KEY": "test-api-key",
        "DB_INIT_ON_STARTUP": "false",
        "RATE_LIMIT_ENABLED": "false",
    }
)

from app.enums.content import ContentType, Difficulty  # noqa: E402
from app.models.content import ContentRecord  # noqa: E402


# ============================================================================
# Reference Dates
# ============================================================================


@pytest.fixture
def today() -> date:
    """Fixed reference day so window and streak tests are deterministic."""
    return date(2025, 3, 14)


def at_noon(day: date) -> datetime:
    """Naive local timestamp in the middle of a day."""
    return datetime.combine(day, time(12, 0))


# ============================================================================
# Content Record Factory
# ============================================================================


@pytest.fixture
def make_record() -> Callable[..., ContentRecord]:
    """
    Factory for ContentRecord instances.

    Usage:
        record = make_record(topic="Photosynthesis", days_ago=1, today=today)
    """
    counter = {"n": 0}

    def _make(
        topic: str = "Photosynthesis",
        subject: str = "science",
        difficulty: Difficulty = Difficulty.INTERMEDIATE,
        content_type: ContentType = ContentType.NOTES,
        created_at: datetime | None = None,
        days_ago: int = 0,
        today: date = date(2025, 3, 14),
        content: str = "# Notes",
    ) -> ContentRecord:
        counter["n"] += 1
        return ContentRecord(
            id=f"record-{counter['n']}",
            topic=topic,
            subject=subject,
            difficulty=difficulty,
            content_type=content_type,
            content=content,
            created_at=created_at or at_noon(today - timedelta(days=days_ago)),
        )

    return _make


# ============================================================================
# Mock Fixtures
# ============================================================================


@pytest.fixture
def mock_db_session() -> MagicMock:
    """
    Create a mock database session for unit testing.
    """
    mock = MagicMock()
    mock.execute = AsyncMock()
    mock.get = AsyncMock(return_value=None)
    mock.flush = AsyncMock()
    mock.refresh = AsyncMock()
    mock.delete = AsyncMock()
    mock.commit = AsyncMock()
    mock.rollback = AsyncMock()
    mock.close = AsyncMock()
    return mock
