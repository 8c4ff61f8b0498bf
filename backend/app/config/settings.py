"""
Application Configuration

This module provides type-safe configuration loading using Pydantic settings.
Environment variables are loaded from .env file and validated.

Usage:
    from app.config import settings

    # Access settings
    db_url = settings.POSTGRES_URL
    window = settings.ANALYTICS_WINDOW_DAYS
    limit = settings.get_rate_limit(RateLimitType.LLM_HEAVY)
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings

from app.enums.api import RateLimitType


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "EduContent AI"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # PostgreSQL
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "educontent"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "educontent"

    # Create missing tables on startup
    DB_INIT_ON_STARTUP: bool = True

    @property
    def POSTGRES_URL(self) -> str:
        """Async PostgreSQL connection URL."""
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # LLM providers (any one is enough, LiteLLM picks by model prefix)
    OPENAI_API_KEY: str = ""
    ANTHROPIC_API_KEY: str = ""
    GEMINI_API_KEY: str = ""

    # Content generation
    # Format: provider/model-name
    GENERATION_MODEL: str = "gemini/gemini-2.5-flash"
    GENERATION_MAX_TOKENS: int = 4096
    GENERATION_TEMPERATURE: float = 0.7
    GENERATION_MAX_RETRIES: int = 3

    # Learning analytics
    ANALYTICS_WINDOW_DAYS: int = 7
    RECOMMENDATION_LIMIT: int = 4
    STREAK_MILESTONES: list[int] = [3, 7, 14, 30, 60, 100, 365]

    # Diagram rendering engine (passed explicitly to each render call)
    DIAGRAM_THEME: str = "default"
    DIAGRAM_SECURITY_LEVEL: str = "loose"
    DIAGRAM_FONT_FAMILY: str = "inherit"

    # Rate limiting (SlowAPI limit strings)
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_DEFAULT: str = "100/minute"
    RATE_LIMIT_LLM_HEAVY: str = "10/minute"
    RATE_LIMIT_ANALYTICS: str = "30/minute"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    def get_rate_limit(self, rate_limit_type: RateLimitType) -> str:
        """Resolve the configured limit string for an endpoint category."""
        limits = {
            RateLimitType.DEFAULT: self.RATE_LIMIT_DEFAULT,
            RateLimitType.LLM_HEAVY: self.RATE_LIMIT_LLM_HEAVY,
            RateLimitType.ANALYTICS: self.RATE_LIMIT_ANALYTICS,
        }
        return limits.get(rate_limit_type, self.RATE_LIMIT_DEFAULT)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()


@lru_cache()
def load_yaml_config() -> dict[str, Any]:
    """Load application configuration from config/default.yaml."""
    config_path = Path(__file__).parent.parent.parent.parent / "config" / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


yaml_config: dict[str, Any] = load_yaml_config()
