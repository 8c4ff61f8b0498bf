"""
Database Base Configuration

Sets up the async SQLAlchemy engine and session management for the content
history store.

Usage:
    from app.db.base import async_session_maker, Base

    async with async_session_maker() as session:
        result = await session.execute(select(ContentHistory))
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import settings, yaml_config


# Pool configuration from config/default.yaml
db_config: dict[str, Any] = yaml_config.get("database", {})

engine = create_async_engine(
    settings.POSTGRES_URL,
    pool_size=db_config.get("pool_size", 5),
    max_overflow=db_config.get("max_overflow", 10),
    pool_timeout=db_config.get("pool_timeout", 30),
    echo=settings.DEBUG,
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


# Import models AFTER Base is defined so they register with Base.metadata
from app.db import models  # noqa: F401, E402


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting database sessions in FastAPI routes.

    Commits when the request succeeds, rolls back when it raises.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """
    Create missing tables.

    Called on startup when DB_INIT_ON_STARTUP is set. Existing tables are
    left untouched.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
