"""Database package."""

from app.db.base import engine, async_session_maker, Base, get_db, init_db
from app.db.models import ContentHistory

__all__ = ["engine", "async_session_maker", "Base", "ContentHistory", "get_db", "init_db"]
