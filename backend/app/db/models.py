"""
SQLAlchemy Database Models

Tables:
- content_history: One row per generated piece of educational content

ARCHITECTURE NOTE:
    There is a corresponding Pydantic model: app/models/content.py (ContentRecord)

    Data flows: Service Layer → Pydantic → SQLAlchemy → Database

Rows are created and deleted, never updated; created_at is fixed at insert.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class ContentHistory(Base):
    """
    Generated content records.

    ``created_at`` is stored as a naive local timestamp; analytics bucket by
    local calendar day.
    """

    __tablename__ = "content_history"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)

    topic: Mapped[str] = mapped_column(String(500))
    subject: Mapped[str] = mapped_column(String(50), index=True)
    difficulty: Mapped[str] = mapped_column(String(20))
    content_type: Mapped[str] = mapped_column(String(20), index=True)
    content: Mapped[str] = mapped_column(Text, default="")

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, index=True
    )

    def __repr__(self) -> str:
        return f"<ContentHistory(id={self.id}, topic={self.topic!r}, type={self.content_type})>"
