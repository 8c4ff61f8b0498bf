"""
Content History Service

Stores and reads generated content records. Analytics always receive the
full history from list_records(); there are no partial queries.

Usage:
    from app.services.content_history import ContentHistoryService

    service = ContentHistoryService(db)
    records = await service.list_records()
    record = await service.create_record(ContentRecordCreate(...))
    await service.delete_record(record.id)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import ContentHistory
from app.middleware.error_handling import NotFoundError
from app.models.content import ContentRecord, ContentRecordCreate

logger = logging.getLogger(__name__)


class ContentHistoryService:
    """Create, read and delete content records."""

    def __init__(self, db: AsyncSession):
        """
        Args:
            db: SQLAlchemy async database session.
        """
        self.db = db

    async def list_records(self) -> list[ContentRecord]:
        """All records, newest first."""
        result = await self.db.execute(
            select(ContentHistory).order_by(ContentHistory.created_at.desc())
        )
        return [ContentRecord.model_validate(row) for row in result.scalars().all()]

    async def get_record(self, record_id: str) -> ContentRecord:
        """
        Fetch one record.

        Raises:
            NotFoundError: If no record has this id.
        """
        row = await self.db.get(ContentHistory, record_id)
        if row is None:
            raise NotFoundError(f"Content {record_id} not found")
        return ContentRecord.model_validate(row)

    async def create_record(self, data: ContentRecordCreate) -> ContentRecord:
        """Persist a newly generated piece of content."""
        row = ContentHistory(
            topic=data.topic,
            subject=data.subject.value,
            difficulty=data.difficulty.value,
            content_type=data.content_type.value,
            content=data.content,
        )
        self.db.add(row)
        await self.db.flush()
        await self.db.refresh(row)

        logger.info(f"Stored content {row.id} ({row.content_type} on '{row.topic}')")
        return ContentRecord.model_validate(row)

    async def delete_record(self, record_id: str) -> None:
        """
        Delete a record.

        Raises:
            NotFoundError: If no record has this id.
        """
        row = await self.db.get(ContentHistory, record_id)
        if row is None:
            raise NotFoundError(f"Content {record_id} not found")

        await self.db.delete(row)
        await self.db.flush()
        logger.info(f"Deleted content {record_id}")
