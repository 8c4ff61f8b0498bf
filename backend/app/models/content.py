"""
Content API Models (Pydantic)

Request/response schemas for generated educational content:
- ContentRecord: one stored generation (read-only input to analytics)
- GenerateContentRequest / GeneratedContentResponse: generation round trip
- RenderContentRequest / RenderedContentResponse: markdown augmentation + HTML

ARCHITECTURE NOTE:
    There is a corresponding SQLAlchemy model: app/db/models.py (ContentHistory)

    Data flows: API Request → Pydantic → Service → SQLAlchemy → Database
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from app.enums.content import ContentType, Difficulty, Subject
from app.models.base import StrictRequest, StrictResponse


class ContentRecord(StrictResponse):
    """
    A stored unit of generated content with its metadata.

    ``subject`` is kept as a plain string: analytics group by whatever was
    stored and never validate it against the Subject enum. ``created_at``
    never changes after creation; naive values are local time.
    """

    id: str
    topic: str
    subject: str
    difficulty: Difficulty
    content_type: ContentType
    content: str = ""
    created_at: datetime


class ContentRecordCreate(StrictRequest):
    """Fields needed to persist a new record (id/created_at are assigned)."""

    topic: str = Field(..., min_length=1, max_length=500)
    subject: Subject
    difficulty: Difficulty
    content_type: ContentType
    content: str


class GenerateContentRequest(StrictRequest):
    """
    Request to generate educational content.

    Mirrors the generation collaborator's contract: (topic, subject,
    difficulty, output_type).
    """

    topic: str = Field(..., min_length=1, max_length=500)
    subject: Subject = Subject.SCIENCE
    difficulty: Difficulty = Difficulty.INTERMEDIATE
    output_type: ContentType = ContentType.NOTES
    save: bool = Field(True, description="Persist the result to content history")


class GeneratedContentResponse(StrictResponse):
    """Generated text plus the stored record (when saved)."""

    content: str
    augmented_content: str
    record: Optional[ContentRecord] = None
    model: str


class ContentHistoryResponse(StrictResponse):
    """All stored records, newest first."""

    items: list[ContentRecord]
    total: int


class RenderContentRequest(StrictRequest):
    """Ad-hoc markdown to augment and render (e.g. a generation preview)."""

    content: str


class RenderedContentResponse(StrictResponse):
    """
    Augmented markdown and its HTML rendering.

    ``diagram_ids`` lists the identifiers assigned to each diagram container
    in document order; ``diagram_config`` holds the options the client passes
    to the diagram engine before running it over those containers.
    """

    augmented_content: str
    html: str
    diagram_ids: list[str] = Field(default_factory=list)
    diagram_config: dict[str, Any] = Field(default_factory=dict)
