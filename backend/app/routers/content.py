"""
Content API Router

Generation, history and rendering of educational content.

Endpoints:
- POST /api/content/generate - Generate content (rate limited)
- GET /api/content/history - All stored records, newest first
- GET /api/content/history/{content_id} - One stored record
- DELETE /api/content/history/{content_id} - Remove a stored record
- GET /api/content/history/{content_id}/rendered - Stored record as HTML
- POST /api/content/render - Augment and render arbitrary markdown
"""

import logging

from fastapi import APIRouter, Depends, Request

from app.dependencies import get_generator, get_history_service
from app.middleware.error_handling import handle_endpoint_errors
from app.middleware.rate_limit import limit_llm
from app.models.base import SuccessResponse
from app.models.content import (
    ContentHistoryResponse,
    ContentRecord,
    ContentRecordCreate,
    GenerateContentRequest,
    GeneratedContentResponse,
    RenderContentRequest,
    RenderedContentResponse,
)
from app.services.content_history import ContentHistoryService
from app.services.generation import GenerationService
from app.services.markdown import augment_markdown, render_content

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/content", tags=["content"])


def _rendered_response(text: str) -> RenderedContentResponse:
    rendered = render_content(text)
    return RenderedContentResponse(
        augmented_content=rendered.augmented_content,
        html=rendered.html,
        diagram_ids=rendered.diagram_ids,
        diagram_config=rendered.diagram_config,
    )


@router.post("/generate", response_model=GeneratedContentResponse)
@limit_llm
@handle_endpoint_errors("Generate content")
async def generate_content(
    request: Request,
    body: GenerateContentRequest,
    generator: GenerationService = Depends(get_generator),
    history: ContentHistoryService = Depends(get_history_service),
) -> GeneratedContentResponse:
    """
    Generate content for a topic and optionally store it.

    Backend throttling surfaces as 429 and an exhausted quota as 402, so
    the client can show a distinct message for each.
    """
    content = await generator.generate(body)

    record = None
    if body.save:
        record = await history.create_record(
            ContentRecordCreate(
                topic=body.topic,
                subject=body.subject,
                difficulty=body.difficulty,
                content_type=body.output_type,
                content=content,
            )
        )

    return GeneratedContentResponse(
        content=content,
        augmented_content=augment_markdown(content),
        record=record,
        model=generator.model,
    )


@router.get("/history", response_model=ContentHistoryResponse)
@handle_endpoint_errors("List content history")
async def list_history(
    history: ContentHistoryService = Depends(get_history_service),
) -> ContentHistoryResponse:
    """All stored records, newest first."""
    records = await history.list_records()
    return ContentHistoryResponse(items=records, total=len(records))


@router.get("/history/{content_id}", response_model=ContentRecord)
@handle_endpoint_errors("Get content")
async def get_content(
    content_id: str,
    history: ContentHistoryService = Depends(get_history_service),
) -> ContentRecord:
    """Get one stored record."""
    return await history.get_record(content_id)


@router.delete("/history/{content_id}", response_model=SuccessResponse)
@handle_endpoint_errors("Delete content")
async def delete_content(
    content_id: str,
    history: ContentHistoryService = Depends(get_history_service),
) -> SuccessResponse:
    """Delete a stored record."""
    await history.delete_record(content_id)
    return SuccessResponse(message=f"Content {content_id} deleted")


@router.get("/history/{content_id}/rendered", response_model=RenderedContentResponse)
@handle_endpoint_errors("Render stored content")
async def get_rendered_content(
    content_id: str,
    history: ContentHistoryService = Depends(get_history_service),
) -> RenderedContentResponse:
    """Stored record augmented and rendered to HTML with fresh diagram ids."""
    record = await history.get_record(content_id)
    return _rendered_response(record.content)


@router.post("/render", response_model=RenderedContentResponse)
@handle_endpoint_errors("Render content")
async def render_markdown(body: RenderContentRequest) -> RenderedContentResponse:
    """Augment and render markdown that is not in the history."""
    return _rendered_response(body.content)
