"""
Markdown post-processing for generated content.

- augmenter.py: pure passes adding diagram/question/answer containers
- renderer.py: HTML rendering with per-render diagram ids
"""

from app.services.markdown.augmenter import (
    ANSWER_CLASS,
    DIAGRAM_CLASS,
    QUESTION_CLASS,
    augment_markdown,
    wrap_answers,
    wrap_diagrams,
    wrap_questions,
)
from app.services.markdown.renderer import (
    DiagramRenderConfig,
    RenderedContent,
    assign_diagram_ids,
    render_content,
)

__all__ = [
    "ANSWER_CLASS",
    "DIAGRAM_CLASS",
    "QUESTION_CLASS",
    "DiagramRenderConfig",
    "RenderedContent",
    "assign_diagram_ids",
    "augment_markdown",
    "render_content",
    "wrap_answers",
    "wrap_diagrams",
    "wrap_questions",
]
