"""
Content Rendering

Turns generated markdown into HTML ready for the browser:

1. augment_markdown() adds diagram/question/answer containers
2. markdown converts the document (tables, fenced code)
3. markdown inside question/answer containers is rendered too
4. every diagram container gets a unique element id

Ids are assigned before the HTML is returned, so the client can run the
diagram engine over the containers without two diagrams from the same
render colliding. The engine options travel with the result as an explicit
DiagramRenderConfig value instead of global initialization.

Usage:
    from app.services.markdown import DiagramRenderConfig, render_content

    rendered = render_content(record.content)
    rendered.html          # '<div class="mermaid" id="mermaid-1a2b3c4d-0">...'
    rendered.diagram_ids   # ['mermaid-1a2b3c4d-0']
    rendered.diagram_config  # {'startOnLoad': True, 'theme': 'default', ...}
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Optional
from uuid import uuid4

import markdown
from bs4 import BeautifulSoup

from app.config import settings
from app.services.markdown.augmenter import (
    ANSWER_CLASS,
    DIAGRAM_CLASS,
    QUESTION_CLASS,
    augment_markdown,
)

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "sane_lists"]

_CONTAINER_CLASSES = "|".join(map(re.escape, (DIAGRAM_CLASS, QUESTION_CLASS, ANSWER_CLASS)))
_CONTAINER_OPEN = re.compile(r'\n*(<div class="(?:' + _CONTAINER_CLASSES + r')">)')
_CONTAINER_CLOSE = re.compile(r"^</div>\n*", re.MULTILINE)


@dataclass(frozen=True)
class DiagramRenderConfig:
    """
    Options for the client-side diagram engine.

    Attributes:
        theme: Engine theme name.
        security_level: Engine security level ("strict", "loose", ...).
        font_family: CSS font family for diagram labels.
        start_on_load: Whether the engine scans the page on load.
    """

    theme: str = "default"
    security_level: str = "loose"
    font_family: str = "inherit"
    start_on_load: bool = True

    @classmethod
    def from_settings(cls) -> "DiagramRenderConfig":
        return cls(
            theme=settings.DIAGRAM_THEME,
            security_level=settings.DIAGRAM_SECURITY_LEVEL,
            font_family=settings.DIAGRAM_FONT_FAMILY,
        )

    def to_engine_options(self) -> dict[str, Any]:
        """Options in the shape the engine's ``initialize`` call expects."""
        return {
            "startOnLoad": self.start_on_load,
            "theme": self.theme,
            "securityLevel": self.security_level,
            "fontFamily": self.font_family,
        }


@dataclass
class RenderedContent:
    """Result of one render call."""

    augmented_content: str
    html: str
    diagram_ids: list[str] = field(default_factory=list)
    diagram_config: dict[str, Any] = field(default_factory=dict)


def assign_diagram_ids(soup: BeautifulSoup, token: Optional[str] = None) -> list[str]:
    """
    Give every diagram container a unique id, in document order.

    Args:
        soup: Parsed HTML, modified in place.
        token: Per-render prefix; a random one is generated when omitted.

    Returns:
        The ids assigned, e.g. ["mermaid-1a2b3c4d-0", "mermaid-1a2b3c4d-1"].
    """
    token = token or uuid4().hex[:8]
    ids = []
    for index, element in enumerate(soup.select(f"div.{DIAGRAM_CLASS}")):
        element_id = f"{DIAGRAM_CLASS}-{token}-{index}"
        element["id"] = element_id
        ids.append(element_id)
    return ids


def _separate_containers(text: str) -> str:
    # Raw HTML blocks must stand alone between blank lines for markdown
    text = _CONTAINER_OPEN.sub(r"\n\n\1", text)
    return _CONTAINER_CLOSE.sub("</div>\n\n", text).strip("\n")


def _render_nested_markdown(soup: BeautifulSoup) -> None:
    """Render the markdown kept verbatim inside question/answer containers."""
    for element in soup.select(f"div.{QUESTION_CLASS}, div.{ANSWER_CLASS}"):
        inner_html = markdown.markdown(
            element.decode_contents().strip(), extensions=MARKDOWN_EXTENSIONS
        )
        element.clear()
        element.append(BeautifulSoup(inner_html, "html.parser"))


def render_content(
    text: str,
    config: Optional[DiagramRenderConfig] = None,
    token: Optional[str] = None,
) -> RenderedContent:
    """
    Augment and render generated markdown to HTML.

    Args:
        text: Generated markdown.
        config: Diagram engine options (defaults from settings).
        token: Optional per-render id prefix (random when omitted).

    Returns:
        RenderedContent with the augmented markdown, HTML, assigned diagram
        ids and engine options.
    """
    config = config or DiagramRenderConfig.from_settings()
    augmented = augment_markdown(text)

    html = markdown.markdown(_separate_containers(augmented), extensions=MARKDOWN_EXTENSIONS)
    soup = BeautifulSoup(html, "html.parser")
    _render_nested_markdown(soup)
    diagram_ids = assign_diagram_ids(soup, token)

    logger.debug(f"Rendered content: {len(html)} chars, {len(diagram_ids)} diagrams")

    return RenderedContent(
        augmented_content=augmented,
        html=str(soup),
        diagram_ids=diagram_ids,
        diagram_config=config.to_engine_options(),
    )
