"""
Unit Tests for Content Rendering

Tests for:
- Diagram id assignment (unique, ordered, per-render)
- Explicit diagram engine configuration
- HTML output for question/answer containers
"""

from bs4 import BeautifulSoup

from app.services.markdown.renderer import (
    DiagramRenderConfig,
    assign_diagram_ids,
    render_content,
)

TWO_DIAGRAMS = (
    "# Cycle\n\n"
    "```mermaid\ngraph TD\n  A-->B\n```\n\n"
    "Between the diagrams.\n\n"
    "```mermaid\ngraph LR\n  C-->D\n```\n"
)

QUIZ = "**Question 1:** What is 2+2?\nA) 3\nB) 4\nC) 5\n**Answer:** B"


class TestAssignDiagramIds:
    """Tests for assign_diagram_ids()."""

    def test_ids_in_document_order(self) -> None:
        soup = BeautifulSoup(
            '<div class="mermaid">a</div><p>x</p><div class="mermaid">b</div>',
            "html.parser",
        )
        ids = assign_diagram_ids(soup, token="abc")

        assert ids == ["mermaid-abc-0", "mermaid-abc-1"]
        assert [div["id"] for div in soup.select("div.mermaid")] == ids

    def test_non_diagram_divs_ignored(self) -> None:
        soup = BeautifulSoup('<div class="question">q</div>', "html.parser")
        assert assign_diagram_ids(soup) == []

    def test_random_token_per_call(self) -> None:
        html = '<div class="mermaid">a</div>'
        first = assign_diagram_ids(BeautifulSoup(html, "html.parser"))
        second = assign_diagram_ids(BeautifulSoup(html, "html.parser"))
        assert first != second


class TestDiagramRenderConfig:
    """Tests for the diagram engine options value."""

    def test_engine_options_shape(self) -> None:
        config = DiagramRenderConfig(theme="dark", security_level="strict", font_family="serif")
        assert config.to_engine_options() == {
            "startOnLoad": True,
            "theme": "dark",
            "securityLevel": "strict",
            "fontFamily": "serif",
        }

    def test_from_settings_uses_defaults(self) -> None:
        config = DiagramRenderConfig.from_settings()
        assert config.theme == "default"
        assert config.security_level == "loose"


class TestRenderContent:
    """Tests for render_content()."""

    def test_diagrams_get_unique_ids(self) -> None:
        rendered = render_content(TWO_DIAGRAMS, token="t1")
        soup = BeautifulSoup(rendered.html, "html.parser")

        assert rendered.diagram_ids == ["mermaid-t1-0", "mermaid-t1-1"]
        assert [div["id"] for div in soup.select("div.mermaid")] == rendered.diagram_ids

    def test_diagram_source_preserved(self) -> None:
        rendered = render_content(TWO_DIAGRAMS)
        soup = BeautifulSoup(rendered.html, "html.parser")
        sources = [div.get_text().strip() for div in soup.select("div.mermaid")]

        assert sources == ["graph TD\n  A-->B", "graph LR\n  C-->D"]

    def test_two_renders_do_not_collide(self) -> None:
        first = render_content(TWO_DIAGRAMS)
        second = render_content(TWO_DIAGRAMS)
        assert not set(first.diagram_ids) & set(second.diagram_ids)

    def test_surrounding_markdown_rendered(self) -> None:
        soup = BeautifulSoup(render_content(TWO_DIAGRAMS).html, "html.parser")
        assert soup.h1.get_text() == "Cycle"
        assert "Between the diagrams." in soup.get_text()

    def test_question_and_answer_markdown_rendered(self) -> None:
        rendered = render_content(QUIZ)
        soup = BeautifulSoup(rendered.html, "html.parser")

        question = soup.select_one("div.question")
        answer = soup.select_one("div.answer")
        assert question.strong.get_text() == "Question 1:"
        assert "B) 4" in question.get_text()
        assert answer.strong.get_text() == "Answer:"
        assert "**" not in rendered.html

    def test_augmented_content_returned(self) -> None:
        rendered = render_content(QUIZ)
        assert rendered.augmented_content.startswith('<div class="question">')

    def test_explicit_config_passed_through(self) -> None:
        config = DiagramRenderConfig(theme="forest")
        rendered = render_content("text", config=config)
        assert rendered.diagram_config["theme"] == "forest"

    def test_empty_content(self) -> None:
        rendered = render_content("")
        assert rendered.html == ""
        assert rendered.diagram_ids == []
