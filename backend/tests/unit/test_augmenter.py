"""
Unit Tests for Markdown Augmentation

Each pass is tested on its own, then the full pipeline:
- wrap_diagrams: fenced diagram blocks -> diagram containers
- wrap_questions: question header + options -> question container
- wrap_answers: answer lines -> answer container
- augment_markdown: ordering, idempotence and malformed input
"""

import pytest

from app.services.markdown.augmenter import (
    augment_markdown,
    wrap_answers,
    wrap_diagrams,
    wrap_questions,
)

QUIZ = "**Question 1:** What is 2+2?\nA) 3\nB) 4\nC) 5\n**Answer:** B"

QUIZ_AUGMENTED = (
    '<div class="question">\n\n'
    "**Question 1:** What is 2+2?\nA) 3\nB) 4\nC) 5\n\n"
    "</div>\n"
    '<div class="answer">\n\n'
    "**Answer:** B\n\n"
    "</div>"
)

DIAGRAM_DOC = "Intro\n```mermaid\ngraph TD\n  A-->B\n```\nOutro"


# =============================================================================
# Diagram Pass
# =============================================================================


class TestWrapDiagrams:
    """Tests for wrap_diagrams()."""

    def test_fence_replaced_with_container(self) -> None:
        assert wrap_diagrams(DIAGRAM_DOC) == (
            'Intro\n<div class="mermaid">\ngraph TD\n  A-->B\n\n</div>\nOutro'
        )

    def test_multiple_diagrams(self) -> None:
        text = "```mermaid\ngraph LR\n```\ntext\n```mermaid\npie\n```"
        assert wrap_diagrams(text).count('<div class="mermaid">') == 2

    def test_other_languages_untouched(self) -> None:
        text = "```python\nprint('hi')\n```"
        assert wrap_diagrams(text) == text

    def test_unclosed_fence_untouched(self) -> None:
        text = "```mermaid\ngraph TD\n  A-->B"
        assert wrap_diagrams(text) == text

    def test_unclosed_fence_does_not_reach_next_fence(self) -> None:
        text = "```mermaid\ngraph TD\n\nText\n\n```python\nprint(1)\n```\n"
        assert wrap_diagrams(text) == text

    def test_closing_fence_must_be_own_line(self) -> None:
        text = "```mermaid\ngraph TD\n  A-->B ```\n"
        assert wrap_diagrams(text) == text

    @pytest.mark.parametrize(
        "text",
        [
            pytest.param("", id="empty"),
            pytest.param("Plain prose with no fences.", id="plain_prose"),
            pytest.param(DIAGRAM_DOC, id="already_has_diagram"),
        ],
    )
    def test_idempotent(self, text: str) -> None:
        once = wrap_diagrams(text)
        assert wrap_diagrams(once) == once


# =============================================================================
# Question Pass
# =============================================================================


class TestWrapQuestions:
    """Tests for wrap_questions()."""

    def test_header_and_options_wrapped(self) -> None:
        text = "Question 1: Pick one\nA) yes\nB) no"
        assert wrap_questions(text) == (
            '<div class="question">\n\nQuestion 1: Pick one\nA) yes\nB) no\n\n</div>'
        )

    @pytest.mark.parametrize(
        "header",
        [
            pytest.param("Question 2: Which?", id="plain"),
            pytest.param("**Question 2:** Which?", id="bold"),
            pytest.param("### Question 2: Which?", id="heading"),
            pytest.param("question 2: Which?", id="lowercase"),
            pytest.param("Question: Which?", id="unnumbered"),
        ],
    )
    def test_header_variants(self, header: str) -> None:
        result = wrap_questions(f"{header}\nA) one\nB) two")
        assert result.startswith('<div class="question">')

    def test_dotted_option_labels(self) -> None:
        result = wrap_questions("Question 1: Pick\nA. one\nB. two")
        assert "A. one\nB. two\n\n</div>" in result

    def test_block_ends_at_first_non_option_line(self) -> None:
        text = "Question 1: Pick\nA) one\nB) two\nSome explanation follows."
        result = wrap_questions(text)

        assert result.endswith("</div>\nSome explanation follows.")
        assert "Some explanation" not in result.split("</div>")[0]

    def test_header_without_options_untouched(self) -> None:
        text = "Question 1: What is an atom?\n\nAn atom is..."
        assert wrap_questions(text) == text

    def test_does_not_cross_paragraphs(self) -> None:
        text = "Question 1: Pick\n\nA) one\nB) two"
        assert wrap_questions(text) == text

    def test_multiple_questions(self) -> None:
        text = "Question 1: a?\nA) x\nB) y\n\nQuestion 2: b?\nA) x\nB) y\n"
        assert wrap_questions(text).count('<div class="question">') == 2

    def test_already_wrapped_not_rewrapped(self) -> None:
        once = wrap_questions(QUIZ)
        assert wrap_questions(once) == once

    def test_skips_diagram_containers(self) -> None:
        text = '<div class="mermaid">\nQuestion 1: a?\nA) x\n</div>'
        assert wrap_questions(text) == text

    def test_skips_code_fences(self) -> None:
        text = "```text\nQuestion 1: x\nA) y\n```\n\nQuestion 2: b?\nA) x\n"
        result = wrap_questions(text)

        assert result.startswith("```text\nQuestion 1: x\nA) y\n```\n")
        assert result.count('<div class="question">') == 1


# =============================================================================
# Answer Pass
# =============================================================================


class TestWrapAnswers:
    """Tests for wrap_answers()."""

    @pytest.mark.parametrize(
        "line",
        [
            pytest.param("Answer: B", id="plain"),
            pytest.param("**Answer:** B", id="bold"),
            pytest.param("answer: b", id="lowercase"),
            pytest.param("**Correct Answer:** B", id="correct_prefix"),
        ],
    )
    def test_answer_line_wrapped(self, line: str) -> None:
        assert wrap_answers(line) == f'<div class="answer">\n\n{line}\n\n</div>'

    def test_only_the_answer_line_is_wrapped(self) -> None:
        text = "Intro\nAnswer: B\nExplanation: because."
        assert wrap_answers(text) == (
            'Intro\n<div class="answer">\n\nAnswer: B\n\n</div>\nExplanation: because.'
        )

    def test_mid_line_answer_untouched(self) -> None:
        text = "The Answer: is not at line start here"
        assert wrap_answers(text) == text

    def test_already_wrapped_not_rewrapped(self) -> None:
        once = wrap_answers("Answer: B")
        assert wrap_answers(once) == once

    def test_skips_diagram_containers(self) -> None:
        text = '<div class="mermaid">\ngraph TD\nAnswer: x\n</div>'
        assert wrap_answers(text) == text

    def test_skips_code_fences(self) -> None:
        text = "```text\nAnswer: z\n```"
        assert wrap_answers(text) == text


# =============================================================================
# Full Pipeline
# =============================================================================


class TestAugmentMarkdown:
    """Tests for augment_markdown()."""

    def test_quiz_question_and_answer(self) -> None:
        assert augment_markdown(QUIZ) == QUIZ_AUGMENTED

    def test_text_content_unchanged(self) -> None:
        """Stripping the added markup gives back the original lines."""
        result = augment_markdown(QUIZ)
        lines = [
            line
            for line in result.split("\n")
            if line and not line.startswith("<div") and line != "</div>"
        ]
        assert lines == QUIZ.split("\n")

    @pytest.mark.parametrize(
        "text",
        [
            pytest.param("", id="empty"),
            pytest.param("# Title\n\nJust some notes.", id="plain_markdown"),
            pytest.param("- item\n- item 2\n\n| a | b |\n|---|---|\n| 1 | 2 |", id="lists_tables"),
        ],
    )
    def test_no_patterns_is_noop(self, text: str) -> None:
        assert augment_markdown(text) == text

    @pytest.mark.parametrize(
        "text",
        [
            pytest.param("# Notes\n\nSome text.", id="plain"),
            pytest.param(QUIZ, id="quiz"),
            pytest.param(DIAGRAM_DOC, id="diagram"),
        ],
    )
    def test_running_twice_is_stable(self, text: str) -> None:
        once = augment_markdown(text)
        assert augment_markdown(once) == once

    def test_mixed_content(self) -> None:
        text = (
            "# Photosynthesis\n\n"
            "```mermaid\ngraph TD\n  Light-->Sugar\n```\n\n"
            "Question 1: What do plants need?\nA) Light\nB) Darkness\n"
            "Answer: A\n"
        )
        result = augment_markdown(text)

        assert result.count('<div class="mermaid">') == 1
        assert result.count('<div class="question">') == 1
        assert result.count('<div class="answer">') == 1

    def test_malformed_input_passes_through(self) -> None:
        text = "```mermaid\ngraph TD\nQuestion 1: dangling"
        assert augment_markdown(text) == text

    @pytest.mark.parametrize(
        "text",
        [
            pytest.param("```text\nQuestion 1: x\nA) y\nAnswer: z\n```", id="quiz_in_code"),
            pytest.param(
                "```mermaid\ngraph TD\n\nText\n\n```python\nprint(1)\n```\n",
                id="unclosed_diagram_then_code",
            ),
        ],
    )
    def test_code_blocks_left_intact(self, text: str) -> None:
        assert augment_markdown(text) == text
