"""
Markdown Augmentation

Adds structural containers to generated markdown so the renderer can treat
diagrams, quiz questions and answers differently. Three ordered passes:

    1. wrap_diagrams   ```mermaid fences  -> <div class="mermaid">
    2. wrap_questions  "Question N:" + option lines -> <div class="question">
    3. wrap_answers    "Answer:" lines -> <div class="answer">

The order is fixed: the question pass must see the raw question/option
text, and the answer pass must not match inside diagram sources. Passes 2
and 3 skip diagram containers and other code fences, and never re-wrap a
block that is already wrapped. A fence only counts once its closing line is
found.

Passes only add markup around matched text; unmatched or malformed input
(an unclosed fence, a question without options) passes through unchanged.

Example:
    >>> augment_markdown("**Question 1:** 2+2?\\nA) 3\\nB) 4\\n**Answer:** B")
    '<div class="question">\\n\\n**Question 1:** 2+2?\\nA) 3\\nB) 4\\n\\n</div>\\n<div class="answer">\\n\\n**Answer:** B\\n\\n</div>'
"""

import re
from typing import Callable

DIAGRAM_CLASS = "mermaid"
QUESTION_CLASS = "question"
ANSWER_CLASS = "answer"

DIAGRAM_LANGUAGES = ("mermaid",)


def _opening(css_class: str) -> str:
    return f'<div class="{css_class}">'


# Question/answer containers keep a blank line inside so CommonMark renderers
# still parse the markdown they wrap.
def _wrap_block(css_class: str, body: str) -> str:
    return f"{_opening(css_class)}\n\n{body}\n\n</div>"


_FENCE_LINE = r"[ \t]*```"

# Lines inside a fence; a line that opens or closes another fence ends the body
_FENCE_BODY = r"((?:(?!" + _FENCE_LINE + r").*\n)*?)"
_FENCE_CLOSE = _FENCE_LINE + r"[ \t]*$"

_DIAGRAM_FENCE = re.compile(
    r"^" + _FENCE_LINE + r"[ \t]*(?:" + "|".join(map(re.escape, DIAGRAM_LANGUAGES)) + r")[ \t]*\n"
    + _FENCE_BODY
    + _FENCE_CLOSE,
    re.MULTILINE,
)

# Regions passes 2 and 3 leave alone: diagram containers as produced by
# wrap_diagrams, and any other closed code fence
_PROTECTED_BLOCK = re.compile(
    "("
    + re.escape(_opening(DIAGRAM_CLASS))
    + r"\n[\s\S]*?\n</div>"
    + r"|^"
    + _FENCE_LINE
    + r"[^\n]*\n(?:(?!"
    + _FENCE_LINE
    + r").*\n)*?"
    + _FENCE_CLOSE
    + ")",
    re.MULTILINE,
)

_BOLD = r"(?:\*\*|__)?"

_QUESTION_HEADER = (
    r"[ \t]*(?:#{1,6}[ \t]+)?" + _BOLD + r"Question(?:[ \t]+\d+)?" + _BOLD + r"[ \t]*:[^\n]*"
)
_OPTION_LINE = r"[ \t]*(?:[-*][ \t]+)?" + _BOLD + r"[A-Za-z][).]" + _BOLD + r"[ \t]+\S[^\n]*"

_QUESTION_BLOCK = re.compile(
    r"(?<!" + re.escape(_opening(QUESTION_CLASS) + "\n\n") + r")"
    r"^" + _QUESTION_HEADER + r"\n(?:" + _OPTION_LINE + r"(?:\n|\Z))+",
    re.MULTILINE | re.IGNORECASE,
)

_ANSWER_LINE = re.compile(
    r"(?<!" + re.escape(_opening(ANSWER_CLASS) + "\n\n") + r")"
    r"^[ \t]*" + _BOLD + r"(?:Correct[ \t]+)?Answer" + _BOLD + r"[ \t]*:[^\n]*$",
    re.MULTILINE | re.IGNORECASE,
)


def _outside_protected(text: str, transform: Callable[[str], str]) -> str:
    """Apply ``transform`` to every segment outside diagrams and code fences."""
    segments = _PROTECTED_BLOCK.split(text)
    # re.split with one capture group: odd indices are the protected blocks
    return "".join(
        segment if index % 2 else transform(segment)
        for index, segment in enumerate(segments)
    )


def wrap_diagrams(text: str) -> str:
    """
    Replace diagram fences with diagram containers.

    The diagram source between the fences is kept verbatim. Element ids are
    not assigned here; the renderer does that per render.
    """

    def replace(match: re.Match) -> str:
        return f"{_opening(DIAGRAM_CLASS)}\n{match.group(1)}\n</div>"

    return _DIAGRAM_FENCE.sub(replace, text)


def wrap_questions(text: str) -> str:
    """
    Wrap each "Question N:" header and its option lines in a question container.

    The header must be followed directly by at least one option line
    ("A) ..." or "A. ..."); the block ends at the first line that is not an
    option.
    """

    def replace(match: re.Match) -> str:
        block = match.group(0)
        suffix = "\n" if block.endswith("\n") else ""
        return _wrap_block(QUESTION_CLASS, block[: len(block) - len(suffix)]) + suffix

    return _outside_protected(text, lambda segment: _QUESTION_BLOCK.sub(replace, segment))


def wrap_answers(text: str) -> str:
    """Wrap every line starting with an "Answer:" label in an answer container."""

    def replace(match: re.Match) -> str:
        return _wrap_block(ANSWER_CLASS, match.group(0))

    return _outside_protected(text, lambda segment: _ANSWER_LINE.sub(replace, segment))


def augment_markdown(text: str) -> str:
    """Run all augmentation passes in order. Empty input returns empty output."""
    if not text:
        return ""

    text = wrap_diagrams(text)
    text = wrap_questions(text)
    return wrap_answers(text)
