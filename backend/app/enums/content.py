"""
Content-related enums.

Defines enums for the subject, difficulty and output type of generated
educational content.
"""

from enum import Enum


class Subject(str, Enum):
    """
    Subjects a user can request content for.

    Analytics treat the stored subject as an opaque string, so records with
    values outside this enum are still counted and grouped.
    """

    SCIENCE = "science"
    MATH = "math"
    HISTORY = "history"
    COMPUTER_SCIENCE = "computer-science"
    LANGUAGE = "language"
    GEOGRAPHY = "geography"
    PHYSICS = "physics"
    CHEMISTRY = "chemistry"
    BIOLOGY = "biology"

    @property
    def display_name(self) -> str:
        """Human-readable label, e.g. "Computer Science"."""
        if self is Subject.MATH:
            return "Mathematics"
        return self.value.replace("-", " ").title()


class Difficulty(str, Enum):
    """Target audience level for generated content."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ContentType(str, Enum):
    """
    Output types accepted by the generation endpoint.

    Each value selects a dedicated system prompt. Unknown output types are
    rejected at the API boundary but the prompt builder itself falls back to
    a generic prompt for any string it does not recognize.
    """

    NOTES = "notes"
    QUIZ = "quiz"
    SUMMARY = "summary"
    EXPLANATION = "explanation"
    FLASHCARDS = "flashcards"
    LESSON_PLAN = "lessonplan"
