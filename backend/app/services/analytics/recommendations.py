"""
Topic Recommendations

Suggests follow-up topics from the content history using a static rule
table. Two kinds of rows exist:

- Topic triggers: a keyword found in any studied topic (case-insensitive)
  suggests a companion topic.
- Subject suggestions: one canned topic per recognized subject.

Trigger suggestions come first, then subject suggestions; the combined list
is deduplicated (first occurrence wins) and truncated.

To add a recommendation, add a row to TOPIC_TRIGGERS or SUBJECT_SUGGESTIONS.
For anything smarter, pass a different RecommendationStrategy.

Usage:
    from app.services.analytics.recommendations import recommend_topics

    topics = recommend_topics(records)  # ["Respiration in Plants", ...]
"""

from typing import Iterable, Optional, Protocol, Sequence

from app.enums.content import Subject
from app.models.content import ContentRecord

DEFAULT_RECOMMENDATION_LIMIT = 4

# (keyword found in a studied topic, suggested follow-up)
TOPIC_TRIGGERS: tuple[tuple[str, str], ...] = (
    ("photosynthesis", "Respiration in Plants"),
    ("machine learning", "Supervised Learning Algorithms"),
    ("calculus", "Advanced Integration Techniques"),
)

SUBJECT_SUGGESTIONS: dict[Subject, str] = {
    Subject.MATH: "Linear Algebra Fundamentals",
    Subject.SCIENCE: "Cell Biology Basics",
    Subject.COMPUTER_SCIENCE: "Data Structures and Algorithms",
}


class RecommendationStrategy(Protocol):
    """Anything that can turn studied topics and subjects into suggestions."""

    def suggest(self, topics: Sequence[str], subjects: Sequence[str]) -> list[str]:
        """
        Args:
            topics: Lower-cased topics from the history.
            subjects: Distinct subjects in first-seen order.

        Returns:
            Suggestions in priority order; duplicates are allowed and removed
            by the caller.
        """
        ...


def _lookup_subject(subject: str) -> Optional[Subject]:
    """Match a stored subject by enum value or display name, ignoring case."""
    normalized = subject.strip().lower()
    for candidate in Subject:
        if normalized in (candidate.value, candidate.display_name.lower()):
            return candidate
    return None


class RuleTableStrategy:
    """Keyword/subject lookup tables."""

    def __init__(
        self,
        topic_triggers: Sequence[tuple[str, str]] = TOPIC_TRIGGERS,
        subject_suggestions: Optional[dict[Subject, str]] = None,
    ):
        self.topic_triggers = topic_triggers
        self.subject_suggestions = (
            SUBJECT_SUGGESTIONS if subject_suggestions is None else subject_suggestions
        )

    def suggest(self, topics: Sequence[str], subjects: Sequence[str]) -> list[str]:
        suggestions = [
            suggestion
            for keyword, suggestion in self.topic_triggers
            if any(keyword in topic for topic in topics)
        ]

        for subject in subjects:
            matched = _lookup_subject(subject)
            if matched in self.subject_suggestions:
                suggestions.append(self.subject_suggestions[matched])

        return suggestions


def recommend_topics(
    records: Iterable[ContentRecord],
    strategy: Optional[RecommendationStrategy] = None,
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
) -> list[str]:
    """
    Suggest up to ``limit`` next topics from the content history.

    Args:
        records: Content history, any order.
        strategy: Suggestion source (defaults to the static rule table).
        limit: Maximum suggestions returned.

    Returns:
        Deduplicated suggestions, first occurrence order. Empty when the
        history is empty.
    """
    records = list(records)
    if not records:
        return []

    topics = [record.topic.lower() for record in records]
    # dict.fromkeys keeps first-seen order
    subjects = list(dict.fromkeys(record.subject for record in records))

    strategy = strategy or RuleTableStrategy()
    suggestions = strategy.suggest(topics, subjects)

    return list(dict.fromkeys(suggestions))[:limit]
