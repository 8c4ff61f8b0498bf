"""
Learning Analytics

Pure computations over the content history plus a composing service.

Modules:
- dates.py: calendar-day bucketing
- streaks.py: current/longest study streak
- aggregation.py: daily series and category breakdowns
- recommendations.py: rule-table topic suggestions
- service.py: LearningAnalyticsService (overview, streak data, weekly report)
"""

from app.services.analytics.aggregation import (
    content_type_breakdown,
    count_active_days,
    subject_breakdown,
    trailing_window_series,
)
from app.services.analytics.dates import day_key, days_between
from app.services.analytics.recommendations import (
    RecommendationStrategy,
    RuleTableStrategy,
    recommend_topics,
)
from app.services.analytics.service import LearningAnalyticsService
from app.services.analytics.streaks import (
    calculate_current_streak,
    calculate_longest_streak,
)

__all__ = [
    "LearningAnalyticsService",
    "RecommendationStrategy",
    "RuleTableStrategy",
    "calculate_current_streak",
    "calculate_longest_streak",
    "content_type_breakdown",
    "count_active_days",
    "day_key",
    "days_between",
    "recommend_topics",
    "subject_breakdown",
    "trailing_window_series",
]
