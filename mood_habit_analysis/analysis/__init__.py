"""Analysis module for mood-habit correlation and pattern detection."""

from .data_validation import AnalysisError, InvalidInputError, DataValidator
from .engine import MoodHabitAnalyzer, NoDataError, analyze
from .recommendations import RecommendationRule, generate_recommendations

__all__ = [
    "AnalysisError",
    "InvalidInputError",
    "DataValidator",
    "MoodHabitAnalyzer",
    "NoDataError",
    "analyze",
    "RecommendationRule",
    "generate_recommendations",
]
