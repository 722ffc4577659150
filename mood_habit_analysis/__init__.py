"""Mood-habit correlation and pattern analysis engine."""

from .analysis import AnalysisError, InvalidInputError, MoodHabitAnalyzer, NoDataError, analyze
from .models import AnalysisResult, CompletionRecord, DayAggregate, MoodSample, TrendDirection

__version__ = "0.1.0"

__all__ = [
    "AnalysisError",
    "InvalidInputError",
    "MoodHabitAnalyzer",
    "NoDataError",
    "analyze",
    "AnalysisResult",
    "CompletionRecord",
    "DayAggregate",
    "MoodSample",
    "TrendDirection",
]
