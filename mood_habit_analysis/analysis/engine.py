"""
Mood-habit analysis pipeline.

Sequences aggregation, correlation, pattern detection, trend estimation,
optimal-range analysis and recommendation synthesis over one already-fetched
batch of data. The pipeline is a pure function of its arguments: it performs
no I/O, keeps no state between calls and never reads the clock.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from ..models import (
    DIMENSIONS, AnalysisInsights, AnalysisResult, AnalysisStatistics,
    CompletionRecord, CorrelationCoefficients, DayAggregate, MoodSample
)
from .aggregation import aggregate_days
from .correlation_analyzer import calculate_correlations
from .data_validation import AnalysisError, DataValidator, InvalidInputError
from .optimal_ranges import find_optimal_ranges, performance_by_mood_level
from .patterns import identify_patterns
from .recommendations import generate_recommendations, strongest_correlation
from .trends import calculate_trends

NO_CORRELATION_LABEL = "None identified"


class NoDataError(AnalysisError):
    """Raised when no mood samples fall inside the requested date range."""

    def __init__(self, start_date: str, end_date: str):
        self.start_date = start_date
        self.end_date = end_date
        super().__init__(
            f"No mood data found between {start_date} and {end_date}"
        )


MoodInput = Union[MoodSample, Mapping[str, Any]]
CompletionInput = Union[CompletionRecord, Mapping[str, Any]]


def _coerce_samples(samples: Iterable[MoodInput]) -> List[MoodSample]:
    try:
        return [s if isinstance(s, MoodSample) else MoodSample.from_dict(s) for s in samples]
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidInputError(f"Malformed mood sample: {e}") from e


def _coerce_records(records: Iterable[CompletionInput]) -> List[CompletionRecord]:
    try:
        return [r if isinstance(r, CompletionRecord) else CompletionRecord.from_dict(r) for r in records]
    except (KeyError, TypeError) as e:
        raise InvalidInputError(f"Malformed completion record: {e}") from e


def _format_correlation(entry: Optional[Tuple[str, float]]) -> str:
    if entry is None:
        return NO_CORRELATION_LABEL
    dimension, coefficient = entry
    return f"{dimension} ({coefficient * 100:.1f}%)"


def build_insights_labels(correlations: CorrelationCoefficients) -> Tuple[str, str, Optional[str]]:
    """Strongest positive, strongest negative and primary factor labels."""
    entries = list(correlations.items())
    positives = sorted((e for e in entries if e[1] > 0), key=lambda e: e[1], reverse=True)
    negatives = sorted((e for e in entries if e[1] < 0), key=lambda e: e[1])

    strongest = strongest_correlation(correlations)
    primary_factor = strongest[0] if strongest and strongest[1] != 0 else None

    return (
        _format_correlation(positives[0] if positives else None),
        _format_correlation(negatives[0] if negatives else None),
        primary_factor,
    )


def round_half_up(value: float) -> float:
    """Round to two decimals with halves going up (1.125 -> 1.13)."""
    return float(np.floor(value * 100 + 0.5) / 100)


def summarize(days: Sequence[DayAggregate]) -> AnalysisStatistics:
    """Means over the analysed days, rounded half up to two decimals."""
    avg_completion_rate = float(np.mean([day.completion_rate for day in days]))
    avg_mood_scores = {
        dimension: round_half_up(float(np.mean([day.value(dimension) for day in days])))
        for dimension in DIMENSIONS
    }
    return AnalysisStatistics(
        total_days_analyzed=len(days),
        avg_completion_rate=round_half_up(avg_completion_rate),
        avg_mood_scores=avg_mood_scores,
    )


class MoodHabitAnalyzer:
    """
    Correlation and pattern analysis between subjective state and habits.

    Analyzes relationships between:
    - Mood, energy, stress and sleep vs daily completion rate
    - High vs low performance days
    - Linear trends in every dimension
    - Subjective-state ranges on the best days
    """

    def __init__(self, validator: Optional[DataValidator] = None):
        self.validator = validator or DataValidator()
        self.logger = logging.getLogger(__name__)

    def analyze(
        self,
        mood_samples: Iterable[MoodInput],
        completion_records: Iterable[CompletionInput],
        active_habit_count: int,
        start_date: str,
        end_date: str
    ) -> AnalysisResult:
        """
        Run the full analysis for one date range.

        Args:
            mood_samples: At most one sample per date
            completion_records: Any number of records per date
            active_habit_count: Denominator used for dates without records
            start_date: First day of the range (YYYY-MM-DD, inclusive)
            end_date: Last day of the range (YYYY-MM-DD, inclusive)

        Returns:
            Fully assembled AnalysisResult

        Raises:
            InvalidInputError: If dates or sample values are malformed
            NoDataError: If no mood sample falls inside the range
        """
        samples = _coerce_samples(mood_samples)
        records = _coerce_records(completion_records)

        self.validator.ensure_valid(samples, active_habit_count, start_date, end_date)

        self.logger.info(f"Starting mood-habit analysis ({start_date} to {end_date})")

        days = aggregate_days(samples, records, active_habit_count, start_date, end_date)
        if not days:
            raise NoDataError(start_date, end_date)

        correlations = calculate_correlations(days)
        patterns = identify_patterns(days)
        trends = calculate_trends(days)
        optimal_ranges = find_optimal_ranges(days)

        recommendations = generate_recommendations(correlations, patterns, trends, optimal_ranges)

        positive, negative, primary_factor = build_insights_labels(correlations)
        insights = AnalysisInsights(
            strongest_positive_correlation=positive,
            strongest_negative_correlation=negative,
            optimal_mood_range=optimal_ranges,
            primary_factor=primary_factor,
            performance_by_mood_level=performance_by_mood_level(days),
        )

        statistics = summarize(days)

        self.logger.info(
            f"Analyzed {statistics.total_days_analyzed} days, "
            f"{len(recommendations)} recommendation(s) generated"
        )

        return AnalysisResult(
            correlations=correlations,
            insights=insights,
            recommendations=tuple(recommendations),
            statistics=statistics,
            patterns=tuple(days),
            trends=trends,
        )


def analyze(
    mood_samples: Iterable[MoodInput],
    completion_records: Iterable[CompletionInput],
    active_habit_count: int,
    start_date: str,
    end_date: str
) -> AnalysisResult:
    """
    Convenience function to run the mood-habit analysis.

    Args:
        mood_samples: Mood samples (or plain mappings) for the user
        completion_records: Habit completion records (or plain mappings)
        active_habit_count: Number of currently active habits
        start_date: Inclusive start date (YYYY-MM-DD)
        end_date: Inclusive end date (YYYY-MM-DD)

    Returns:
        Complete analysis result
    """
    analyzer = MoodHabitAnalyzer()
    return analyzer.analyze(
        mood_samples, completion_records, active_habit_count, start_date, end_date
    )
