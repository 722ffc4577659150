"""Rule-based recommendations synthesised from correlation and trend analysis.

Rules are evaluated in a fixed priority order. Every rule whose predicate
holds contributes one message; the list is then capped, so higher-priority
findings always survive truncation.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from ..config import config
from ..models import (
    CorrelationCoefficients, MoodPatterns, OptimalMoodRange,
    TrendDirection, TrendSummary
)
from .correlation_analyzer import correlation_strength

MAX_RECOMMENDATIONS = 5

FALLBACK_RECOMMENDATIONS: Tuple[str, ...] = (
    "Continue tracking to identify patterns. Focus on maintaining consistent mood "
    "tracking for better insights.",
    "Consider the relationship between your daily activities and both mood and "
    "habit completion.",
)


@dataclass(frozen=True)
class RecommendationContext:
    """Everything the rules are allowed to look at."""
    correlations: CorrelationCoefficients
    patterns: MoodPatterns
    trends: TrendSummary
    optimal_ranges: OptimalMoodRange


@dataclass(frozen=True)
class RecommendationRule:
    name: str
    predicate: Callable[[RecommendationContext], bool]
    build: Callable[[RecommendationContext], str]


def strongest_correlation(correlations: CorrelationCoefficients) -> Optional[Tuple[str, float]]:
    """Dimension with the largest |r|; ties go to the earlier dimension."""
    ranked = sorted(correlations.items(), key=lambda item: abs(item[1]), reverse=True)
    return ranked[0] if ranked else None


def _has_strong_correlation(ctx: RecommendationContext) -> bool:
    strongest = strongest_correlation(ctx.correlations)
    return strongest is not None and abs(strongest[1]) > config.CORRELATION_MODERATE_THRESHOLD


def _describe_strongest_correlation(ctx: RecommendationContext) -> str:
    dimension, coefficient = strongest_correlation(ctx.correlations)
    direction = "higher" if coefficient > 0 else "lower"
    impact = correlation_strength(coefficient)
    return (
        f"Your {dimension} levels show a {impact} correlation with habit completion. "
        f"Focus on maintaining {direction} {dimension} for better performance."
    )


def _average_high_performance_score(ctx: RecommendationContext) -> float:
    return float(np.mean([day.composite_score for day in ctx.patterns.high_performance_days]))


RECOMMENDATION_RULES: Tuple[RecommendationRule, ...] = (
    RecommendationRule(
        "strongest_correlation",
        _has_strong_correlation,
        _describe_strongest_correlation,
    ),
    # Stress should correlate negatively; anything above the threshold means it is not protective
    RecommendationRule(
        "stress_management",
        lambda ctx: ctx.correlations.stress > config.STRESS_PROTECTIVE_THRESHOLD,
        lambda ctx: (
            "Stress management appears to significantly impact your habit completion. "
            "Consider stress-reduction techniques during busy periods."
        ),
    ),
    RecommendationRule(
        "energy_scheduling",
        lambda ctx: ctx.correlations.energy > config.CORRELATION_MODERATE_THRESHOLD,
        lambda ctx: (
            "Your energy levels strongly predict habit success. Prioritize habits during "
            "high-energy periods and consider energy-boosting activities."
        ),
    ),
    RecommendationRule(
        "sleep_consistency",
        lambda ctx: ctx.correlations.sleep > config.CORRELATION_MODERATE_THRESHOLD,
        lambda ctx: (
            "Good sleep quality significantly improves your habit completion. Maintain "
            "consistent sleep schedule for better performance."
        ),
    ),
    RecommendationRule(
        "reduce_complexity",
        lambda ctx: (
            ctx.trends.habits is TrendDirection.DECLINING
            and ctx.trends.mood is TrendDirection.DECLINING
        ),
        lambda ctx: (
            "Both mood and habit completion are declining. Consider reducing habit "
            "complexity temporarily and focusing on mood-boosting activities."
        ),
    ),
    # Stress trend is fitted on inverted values, matching the original rule wording
    RecommendationRule(
        "positive_reinforcement",
        lambda ctx: (
            ctx.trends.stress is TrendDirection.DECLINING
            and ctx.trends.habits is TrendDirection.IMPROVING
        ),
        lambda ctx: (
            "Excellent progress! Lower stress levels are supporting better habit "
            "completion. Maintain current stress management strategies."
        ),
    ),
    RecommendationRule(
        "replicate_best_days",
        lambda ctx: len(ctx.patterns.high_performance_days) > 0,
        lambda ctx: (
            f"Your best habit completion days average {_average_high_performance_score(ctx):.1f} "
            "mood score. Aim to replicate conditions that support this mood level."
        ),
    ),
    RecommendationRule(
        "schedule_positive_periods",
        lambda ctx: ctx.optimal_ranges.midpoint("mood") >= config.OPTIMAL_MOOD_MIDPOINT,
        lambda ctx: (
            "Your habit completion peaks when your overall mood is high. Schedule "
            "important habits during naturally positive periods."
        ),
    ),
)


def evaluate_rules(
    context: RecommendationContext,
    rules: Sequence[RecommendationRule] = RECOMMENDATION_RULES,
    limit: int = MAX_RECOMMENDATIONS
) -> List[str]:
    """
    Evaluate rules in order and return at most `limit` messages.

    Falls back to generic guidance when no rule fires, so the result is
    never empty.
    """
    messages = [rule.build(context) for rule in rules if rule.predicate(context)]

    if not messages:
        messages = list(FALLBACK_RECOMMENDATIONS)

    return messages[:limit]


def generate_recommendations(
    correlations: CorrelationCoefficients,
    patterns: MoodPatterns,
    trends: TrendSummary,
    optimal_ranges: OptimalMoodRange
) -> List[str]:
    """Generate prioritised, capped recommendations from analysis outputs."""
    context = RecommendationContext(
        correlations=correlations,
        patterns=patterns,
        trends=trends,
        optimal_ranges=optimal_ranges,
    )
    return evaluate_rules(context)
