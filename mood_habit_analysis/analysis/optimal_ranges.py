"""Optimal subjective-state ranges observed on the highest-performing days."""

import math
from typing import List, Sequence

import numpy as np

from ..config import config
from ..models import DIMENSIONS, DayAggregate, OptimalMoodRange, PerformanceByMoodLevel

# Composite score tercile boundaries
LOW_MOOD_MAX = 2.5
MEDIUM_MOOD_MAX = 3.5


def select_top_performers(days: Sequence[DayAggregate]) -> List[DayAggregate]:
    """
    Days at or above the high-completion threshold, best first.

    The cap is a fraction of *all* analysed days, not of the qualifying ones,
    so a sparse month cannot be summarised by a single lucky day.
    """
    limit = math.ceil(len(days) * config.TOP_PERFORMER_FRACTION)
    qualifying = [day for day in days if day.completion_rate >= config.HIGH_COMPLETION_RATE]
    qualifying.sort(key=lambda day: day.completion_rate, reverse=True)
    return qualifying[:limit]


def find_optimal_ranges(days: Sequence[DayAggregate]) -> OptimalMoodRange:
    """Observed [min, max] per dimension among the top performers."""
    top_performers = select_top_performers(days)
    if not top_performers:
        return OptimalMoodRange()

    ranges = {}
    for dimension in DIMENSIONS:
        values = [day.value(dimension) for day in top_performers]
        ranges[dimension] = (min(values), max(values))
    return OptimalMoodRange(**ranges)


def performance_by_mood_level(days: Sequence[DayAggregate]) -> PerformanceByMoodLevel:
    """Mean completion rate per composite-score tercile (0 when empty)."""
    def average_rate(group: List[DayAggregate]) -> float:
        return float(np.mean([day.completion_rate for day in group])) if group else 0.0

    low = [d for d in days if d.composite_score <= LOW_MOOD_MAX]
    medium = [d for d in days if LOW_MOOD_MAX < d.composite_score <= MEDIUM_MOOD_MAX]
    high = [d for d in days if d.composite_score > MEDIUM_MOOD_MAX]

    return PerformanceByMoodLevel(
        low=average_rate(low),
        medium=average_rate(medium),
        high=average_rate(high),
    )
