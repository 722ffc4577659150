"""High/low performance day detection and half-over-half trend flags."""

import math
from typing import Sequence

import numpy as np

from ..models import DayAggregate, MoodPatterns


def identify_patterns(days: Sequence[DayAggregate]) -> MoodPatterns:
    """
    Partition days into performance thirds and compare halves of the period.

    The top and bottom ceil(n/3) days by completion rate form the high and
    low groups; ties keep chronological order. The flags compare the mean
    composite score and mean completion rate of the second half of the
    period against the first half.
    """
    if not days:
        return MoodPatterns()

    chronological = sorted(days, key=lambda day: day.date)

    # sorted() is stable, so equal rates stay in date order
    by_rate = sorted(chronological, key=lambda day: day.completion_rate, reverse=True)
    third = math.ceil(len(by_rate) / 3)

    midpoint = len(chronological) // 2
    first_half = chronological[:midpoint]
    second_half = chronological[midpoint:]

    improving_mood = False
    improving_habits = False
    if first_half:
        improving_mood = bool(
            np.mean([d.composite_score for d in second_half])
            > np.mean([d.composite_score for d in first_half])
        )
        improving_habits = bool(
            np.mean([d.completion_rate for d in second_half])
            > np.mean([d.completion_rate for d in first_half])
        )

    return MoodPatterns(
        high_performance_days=tuple(by_rate[:third]),
        low_performance_days=tuple(by_rate[-third:]),
        improving_mood=improving_mood,
        improving_habits=improving_habits,
    )
