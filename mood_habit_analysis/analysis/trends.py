"""Linear trend classification for each dimension and the completion rate."""

import logging
from typing import Optional, Sequence

import numpy as np

from ..config import config
from ..models import DayAggregate, TrendDirection, TrendSummary

logger = logging.getLogger(__name__)


def calculate_slope(values: Sequence[float]) -> float:
    """
    Least-squares slope of the series against its index.

    Closed form (nΣxy - ΣxΣy) / (nΣx² - (Σx)²), exact for integer ratings.
    """
    n = len(values)
    if n < 2:
        return 0.0
    xs = np.arange(n, dtype=float)
    ys = np.asarray(values, dtype=float)
    sum_x = xs.sum()
    denominator = n * np.dot(xs, xs) - sum_x ** 2
    if denominator == 0:
        return 0.0
    return float((n * np.dot(xs, ys) - sum_x * ys.sum()) / denominator)


def classify_slope(slope: float, threshold: Optional[float] = None) -> TrendDirection:
    """Map a slope to improving / declining / stable."""
    if threshold is None:
        threshold = config.TREND_SLOPE_THRESHOLD
    if slope > threshold:
        return TrendDirection.IMPROVING
    if slope < -threshold:
        return TrendDirection.DECLINING
    return TrendDirection.STABLE


def classify_series(values: Sequence[float], min_days: Optional[int] = None) -> TrendDirection:
    """Classify a single series, treating short series as stable."""
    if min_days is None:
        min_days = config.MIN_TREND_DAYS
    if len(values) < min_days:
        return TrendDirection.STABLE
    return classify_slope(calculate_slope(values))


def calculate_trends(days: Sequence[DayAggregate], min_days: Optional[int] = None) -> TrendSummary:
    """
    Classify mood, energy, stress, sleep and completion-rate trends.

    Stress is fitted on 6 - stress so that "improving" means the same thing
    for every dimension. With fewer than min_days days every trend is stable.
    """
    if min_days is None:
        min_days = config.MIN_TREND_DAYS

    if len(days) < min_days:
        logger.debug(f"Only {len(days)} days available, need {min_days} for trends")
        return TrendSummary()

    return TrendSummary(
        mood=classify_series([d.mood for d in days], min_days),
        energy=classify_series([d.energy for d in days], min_days),
        stress=classify_series([6 - d.stress for d in days], min_days),
        sleep=classify_series([d.sleep for d in days], min_days),
        habits=classify_series([d.completion_rate for d in days], min_days),
    )
