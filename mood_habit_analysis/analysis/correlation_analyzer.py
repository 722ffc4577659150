"""
Correlation analysis between subjective state and habit completion.

Computes a Pearson coefficient between each of mood, energy, stress and
sleep and the daily completion rate. Stress is correlated as reported, so
a negative stress coefficient is the expected, healthy direction.
"""

import math
import logging
from typing import Sequence

import numpy as np

from ..config import config
from ..models import DIMENSIONS, CorrelationCoefficients, DayAggregate

logger = logging.getLogger(__name__)


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Pearson correlation coefficient of two equally sized series.

    Returns 0.0 for empty or mismatched input and whenever either series has
    no variance, so the result is always finite.
    """
    if len(x) != len(y) or len(x) == 0:
        return 0.0

    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    n = len(xs)

    # Constant series: the closed form can leave float residue instead of 0
    if np.ptp(xs) == 0 or np.ptp(ys) == 0:
        return 0.0

    sum_x = xs.sum()
    sum_y = ys.sum()
    numerator = n * np.dot(xs, ys) - sum_x * sum_y
    variance_product = (n * np.dot(xs, xs) - sum_x ** 2) * (n * np.dot(ys, ys) - sum_y ** 2)

    if variance_product <= 0:
        return 0.0

    r = float(numerator / math.sqrt(variance_product))
    if not math.isfinite(r):
        return 0.0

    # Rounding can push a perfect correlation a hair outside [-1, 1]
    return max(-1.0, min(1.0, r))


def correlation_strength(correlation: float) -> str:
    """Interpret correlation strength."""
    abs_corr = abs(correlation)
    if abs_corr > config.CORRELATION_STRONG_THRESHOLD:
        return "strong"
    elif abs_corr > config.CORRELATION_MODERATE_THRESHOLD:
        return "moderate"
    elif abs_corr > 0.1:
        return "weak"
    else:
        return "negligible"


def calculate_correlations(days: Sequence[DayAggregate]) -> CorrelationCoefficients:
    """Correlate every dimension with the daily completion rate."""
    if not days:
        return CorrelationCoefficients()

    completion_rates = [day.completion_rate for day in days]
    coefficients = {
        dimension: pearson_correlation([day.value(dimension) for day in days], completion_rates)
        for dimension in DIMENSIONS
    }

    flat = [dimension for dimension, r in coefficients.items() if r == 0.0]
    if flat:
        logger.debug(f"Zero correlation (no variance or no signal) for: {', '.join(flat)}")

    return CorrelationCoefficients(**coefficients)
