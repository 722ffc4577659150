"""Tests for linear trend classification."""

import pytest
from mood_habit_analysis.analysis.trends import (
    calculate_slope,
    calculate_trends,
    classify_series,
    classify_slope
)
from mood_habit_analysis.models import DayAggregate, TrendDirection, TrendSummary


def day(index, mood=3, energy=3, stress=3, sleep=3, rate=50.0):
    return DayAggregate(
        date=f"2024-03-{index + 1:02d}",
        mood=mood, energy=energy, stress=stress, sleep=sleep,
        composite_score=(mood + energy + (6 - stress) + sleep) / 4,
        completed_habits=0, total_habits=0,
        completion_rate=rate,
    )


class TestSlope:
    """Test least-squares slope estimation."""

    def test_unit_slope(self):
        """Test 1..10 has slope 1."""
        assert calculate_slope(list(range(1, 11))) == pytest.approx(1.0)

    def test_constant_slope_is_zero(self):
        """Test a flat series has zero slope."""
        assert calculate_slope([4] * 10) == pytest.approx(0.0, abs=1e-12)

    def test_short_series(self):
        """Test fewer than two points gives zero slope."""
        assert calculate_slope([5]) == 0.0
        assert calculate_slope([]) == 0.0

    def test_exact_threshold_slope(self):
        """Test integer ratings with an exact slope of 0.1 give exactly 0.1."""
        # n*sum(xy) - sum(x)*sum(y) = 121, n*sum(x^2) - sum(x)^2 = 1210
        assert calculate_slope([4, 1, 1, 4, 1, 1, 4, 2, 1, 4, 4]) == 0.1


class TestClassification:
    """Test trend classification thresholds."""

    def test_thresholds(self):
        """Test slopes around the +/-0.1 boundary."""
        assert classify_slope(0.11) is TrendDirection.IMPROVING
        assert classify_slope(0.1) is TrendDirection.STABLE
        assert classify_slope(-0.1) is TrendDirection.STABLE
        assert classify_slope(-0.11) is TrendDirection.DECLINING

    def test_increasing_series_improving(self):
        """Test a strictly increasing 10-point series is improving."""
        assert classify_series(list(range(1, 11))) is TrendDirection.IMPROVING

    def test_slope_at_threshold_stable(self):
        """Test a series whose slope sits exactly on the threshold is stable."""
        assert classify_series([4, 1, 1, 4, 1, 1, 4, 2, 1, 4, 4]) is TrendDirection.STABLE

    def test_constant_series_stable(self):
        """Test a constant series is stable."""
        assert classify_series([3] * 10) is TrendDirection.STABLE

    def test_short_series_always_stable(self):
        """Test fewer than 7 points is stable regardless of values."""
        assert classify_series([1, 2, 3, 4, 5, 6]) is TrendDirection.STABLE
        assert classify_series([100, 0, 100, 0, 100, 0]) is TrendDirection.STABLE


class TestCalculateTrends:
    """Test per-dimension trend summary."""

    def test_insufficient_days(self):
        """Test fewer than 7 days returns stable everywhere."""
        days = [day(i, mood=i % 5 + 1, rate=i * 15.0) for i in range(6)]
        assert calculate_trends(days) == TrendSummary()

    def test_rising_mood_and_habits(self):
        """Test rising mood and completion rate are improving."""
        days = [day(i, mood=min(5, 1 + i // 2), rate=i * 10.0) for i in range(10)]
        trends = calculate_trends(days)
        assert trends.mood is TrendDirection.IMPROVING
        assert trends.habits is TrendDirection.IMPROVING
        assert trends.energy is TrendDirection.STABLE
        assert trends.sleep is TrendDirection.STABLE

    def test_stress_uses_inverted_series(self):
        """Test falling stress classifies as improving."""
        days = [day(i, stress=max(1, 5 - i // 2)) for i in range(10)]
        assert calculate_trends(days).stress is TrendDirection.IMPROVING

    def test_rising_stress_declining(self):
        """Test rising stress classifies as declining."""
        days = [day(i, stress=min(5, 1 + i // 2)) for i in range(10)]
        assert calculate_trends(days).stress is TrendDirection.DECLINING

    def test_falling_completion_declining(self):
        """Test a falling completion rate is declining."""
        days = [day(i, rate=100.0 - i * 10) for i in range(8)]
        assert calculate_trends(days).habits is TrendDirection.DECLINING

    def test_threshold_mood_stable_in_summary(self):
        """Test an exact 0.1 mood slope stays stable in the summary."""
        moods = [4, 1, 1, 4, 1, 1, 4, 2, 1, 4, 4]
        days = [day(i, mood=mood) for i, mood in enumerate(moods)]
        assert calculate_trends(days).mood is TrendDirection.STABLE

    def test_custom_min_days(self):
        """Test a lower min_days enables trends on short periods."""
        days = [day(i, mood=i + 1) for i in range(5)]
        assert calculate_trends(days, min_days=3).mood is TrendDirection.IMPROVING
