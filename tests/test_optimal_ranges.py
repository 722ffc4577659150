"""Tests for optimal-range and mood-level performance analysis."""

import pytest
from mood_habit_analysis.analysis.optimal_ranges import (
    find_optimal_ranges,
    performance_by_mood_level,
    select_top_performers
)
from mood_habit_analysis.models import DayAggregate, OptimalMoodRange


def day(index, rate, mood=3, energy=3, stress=3, sleep=3, composite=None):
    if composite is None:
        composite = (mood + energy + (6 - stress) + sleep) / 4
    return DayAggregate(
        date=f"2024-04-{index + 1:02d}",
        mood=mood, energy=energy, stress=stress, sleep=sleep,
        composite_score=composite,
        completed_habits=0, total_habits=0,
        completion_rate=float(rate),
    )


class TestTopPerformers:
    """Test top-performer selection."""

    def test_cap_uses_all_days(self):
        """Test the 25% cap is taken over all days, not qualifying ones."""
        # 8 days -> cap of 2, even though 4 days clear 80%
        days = [day(i, r) for i, r in enumerate([85, 95, 100, 90, 10, 20, 30, 40])]
        top = select_top_performers(days)
        assert [d.completion_rate for d in top] == [100, 95]

    def test_cap_rounds_up(self):
        """Test a single day still yields one top performer."""
        assert len(select_top_performers([day(0, 100)])) == 1

    def test_threshold_inclusive(self):
        """Test exactly 80% qualifies."""
        assert len(select_top_performers([day(0, 80), day(1, 79.9)])) == 1


class TestFindOptimalRanges:
    """Test optimal range extraction."""

    def test_fallback_when_no_high_days(self):
        """Test defaults when no day reaches 80%."""
        days = [day(i, 50, mood=1) for i in range(10)]
        ranges = find_optimal_ranges(days)
        assert ranges == OptimalMoodRange()
        assert ranges.mood == (3, 5)
        assert ranges.stress == (1, 3)

    def test_empty_input_fallback(self):
        """Test empty input returns the defaults."""
        assert find_optimal_ranges([]) == OptimalMoodRange()

    def test_min_max_of_top_days(self):
        """Test ranges span the values seen on the top days."""
        days = [
            day(0, 100, mood=4, energy=5, stress=2, sleep=3),
            day(1, 90, mood=5, energy=3, stress=1, sleep=4),
            day(2, 40, mood=1, energy=1, stress=5, sleep=1),
            day(3, 30, mood=1, energy=1, stress=5, sleep=1),
            day(4, 20, mood=1, energy=1, stress=5, sleep=1),
            day(5, 10, mood=1, energy=1, stress=5, sleep=1),
            day(6, 10, mood=1, energy=1, stress=5, sleep=1),
            day(7, 10, mood=1, energy=1, stress=5, sleep=1),
        ]
        ranges = find_optimal_ranges(days)
        assert ranges.mood == (4, 5)
        assert ranges.energy == (3, 5)
        assert ranges.stress == (1, 2)
        assert ranges.sleep == (3, 4)

    def test_midpoint(self):
        """Test range midpoint helper."""
        assert OptimalMoodRange(mood=(4, 5)).midpoint("mood") == 4.5


class TestPerformanceByMoodLevel:
    """Test completion rate bucketed by composite score."""

    def test_buckets(self):
        """Test tercile boundaries are low <= 2.5 < medium <= 3.5 < high."""
        days = [
            day(0, 20, composite=2.5),
            day(1, 40, composite=2.0),
            day(2, 60, composite=3.5),
            day(3, 90, composite=3.75),
            day(4, 100, composite=5.0),
        ]
        levels = performance_by_mood_level(days)
        assert levels.low == pytest.approx(30.0)
        assert levels.medium == pytest.approx(60.0)
        assert levels.high == pytest.approx(95.0)

    def test_empty_buckets_are_zero(self):
        """Test empty buckets default to 0."""
        levels = performance_by_mood_level([day(0, 70, composite=3.0)])
        assert levels.low == 0.0
        assert levels.medium == pytest.approx(70.0)
        assert levels.high == 0.0
