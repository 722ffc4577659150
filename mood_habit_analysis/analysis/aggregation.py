"""Join daily mood samples with habit completion records."""

from collections import defaultdict
from typing import Dict, Iterable, List

from ..models import CompletionRecord, DayAggregate, MoodSample


def group_completions_by_date(
    completion_records: Iterable[CompletionRecord]
) -> Dict[str, List[CompletionRecord]]:
    """Group completion records by calendar day."""
    by_date: Dict[str, List[CompletionRecord]] = defaultdict(list)
    for record in completion_records:
        by_date[record.date].append(record)
    return dict(by_date)


def completion_rate(completed_habits: int, total_habits: int) -> float:
    """Percentage of tracked habits completed, clamped to [0, 100]."""
    if total_habits <= 0:
        return 0.0
    rate = completed_habits / total_habits * 100
    return max(0.0, min(100.0, rate))


def aggregate_days(
    mood_samples: Iterable[MoodSample],
    completion_records: Iterable[CompletionRecord],
    active_habit_count: int,
    start_date: str,
    end_date: str
) -> List[DayAggregate]:
    """
    Build one DayAggregate per mood sample inside [start_date, end_date].

    The denominator is the number of completion records on that date. When
    a date has no records at all the user's active-habit count is used
    instead, so a day with nothing logged reads as 0% rather than undefined.

    Returns:
        Aggregates sorted ascending by date
    """
    completions_by_date = group_completions_by_date(completion_records)

    aggregates = []
    for sample in mood_samples:
        # ISO calendar strings order lexicographically
        if not start_date <= sample.date <= end_date:
            continue

        day_completions = completions_by_date.get(sample.date, [])
        completed_habits = sum(1 for record in day_completions if record.completed)
        total_habits = len(day_completions) or active_habit_count

        aggregates.append(DayAggregate(
            date=sample.date,
            mood=sample.mood,
            energy=sample.energy,
            stress=sample.stress,
            sleep=sample.sleep,
            composite_score=sample.composite_score,
            completed_habits=completed_habits,
            total_habits=total_habits,
            completion_rate=completion_rate(completed_habits, total_habits),
        ))

    return sorted(aggregates, key=lambda day: day.date)
