"""Data models for mood samples, habit completions and analysis results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

DIMENSIONS: Tuple[str, ...] = ("mood", "energy", "stress", "sleep")


def composite_score(mood: int, energy: int, stress: int, sleep: int) -> float:
    """Blend the four dimensions into one score; stress is inverted."""
    return (mood + energy + (6 - stress) + sleep) / 4


@dataclass(frozen=True)
class MoodSample:
    """One day's subjective-state check-in."""
    date: str  # YYYY-MM-DD
    mood: int  # 1 = very bad, 5 = excellent
    energy: int  # 1 = very low, 5 = very high
    stress: int  # 1 = very low, 5 = very high
    sleep: int  # 1 = very poor, 5 = excellent

    @property
    def composite_score(self) -> float:
        return composite_score(self.mood, self.energy, self.stress, self.sleep)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MoodSample":
        return cls(
            date=str(data["date"]),
            mood=int(data["mood"]),
            energy=int(data["energy"]),
            stress=int(data["stress"]),
            sleep=int(data["sleep"]),
        )


@dataclass(frozen=True)
class CompletionRecord:
    """Whether a single habit was completed on a given day."""
    habit_id: str
    date: str  # YYYY-MM-DD
    completed: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CompletionRecord":
        habit_id = data["habit_id"] if "habit_id" in data else data["habitId"]
        return cls(
            habit_id=str(habit_id),
            date=str(data["date"]),
            completed=bool(data["completed"]),
        )


@dataclass(frozen=True)
class DayAggregate:
    """A mood sample joined with that day's habit completions."""
    date: str
    mood: int
    energy: int
    stress: int
    sleep: int
    composite_score: float
    completed_habits: int
    total_habits: int
    completion_rate: float  # percent, 0-100

    def value(self, dimension: str) -> int:
        return getattr(self, dimension)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "mood": self.mood,
            "energy": self.energy,
            "stress": self.stress,
            "sleep": self.sleep,
            "composite_score": float(self.composite_score),
            "completed_habits": int(self.completed_habits),
            "total_habits": int(self.total_habits),
            "completion_rate": float(self.completion_rate),
        }


@dataclass(frozen=True)
class CorrelationCoefficients:
    """Pearson r between each dimension and the daily completion rate."""
    mood: float = 0.0
    energy: float = 0.0
    stress: float = 0.0  # not inverted: negative is the expected direction
    sleep: float = 0.0

    def items(self) -> Iterator[Tuple[str, float]]:
        for dimension in DIMENSIONS:
            yield dimension, getattr(self, dimension)

    def to_dict(self) -> Dict[str, float]:
        return {dimension: float(value) for dimension, value in self.items()}


@dataclass(frozen=True)
class OptimalMoodRange:
    """Value interval per dimension observed on the best days."""
    mood: Tuple[int, int] = (3, 5)
    energy: Tuple[int, int] = (3, 5)
    stress: Tuple[int, int] = (1, 3)
    sleep: Tuple[int, int] = (3, 5)

    def midpoint(self, dimension: str) -> float:
        low, high = getattr(self, dimension)
        return (low + high) / 2

    def to_dict(self) -> Dict[str, list]:
        return {dimension: list(getattr(self, dimension)) for dimension in DIMENSIONS}


class TrendDirection(Enum):
    """Direction of a linear trend."""

    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


@dataclass(frozen=True)
class TrendSummary:
    """Trend classification per dimension plus the completion-rate series."""
    mood: TrendDirection = TrendDirection.STABLE
    energy: TrendDirection = TrendDirection.STABLE
    stress: TrendDirection = TrendDirection.STABLE  # classified on 6 - stress
    sleep: TrendDirection = TrendDirection.STABLE
    habits: TrendDirection = TrendDirection.STABLE

    def to_dict(self) -> Dict[str, str]:
        return {
            "mood": self.mood.value,
            "energy": self.energy.value,
            "stress": self.stress.value,
            "sleep": self.sleep.value,
            "habits": self.habits.value,
        }


@dataclass(frozen=True)
class MoodPatterns:
    """High/low performance partitions and first-vs-second-half trends."""
    high_performance_days: Tuple[DayAggregate, ...] = ()
    low_performance_days: Tuple[DayAggregate, ...] = ()
    improving_mood: bool = False
    improving_habits: bool = False


@dataclass(frozen=True)
class PerformanceByMoodLevel:
    """Mean completion rate for low, medium and high composite scores."""
    low: float = 0.0
    medium: float = 0.0
    high: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {"low": float(self.low), "medium": float(self.medium), "high": float(self.high)}


@dataclass(frozen=True)
class AnalysisInsights:
    strongest_positive_correlation: str
    strongest_negative_correlation: str
    optimal_mood_range: OptimalMoodRange
    primary_factor: Optional[str] = None
    performance_by_mood_level: PerformanceByMoodLevel = field(default_factory=PerformanceByMoodLevel)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strongest_positive_correlation": self.strongest_positive_correlation,
            "strongest_negative_correlation": self.strongest_negative_correlation,
            "optimal_mood_range": self.optimal_mood_range.to_dict(),
            "primary_factor": self.primary_factor,
            "performance_by_mood_level": self.performance_by_mood_level.to_dict(),
        }


@dataclass(frozen=True)
class AnalysisStatistics:
    total_days_analyzed: int
    avg_completion_rate: float
    avg_mood_scores: Mapping[str, float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_days_analyzed": int(self.total_days_analyzed),
            "avg_completion_rate": float(self.avg_completion_rate),
            "avg_mood_scores": {k: float(v) for k, v in self.avg_mood_scores.items()},
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Complete output of one analysis run."""
    correlations: CorrelationCoefficients
    insights: AnalysisInsights
    recommendations: Tuple[str, ...]
    statistics: AnalysisStatistics
    patterns: Tuple[DayAggregate, ...]
    trends: TrendSummary = field(default_factory=TrendSummary)

    def to_dict(self) -> Dict[str, Any]:
        """Plain structure suitable for JSON transport."""
        return {
            "correlations": self.correlations.to_dict(),
            "insights": self.insights.to_dict(),
            "recommendations": list(self.recommendations),
            "statistics": self.statistics.to_dict(),
            "patterns": [day.to_dict() for day in self.patterns],
            "trends": self.trends.to_dict(),
        }
