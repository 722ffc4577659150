"""Configuration management for the mood-habit analysis engine."""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration."""

    # Application
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    DEFAULT_ANALYSIS_DAYS: int = int(os.getenv("DEFAULT_ANALYSIS_DAYS", "30"))

    # Trend Estimation
    MIN_TREND_DAYS: int = int(os.getenv("MIN_TREND_DAYS", "7"))  # below this every trend is stable
    TREND_SLOPE_THRESHOLD: float = float(os.getenv("TREND_SLOPE_THRESHOLD", "0.1"))  # units per day

    # Correlation Interpretation
    CORRELATION_MODERATE_THRESHOLD: float = float(os.getenv("CORRELATION_MODERATE_THRESHOLD", "0.3"))
    CORRELATION_STRONG_THRESHOLD: float = float(os.getenv("CORRELATION_STRONG_THRESHOLD", "0.5"))
    STRESS_PROTECTIVE_THRESHOLD: float = float(os.getenv("STRESS_PROTECTIVE_THRESHOLD", "-0.2"))

    # Optimal Range Analysis
    HIGH_COMPLETION_RATE: float = float(os.getenv("HIGH_COMPLETION_RATE", "80"))  # percent
    TOP_PERFORMER_FRACTION: float = float(os.getenv("TOP_PERFORMER_FRACTION", "0.25"))
    OPTIMAL_MOOD_MIDPOINT: float = float(os.getenv("OPTIMAL_MOOD_MIDPOINT", "4"))

    @classmethod
    def validate(cls) -> bool:
        """Validate threshold configuration."""
        if cls.MIN_TREND_DAYS < 2:
            raise ValueError("MIN_TREND_DAYS must be at least 2 to fit a slope")
        if cls.TREND_SLOPE_THRESHOLD < 0:
            raise ValueError("TREND_SLOPE_THRESHOLD must be non-negative")
        if not 0 <= cls.CORRELATION_MODERATE_THRESHOLD <= cls.CORRELATION_STRONG_THRESHOLD <= 1:
            raise ValueError(
                "Correlation thresholds must satisfy 0 <= moderate <= strong <= 1"
            )
        if not -1 <= cls.STRESS_PROTECTIVE_THRESHOLD <= 1:
            raise ValueError("STRESS_PROTECTIVE_THRESHOLD must lie in [-1, 1]")
        if not 0 <= cls.HIGH_COMPLETION_RATE <= 100:
            raise ValueError("HIGH_COMPLETION_RATE must be a percentage")
        if not 0 < cls.TOP_PERFORMER_FRACTION <= 1:
            raise ValueError("TOP_PERFORMER_FRACTION must lie in (0, 1]")
        return True


config = Config()
