"""Input validation for mood samples, completion records and date ranges.

Checks run once at the analysis boundary so the statistical code below it
can assume well-formed integers and ISO calendar dates.
"""

import logging
from datetime import datetime
from typing import Iterable, List, Optional
from dataclasses import dataclass

from ..models import DIMENSIONS, MoodSample

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


class AnalysisError(Exception):
    """Base class for analysis failures."""
    pass


class InvalidInputError(AnalysisError, ValueError):
    """Raised when inputs are malformed before any computation happens."""
    pass


@dataclass
class ValidationResult:
    """Result of a validation check."""
    is_valid: bool
    reason: Optional[str] = None


class DataValidator:
    """Validator for subjective-state samples and analysis date ranges."""

    # Inclusive bounds for each self-reported dimension
    DIMENSION_BOUNDS = {
        'mood': {'min': 1, 'max': 5},
        'energy': {'min': 1, 'max': 5},
        'stress': {'min': 1, 'max': 5},
        'sleep': {'min': 1, 'max': 5},
    }

    def validate_date(self, value: str) -> ValidationResult:
        """Validate a calendar-day string in YYYY-MM-DD form."""
        if not isinstance(value, str) or len(value) != 10:
            return ValidationResult(False, f"Date {value!r} is not in YYYY-MM-DD format")
        try:
            datetime.strptime(value, DATE_FORMAT)
        except ValueError:
            return ValidationResult(False, f"Date {value!r} is not in YYYY-MM-DD format")
        return ValidationResult(True)

    def validate_range(self, start_date: str, end_date: str) -> ValidationResult:
        """Validate an inclusive date range."""
        for value in (start_date, end_date):
            result = self.validate_date(value)
            if not result.is_valid:
                return result

        if start_date > end_date:
            return ValidationResult(
                False,
                f"Start date {start_date} is after end date {end_date}"
            )
        return ValidationResult(True)

    def validate_sample(self, sample: MoodSample) -> ValidationResult:
        """Validate a single mood sample."""
        date_result = self.validate_date(sample.date)
        if not date_result.is_valid:
            return date_result

        for dimension in DIMENSIONS:
            value = getattr(sample, dimension)
            bounds = self.DIMENSION_BOUNDS[dimension]

            # bool is an int subclass but never a valid rating
            if isinstance(value, bool) or not isinstance(value, int):
                return ValidationResult(
                    False,
                    f"{dimension} on {sample.date} must be an integer, got {value!r}"
                )
            if value < bounds['min'] or value > bounds['max']:
                return ValidationResult(
                    False,
                    f"{dimension} value {value} on {sample.date} outside range "
                    f"[{bounds['min']}, {bounds['max']}]"
                )

        return ValidationResult(True)

    def validate_samples(self, samples: Iterable[MoodSample]) -> List[ValidationResult]:
        """Return the failed results for a batch of samples."""
        return [result for result in map(self.validate_sample, samples) if not result.is_valid]

    def ensure_valid(
        self,
        mood_samples: Iterable[MoodSample],
        active_habit_count: int,
        start_date: str,
        end_date: str
    ) -> None:
        """Raise InvalidInputError describing the first problem found."""
        range_result = self.validate_range(start_date, end_date)
        if not range_result.is_valid:
            raise InvalidInputError(range_result.reason)

        if active_habit_count < 0:
            raise InvalidInputError(
                f"Active habit count must be non-negative, got {active_habit_count}"
            )

        failures = self.validate_samples(mood_samples)
        if failures:
            logger.warning(f"Rejected input with {len(failures)} invalid mood sample(s)")
            raise InvalidInputError(failures[0].reason)
