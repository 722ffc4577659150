"""Tests for threshold configuration."""

import pytest
from mood_habit_analysis.config import Config


class TestConfig:
    """Test configuration defaults and validation."""

    def test_defaults_are_valid(self):
        """Test the shipped defaults pass validation."""
        assert Config.validate() is True

    def test_default_thresholds(self):
        """Test the documented default thresholds."""
        assert Config.MIN_TREND_DAYS == 7
        assert Config.TREND_SLOPE_THRESHOLD == 0.1
        assert Config.HIGH_COMPLETION_RATE == 80

    def test_inverted_correlation_thresholds_rejected(self, monkeypatch):
        """Test moderate above strong is rejected."""
        monkeypatch.setattr(Config, "CORRELATION_MODERATE_THRESHOLD", 0.8)
        with pytest.raises(ValueError):
            Config.validate()

    def test_bad_top_fraction_rejected(self, monkeypatch):
        """Test a zero top-performer fraction is rejected."""
        monkeypatch.setattr(Config, "TOP_PERFORMER_FRACTION", 0.0)
        with pytest.raises(ValueError):
            Config.validate()
