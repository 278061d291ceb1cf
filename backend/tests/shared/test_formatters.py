"""
Tests for report formatting and activity type parsing.
"""

import pytest

from fitness_tracker.shared.constants import ActivityType
from fitness_tracker.shared.formatters import (
    format_training_report,
    format_unknown_activity,
)
from fitness_tracker.shared.training_types import TrainingInfo


@pytest.fixture
def info():
    return TrainingInfo(
        activity_type=ActivityType.RUNNING,
        duration=1,
        distance_km=0.65,
        speed_kmh=0.65,
        calories=87.96060000001,
    )


# =============================================================================
# Test Report Formatting
# =============================================================================

class TestFormatTrainingReport:
    """Tests for format_training_report function."""

    def test_english_report(self, info):
        report = format_training_report(info)
        assert report == (
            "Activity type: Running\n"
            "Duration: 1.00 h.\n"
            "Distance: 0.65 km.\n"
            "Speed: 0.65 km/h\n"
            "Calories burned: 87.96\n"
        )

    def test_five_lines(self, info):
        assert len(format_training_report(info).splitlines()) == 5

    def test_two_decimals_regardless_of_precision(self):
        info = TrainingInfo(
            activity_type=ActivityType.WALKING,
            duration=0.333333,
            distance_km=12.0,
            speed_kmh=36.000004,
            calories=1e-9,
        )
        report = format_training_report(info)
        assert "Duration: 0.33 h." in report
        assert "Distance: 12.00 km." in report
        assert "Speed: 36.00 km/h" in report
        assert "Calories burned: 0.00" in report

    def test_russian_report(self, info):
        report = format_training_report(info, "ru")
        assert report.startswith("Тип тренировки: Бег\n")
        assert "Длительность: 1.00 ч." in report
        assert "Сожгли калорий: 87.96" in report

    def test_unsupported_language_falls_back_to_english(self, info):
        assert format_training_report(info, "de") == format_training_report(info, "en")


class TestFormatUnknownActivity:
    """Tests for format_unknown_activity function."""

    def test_english(self):
        assert format_unknown_activity() == "unknown activity type"

    def test_russian(self):
        assert format_unknown_activity("ru") == "неизвестный тип тренировки"


# =============================================================================
# Test Activity Type Parsing
# =============================================================================

class TestActivityTypeParse:
    """Tests for ActivityType.parse."""

    @pytest.mark.parametrize("value,expected", [
        ("Running", ActivityType.RUNNING),
        ("Walking", ActivityType.WALKING),
        ("Swimming", ActivityType.SWIMMING),
        (ActivityType.SWIMMING, ActivityType.SWIMMING),
        ("Бег", ActivityType.RUNNING),
        ("Ходьба", ActivityType.WALKING),
        ("Плавание", ActivityType.SWIMMING),
    ])
    def test_known(self, value, expected):
        assert ActivityType.parse(value) is expected

    @pytest.mark.parametrize("value", ["Cycling", "running", "", None, 42])
    def test_unknown(self, value):
        assert ActivityType.parse(value) is None


class TestTrainingInfo:
    """Tests for TrainingInfo.to_dict."""

    def test_to_dict_rounds(self, info):
        assert info.to_dict() == {
            "activity_type": "Running",
            "duration": 1,
            "distance_km": 0.65,
            "speed_kmh": 0.65,
            "calories": 87.96,
        }
