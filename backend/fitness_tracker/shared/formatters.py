"""
Formatting utilities for training reports.

All numeric fields are rendered with two decimals.
"""

from fitness_tracker.shared.constants import ActivityType
from fitness_tracker.shared.training_types import TrainingInfo


DEFAULT_LANGUAGE = "en"

REPORT_TEMPLATES: dict[str, str] = {
    "en": (
        "Activity type: {activity_type}\n"
        "Duration: {duration:.2f} h.\n"
        "Distance: {distance:.2f} km.\n"
        "Speed: {speed:.2f} km/h\n"
        "Calories burned: {calories:.2f}\n"
    ),
    "ru": (
        "Тип тренировки: {activity_type}\n"
        "Длительность: {duration:.2f} ч.\n"
        "Дистанция: {distance:.2f} км.\n"
        "Скорость: {speed:.2f} км/ч\n"
        "Сожгли калорий: {calories:.2f}\n"
    ),
}

UNKNOWN_ACTIVITY_MESSAGES: dict[str, str] = {
    "en": "unknown activity type",
    "ru": "неизвестный тип тренировки",
}

ACTIVITY_LABELS: dict[str, dict[ActivityType, str]] = {
    "en": {activity: activity.value for activity in ActivityType},
    "ru": {
        ActivityType.RUNNING: "Бег",
        ActivityType.WALKING: "Ходьба",
        ActivityType.SWIMMING: "Плавание",
    },
}

SUPPORTED_LANGUAGES = tuple(REPORT_TEMPLATES)


def _resolve_language(language: str | None) -> str:
    if language in REPORT_TEMPLATES:
        return language
    return DEFAULT_LANGUAGE


def format_training_report(info: TrainingInfo, language: str | None = None) -> str:
    """
    Format a training summary as a 5-line report.

    Args:
        info: Computed training summary
        language: Report language ('en' or 'ru'), English if unsupported

    Returns:
        Formatted report (e.g., 'Activity type: Running\\nDuration: 1.00 h.\\n...')
    """
    lang = _resolve_language(language)
    return REPORT_TEMPLATES[lang].format(
        activity_type=ACTIVITY_LABELS[lang][info.activity_type],
        duration=info.duration,
        distance=info.distance_km,
        speed=info.speed_kmh,
        calories=info.calories,
    )


def format_unknown_activity(language: str | None = None) -> str:
    """Message returned in place of a report for an unknown activity type."""
    return UNKNOWN_ACTIVITY_MESSAGES[_resolve_language(language)]
