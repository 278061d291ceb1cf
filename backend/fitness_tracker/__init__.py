"""
Fitness Tracker

Distance, mean speed and calorie calculations for running,
walking and swimming, with a formatted training report.

Usage:
    from fitness_tracker import build_training_report

    report = build_training_report(1000, "Running", 1.0, 70, 175, 0, 0)
"""
from .shared import (
    ActivityType,
    TrainingInput,
    TrainingInfo,
    distance,
    mean_speed,
    swimming_mean_speed,
    format_training_report,
)
from .calculators import (
    running_spent_calories,
    walking_spent_calories,
    swimming_spent_calories,
)
from .services import TrainingService, build_training_report

__all__ = [
    "ActivityType",
    "TrainingInput",
    "TrainingInfo",
    "distance",
    "mean_speed",
    "swimming_mean_speed",
    "format_training_report",
    "running_spent_calories",
    "walking_spent_calories",
    "swimming_spent_calories",
    "TrainingService",
    "build_training_report",
]
