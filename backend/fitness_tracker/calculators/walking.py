"""
Walking Calculator

Calories from body weight plus a speed/height term.
"""

from fitness_tracker.shared.constants import (
    ActivityType,
    CM_IN_M,
    KMH_IN_MSEC,
    MIN_IN_H,
    WALKING_CALORIES_WEIGHT_MULTIPLIER,
    WALKING_SPEED_HEIGHT_MULTIPLIER,
)
from fitness_tracker.shared.formulas import mean_speed
from fitness_tracker.shared.training_types import CalorieCalculator, TrainingInput


def walking_spent_calories(
    action: int,
    duration: float,
    weight: float,
    height: float
) -> float:
    """
    Calculate calories burned while walking.

    Formula: (0.035 * weight + (v_ms^2 / height_m) * 0.029 * weight) * duration * 60

    Args:
        action: Number of steps
        duration: Training duration in hours
        weight: Body weight in kg
        height: Body height in cm

    Returns:
        Calories burned

    Notes:
        - Mean speed is converted from km/h to m/s
        - Height is converted from cm to m
    """
    speed_ms = mean_speed(action, duration) * KMH_IN_MSEC
    height_m = height / CM_IN_M

    return (
        WALKING_CALORIES_WEIGHT_MULTIPLIER * weight
        + (speed_ms ** 2 / height_m) * WALKING_SPEED_HEIGHT_MULTIPLIER * weight
    ) * duration * MIN_IN_H


class WalkingCalculator(CalorieCalculator):
    """Walking: step-based speed, height-aware calories."""

    @property
    def activity_type(self) -> ActivityType:
        return ActivityType.WALKING

    def mean_speed(self, training: TrainingInput) -> float:
        return mean_speed(training.action, training.duration)

    def spent_calories(self, training: TrainingInput) -> float:
        return walking_spent_calories(
            training.action,
            training.duration,
            training.weight,
            training.height,
        )
