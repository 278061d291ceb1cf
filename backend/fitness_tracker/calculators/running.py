"""
Running Calculator

Calories from mean speed and body weight.
"""

from fitness_tracker.shared.constants import (
    ActivityType,
    M_IN_KM,
    MIN_IN_H,
    RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER,
    RUNNING_CALORIES_MEAN_SPEED_SHIFT,
)
from fitness_tracker.shared.formulas import mean_speed
from fitness_tracker.shared.training_types import CalorieCalculator, TrainingInput


def running_spent_calories(action: int, weight: float, duration: float) -> float:
    """
    Calculate calories burned while running.

    Formula: 18 * speed * 1.79 * weight / 1000 * duration * 60

    Args:
        action: Number of steps
        weight: Body weight in kg
        duration: Training duration in hours

    Returns:
        Calories burned
    """
    speed = mean_speed(action, duration)
    return (
        RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER * speed * RUNNING_CALORIES_MEAN_SPEED_SHIFT
        * weight / M_IN_KM * duration * MIN_IN_H
    )


class RunningCalculator(CalorieCalculator):
    """Running: step-based speed, speed-weighted calories."""

    @property
    def activity_type(self) -> ActivityType:
        return ActivityType.RUNNING

    def mean_speed(self, training: TrainingInput) -> float:
        return mean_speed(training.action, training.duration)

    def spent_calories(self, training: TrainingInput) -> float:
        return running_spent_calories(training.action, training.weight, training.duration)
