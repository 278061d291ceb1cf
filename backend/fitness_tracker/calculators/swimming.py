"""
Swimming Calculator

Speed comes from pool geometry, not from the step length model.
"""

from fitness_tracker.shared.constants import (
    ActivityType,
    SWIMMING_CALORIES_MEAN_SPEED_SHIFT,
    SWIMMING_CALORIES_WEIGHT_MULTIPLIER,
)
from fitness_tracker.shared.formulas import swimming_mean_speed
from fitness_tracker.shared.training_types import CalorieCalculator, TrainingInput


def swimming_spent_calories(
    length_pool: int,
    count_pool: int,
    duration: float,
    weight: float
) -> float:
    """
    Calculate calories burned while swimming.

    Formula: (speed + 1.1) * 2 * weight * duration

    Args:
        length_pool: Pool length in meters
        count_pool: Number of pool crossings
        duration: Training duration in hours
        weight: Body weight in kg

    Returns:
        Calories burned
    """
    speed = swimming_mean_speed(length_pool, count_pool, duration)
    return (
        (speed + SWIMMING_CALORIES_MEAN_SPEED_SHIFT)
        * SWIMMING_CALORIES_WEIGHT_MULTIPLIER * weight * duration
    )


class SwimmingCalculator(CalorieCalculator):
    """Swimming: pool-based speed."""

    @property
    def activity_type(self) -> ActivityType:
        return ActivityType.SWIMMING

    def mean_speed(self, training: TrainingInput) -> float:
        return swimming_mean_speed(
            training.length_pool,
            training.count_pool,
            training.duration,
        )

    def spent_calories(self, training: TrainingInput) -> float:
        return swimming_spent_calories(
            training.length_pool,
            training.count_pool,
            training.duration,
            training.weight,
        )
