"""
Mathematical formulas for distance and speed calculations.

These formulas are used by every calorie calculator.
Centralizing them here eliminates duplication and ensures consistency.
"""

from fitness_tracker.shared.constants import STEP_LENGTH_M, M_IN_KM


def distance(action: int) -> float:
    """
    Calculate distance covered during a training.

    Formula: d = action * 0.65 / 1000

    Args:
        action: Number of actions (steps, or strokes when swimming)

    Returns:
        Distance in kilometers
    """
    return action * STEP_LENGTH_M / M_IN_KM


def mean_speed(action: int, duration: float) -> float:
    """
    Calculate mean speed over the whole training.

    Args:
        action: Number of actions (steps, or strokes when swimming)
        duration: Training duration in hours

    Returns:
        Speed in km/h, or 0 when duration is zero
    """
    if duration == 0:
        return 0
    return distance(action) / duration


def swimming_mean_speed(length_pool: int, count_pool: int, duration: float) -> float:
    """
    Calculate mean swimming speed from pool geometry.

    Formula: v = length_pool * count_pool / 1000 / duration

    Args:
        length_pool: Pool length in meters
        count_pool: Number of pool crossings
        duration: Training duration in hours

    Returns:
        Speed in km/h, or 0 when duration is zero

    Notes:
        - Does not use the step length model
    """
    if duration == 0:
        return 0
    return length_pool * count_pool / M_IN_KM / duration
