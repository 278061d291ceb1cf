"""
Unified constants for activity types and metric calculations.

This module provides a single source of truth for activity type naming
and for every coefficient used by the calculators.
"""

from enum import Enum
from typing import Optional, Union


class ActivityType(str, Enum):
    """
    Closed set of supported activity types.

    Used in:
    - Training report dispatch
    - Calorie calculator registry
    """
    RUNNING = "Running"
    WALKING = "Walking"
    SWIMMING = "Swimming"

    @classmethod
    def parse(cls, value: Union["ActivityType", str, None]) -> Optional["ActivityType"]:
        """
        Resolve a raw activity tag to an ActivityType.

        Accepts enum members, English tags and the legacy Russian tags.
        Returns None for anything unrecognized.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return LEGACY_ACTIVITY_ALIASES.get(value)


# Mapping: legacy (Russian) tag -> ActivityType
LEGACY_ACTIVITY_ALIASES: dict[str, ActivityType] = {
    "Бег": ActivityType.RUNNING,
    "Ходьба": ActivityType.WALKING,
    "Плавание": ActivityType.SWIMMING,
}


# =============================================================================
# Unit conversion
# =============================================================================

STEP_LENGTH_M = 0.65   # Average step length
M_IN_KM = 1000
MIN_IN_H = 60
KMH_IN_MSEC = 0.278    # km/h -> m/s
CM_IN_M = 100


# =============================================================================
# Calorie formula coefficients
# =============================================================================

# Running
RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER = 18
RUNNING_CALORIES_MEAN_SPEED_SHIFT = 1.79

# Walking
WALKING_CALORIES_WEIGHT_MULTIPLIER = 0.035
WALKING_SPEED_HEIGHT_MULTIPLIER = 0.029

# Swimming
SWIMMING_CALORIES_MEAN_SPEED_SHIFT = 1.1
SWIMMING_CALORIES_WEIGHT_MULTIPLIER = 2
