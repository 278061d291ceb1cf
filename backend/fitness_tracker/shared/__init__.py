"""
Shared utilities (formulas, constants, formatting).

Usage:
    from fitness_tracker.shared import distance, mean_speed
    from fitness_tracker.shared.formatters import format_training_report
"""
from .constants import (
    ActivityType,
    LEGACY_ACTIVITY_ALIASES,
    STEP_LENGTH_M,
    M_IN_KM,
    MIN_IN_H,
    KMH_IN_MSEC,
    CM_IN_M,
)
from .formulas import (
    distance,
    mean_speed,
    swimming_mean_speed,
)
from .training_types import (
    TrainingInput,
    TrainingInfo,
    CalorieCalculator,
)
from .formatters import (
    SUPPORTED_LANGUAGES,
    format_training_report,
    format_unknown_activity,
)

__all__ = [
    # constants
    "ActivityType",
    "LEGACY_ACTIVITY_ALIASES",
    "STEP_LENGTH_M",
    "M_IN_KM",
    "MIN_IN_H",
    "KMH_IN_MSEC",
    "CM_IN_M",
    # formulas
    "distance",
    "mean_speed",
    "swimming_mean_speed",
    # types
    "TrainingInput",
    "TrainingInfo",
    "CalorieCalculator",
    # formatters
    "SUPPORTED_LANGUAGES",
    "format_training_report",
    "format_unknown_activity",
]
