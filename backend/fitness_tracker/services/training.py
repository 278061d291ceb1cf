"""
Training Service

Dispatches raw tracker data to the calculator for its activity type:
- Distance (always step-based)
- Mean speed (step-based or pool-based)
- Calories (activity-specific formula)

This is the main entry point for training reports.
"""

import logging
from typing import Optional, Union

from fitness_tracker.config import settings
from fitness_tracker.calculators import get_calculator
from fitness_tracker.shared.constants import ActivityType
from fitness_tracker.shared.formulas import distance
from fitness_tracker.shared.formatters import (
    format_training_report,
    format_unknown_activity,
)
from fitness_tracker.shared.training_types import TrainingInput, TrainingInfo

logger = logging.getLogger(__name__)


class TrainingService:
    """
    Builds training summaries and reports.

    Stateless apart from the report language.
    """

    def __init__(self, language: Optional[str] = None):
        """
        Args:
            language: Report language. Defaults to settings.report_language.
        """
        self.language = language

    def get_training_info(
        self,
        activity_type: Union[ActivityType, str],
        training: TrainingInput
    ) -> Optional[TrainingInfo]:
        """
        Compute distance, speed and calories for a training.

        Returns None if activity_type is not recognized.
        """
        resolved = ActivityType.parse(activity_type)
        calculator = get_calculator(resolved) if resolved is not None else None
        if calculator is None:
            logger.warning(f"Unknown activity type: {activity_type!r}")
            return None

        logger.debug(f"Calculating {resolved.value} training: {training}")

        # Swimming speed comes from the pool, distance is still step-based
        return TrainingInfo(
            activity_type=resolved,
            duration=training.duration,
            distance_km=distance(training.action),
            speed_kmh=calculator.mean_speed(training),
            calories=calculator.spent_calories(training),
        )

    def build_report(
        self,
        activity_type: Union[ActivityType, str],
        training: TrainingInput
    ) -> str:
        """Format the training summary, or the unknown-type message."""
        language = self.language or settings.report_language
        info = self.get_training_info(activity_type, training)
        if info is None:
            return format_unknown_activity(language)
        return format_training_report(info, language)


def build_training_report(
    action: int,
    activity_type: Union[ActivityType, str],
    duration: float,
    weight: float,
    height: float,
    length_pool: int,
    count_pool: int,
    language: Optional[str] = None,
) -> str:
    """
    Build a training report from raw tracker data.

    Parameters not used by the activity type are ignored.

    Args:
        action: Number of actions (steps, or strokes when swimming)
        activity_type: 'Running', 'Walking' or 'Swimming' (legacy tags accepted)
        duration: Training duration in hours
        weight: Body weight in kg
        height: Body height in cm (walking)
        length_pool: Pool length in meters (swimming)
        count_pool: Number of pool crossings (swimming)
        language: Report language, defaults to settings.report_language

    Returns:
        5-line report, or 'unknown activity type'
    """
    training = TrainingInput(
        action=action,
        duration=duration,
        weight=weight,
        height=height,
        length_pool=length_pool,
        count_pool=count_pool,
    )
    return TrainingService(language).build_report(activity_type, training)
