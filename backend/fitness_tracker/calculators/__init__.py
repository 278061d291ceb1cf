"""
Calorie calculators.

Available calculators:
- RunningCalculator: step-based speed, speed-weighted calories
- WalkingCalculator: step-based speed, height-aware calories
- SwimmingCalculator: pool-based speed

The registry is closed: adding an activity type means adding an
ActivityType member and a calculator here.
"""
from typing import Optional

from fitness_tracker.shared.constants import ActivityType
from fitness_tracker.shared.training_types import CalorieCalculator

from .running import RunningCalculator, running_spent_calories
from .walking import WalkingCalculator, walking_spent_calories
from .swimming import SwimmingCalculator, swimming_spent_calories


CALCULATORS: dict[ActivityType, CalorieCalculator] = {
    ActivityType.RUNNING: RunningCalculator(),
    ActivityType.WALKING: WalkingCalculator(),
    ActivityType.SWIMMING: SwimmingCalculator(),
}


def get_calculator(activity_type: ActivityType) -> Optional[CalorieCalculator]:
    """Get the calculator registered for an activity type."""
    return CALCULATORS.get(activity_type)


__all__ = [
    "RunningCalculator",
    "WalkingCalculator",
    "SwimmingCalculator",
    "running_spent_calories",
    "walking_spent_calories",
    "swimming_spent_calories",
    "CALCULATORS",
    "get_calculator",
]
