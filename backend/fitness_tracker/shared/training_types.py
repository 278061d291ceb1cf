"""
Base types for calorie calculators.

This module contains only dataclasses, enums and the calculator ABC,
importing nothing but constants to avoid circular dependencies.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict

from fitness_tracker.shared.constants import ActivityType


@dataclass(frozen=True)
class TrainingInput:
    """
    Raw training data as reported by the tracker.

    Fields not used by an activity type are ignored, not validated.
    """
    action: int
    duration: float                 # hours
    weight: float                   # kg
    height: float = 0.0             # cm, walking only
    length_pool: int = 0            # m, swimming only
    count_pool: int = 0             # swimming only


@dataclass(frozen=True)
class TrainingInfo:
    """Computed training summary."""
    activity_type: ActivityType
    duration: float
    distance_km: float
    speed_kmh: float
    calories: float

    def to_dict(self) -> dict:
        """Convert to dict with values rounded for display."""
        data = asdict(self)
        data["activity_type"] = self.activity_type.value
        for key in ("duration", "distance_km", "speed_kmh", "calories"):
            data[key] = round(data[key], 2)
        return data


class CalorieCalculator(ABC):
    """
    Abstract base class for calorie calculators.

    Each calculator pairs an activity type with its speed model
    and its calorie formula.
    """

    @property
    @abstractmethod
    def activity_type(self) -> ActivityType:
        """Activity type handled by this calculator."""
        pass

    @abstractmethod
    def mean_speed(self, training: TrainingInput) -> float:
        """
        Mean speed for the training.

        Args:
            training: Raw training data

        Returns:
            Speed in km/h
        """
        pass

    @abstractmethod
    def spent_calories(self, training: TrainingInput) -> float:
        """Calories burned during the training."""
        pass
