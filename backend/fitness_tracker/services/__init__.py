"""
Training services.

Usage:
    from fitness_tracker.services import build_training_report
"""
from .training import TrainingService, build_training_report

__all__ = [
    "TrainingService",
    "build_training_report",
]
