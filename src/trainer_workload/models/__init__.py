"""Pydantic models for the trainer workload service."""

from trainer_workload.models.trainer import (
    MonthEntry,
    TrainerRecord,
    TrainerSeed,
    TrainerStatus,
    YearEntry,
)
from trainer_workload.models.events import ActionType, TrainingEvent
from trainer_workload.models.views import TrainerView, YearView

__all__ = [
    # Stored state
    "TrainerStatus",
    "MonthEntry",
    "YearEntry",
    "TrainerSeed",
    "TrainerRecord",
    # Input
    "ActionType",
    "TrainingEvent",
    # Read views
    "YearView",
    "TrainerView",
]
