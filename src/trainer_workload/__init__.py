"""In-memory aggregation of trainer workload minutes by year and month."""

from trainer_workload.errors import (
    InvalidTrainerData,
    MalformedEvent,
    TrainerNotFound,
    TrainerWorkloadError,
)
from trainer_workload.service import TrainerWorkloadService

__all__ = [
    "TrainerWorkloadService",
    "TrainerWorkloadError",
    "InvalidTrainerData",
    "TrainerNotFound",
    "MalformedEvent",
]

__version__ = "0.1.0"
