"""Storage modules for the trainer workload service."""

from trainer_workload.storage.trainers import TrainerStore

__all__ = [
    "TrainerStore",
]
