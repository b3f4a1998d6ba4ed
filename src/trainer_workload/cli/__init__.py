"""CLI tools for the trainer workload service."""

from trainer_workload.cli.replay import main as replay_main

__all__ = [
    "replay_main",
]
