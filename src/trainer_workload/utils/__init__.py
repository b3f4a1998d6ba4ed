"""Utility functions for the trainer workload service."""

from trainer_workload.utils.formatting import format_minutes
from trainer_workload.utils.dates import month_name

__all__ = [
    "format_minutes",
    "month_name",
]
