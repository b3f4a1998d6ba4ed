"""Exception hierarchy for the trainer workload service."""

from typing import Any

INVALID_TRAINER_MESSAGE = "Invalid trainer data (empty username)"


class TrainerWorkloadError(Exception):
    """Base exception for all trainer workload errors."""


class InvalidTrainerData(TrainerWorkloadError):
    """Trainer username is missing or blank."""

    def __init__(self, message: str = INVALID_TRAINER_MESSAGE):
        super().__init__(message)


class TrainerNotFound(TrainerWorkloadError):
    """No trainer record exists for the requested username."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Trainer not found: {username}")


class MalformedEvent(TrainerWorkloadError):
    """Ingestion payload failed shape validation."""

    def __init__(self, details: str, errors: list[dict[str, Any]] | None = None):
        self.errors = errors or []
        super().__init__(f"Malformed training event: {details}")
