"""Pydantic models for canonical training events."""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from trainer_workload.models.trainer import TrainerSeed, TrainerStatus


class ActionType(str, Enum):
    """Sign applied to a training duration."""

    ADD = "ADD"
    REMOVE = "REMOVE"


class TrainingEvent(BaseModel):
    """One training session routed to a trainer's monthly total.

    The username is carried as received; the aggregation engine decides
    whether it identifies a trainer.
    """

    model_config = ConfigDict(frozen=True)

    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    active: bool = False
    date: date
    duration_minutes: int = Field(ge=0)
    action: ActionType = ActionType.ADD

    @property
    def signed_duration(self) -> int:
        if self.action == ActionType.REMOVE:
            return -self.duration_minutes
        return self.duration_minutes

    def to_seed(self) -> TrainerSeed:
        return TrainerSeed(
            first_name=self.first_name,
            last_name=self.last_name,
            status=TrainerStatus.from_active(self.active),
        )
