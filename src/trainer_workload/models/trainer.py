"""Pydantic models for trainer workload records."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TrainerStatus(str, Enum):
    """Employment status of a trainer."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"

    @classmethod
    def from_active(cls, active: bool) -> "TrainerStatus":
        return cls.ACTIVE if active else cls.INACTIVE


class MonthEntry(BaseModel):
    """Running total of training minutes for one calendar month."""

    month: str  # lowercase English month name, e.g. "november"
    total: int = 0


class YearEntry(BaseModel):
    """Months of one calendar year, in first-insertion order."""

    year: int
    months: list[MonthEntry] = Field(default_factory=list)


class TrainerSeed(BaseModel):
    """Profile fields used when a trainer record is first created."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    status: TrainerStatus = TrainerStatus.INACTIVE


class TrainerRecord(BaseModel):
    """Aggregate workload state for one trainer."""

    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    status: TrainerStatus = TrainerStatus.INACTIVE
    years: list[YearEntry] = Field(default_factory=list)

    @classmethod
    def from_seed(cls, username: str, seed: TrainerSeed) -> "TrainerRecord":
        return cls(
            username=username,
            first_name=seed.first_name,
            last_name=seed.last_name,
            status=seed.status,
        )
