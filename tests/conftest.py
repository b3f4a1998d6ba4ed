"""Shared fixtures for the trainer workload test suite."""

from datetime import date

import pytest

from trainer_workload.config import Settings
from trainer_workload.engine import AggregationEngine
from trainer_workload.models import ActionType, TrainerRecord, TrainerStatus, TrainingEvent
from trainer_workload.models.trainer import MonthEntry, YearEntry
from trainer_workload.projection import TrainerQuery
from trainer_workload.service import TrainerWorkloadService
from trainer_workload.storage import TrainerStore


@pytest.fixture
def store() -> TrainerStore:
    return TrainerStore()


@pytest.fixture
def engine(store: TrainerStore) -> AggregationEngine:
    return AggregationEngine(store, Settings())


@pytest.fixture
def query(store: TrainerStore) -> TrainerQuery:
    return TrainerQuery(store)


@pytest.fixture
def service():
    with TrainerWorkloadService(Settings()) as svc:
        yield svc


@pytest.fixture
def make_event():
    """Factory for canonical training events with sensible defaults."""

    def _make(
        username: str | None = "t1",
        day: date = date(2024, 11, 1),
        duration: int = 10,
        action: ActionType = ActionType.ADD,
        **kwargs,
    ) -> TrainingEvent:
        return TrainingEvent(
            username=username,
            date=day,
            duration_minutes=duration,
            action=action,
            **kwargs,
        )

    return _make


@pytest.fixture
def seeded_trainer() -> TrainerRecord:
    """Return the bootstrap trainer: John Doe, 10 minutes in November 2024."""
    return TrainerRecord(
        username="test_trainer",
        first_name="John",
        last_name="Doe",
        status=TrainerStatus.ACTIVE,
        years=[YearEntry(year=2024, months=[MonthEntry(month="november", total=10)])],
    )
