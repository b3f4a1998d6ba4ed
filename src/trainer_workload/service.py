"""Wiring of store, engine, projection and ingestion into one service object."""

from typing import Any, Iterable, Optional

from trainer_workload.config import Settings
from trainer_workload.engine import AggregationEngine
from trainer_workload.ingestion import EventIngestionAdapter
from trainer_workload.models.events import TrainingEvent
from trainer_workload.models.trainer import TrainerRecord
from trainer_workload.models.views import TrainerView
from trainer_workload.projection import TrainerQuery
from trainer_workload.storage.trainers import TrainerStore
from trainer_workload.validation import is_valid_trainer


class TrainerWorkloadService:
    """Owns one trainer store and the components that read and write it.

    Can be used as a context manager; leaving the block clears the store.
    """

    def __init__(self, settings: Optional[Settings] = None, store: Optional[TrainerStore] = None):
        self.settings = settings or Settings()
        self.store = store if store is not None else TrainerStore()
        self.engine = AggregationEngine(self.store, self.settings)
        self.query = TrainerQuery(self.store)
        self.ingestion = EventIngestionAdapter(self.engine)

    def __enter__(self) -> "TrainerWorkloadService":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def is_valid_trainer(self, identity: Any) -> bool:
        return is_valid_trainer(identity)

    def get_trainer(self, username: str) -> Optional[TrainerRecord]:
        """Plain lookup; None when the username is unknown."""
        return self.store.get(username)

    def apply(self, event: TrainingEvent) -> int:
        return self.engine.apply(event)

    def handle_event(self, raw: Any) -> int:
        return self.ingestion.handle(raw)

    def get_trainer_view(self, username: str) -> TrainerView:
        return self.query.get_trainer_view(username)

    def seed(self, records: Iterable[TrainerRecord]) -> int:
        return self.store.seed(records)

    def list_trainers(self) -> list[str]:
        return self.store.usernames()

    def close(self) -> None:
        self.store.clear()
