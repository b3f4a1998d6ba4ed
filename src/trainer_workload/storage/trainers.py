"""In-memory trainer record storage."""

import logging
import threading
from collections.abc import Callable, Iterable
from typing import Optional, TypeVar

from trainer_workload.errors import InvalidTrainerData
from trainer_workload.models.trainer import TrainerRecord, TrainerSeed
from trainer_workload.validation import is_valid_trainer

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TrainerStore:
    """Authoritative username -> TrainerRecord map.

    A single store-wide ``threading.RLock`` guards the map and every nested
    year/month list.  Reads return deep copies taken under the lock, so
    callers never see a record mid-update and never hold a live handle.
    All mutation goes through :meth:`mutate`.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._records: dict[str, TrainerRecord] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, username: object) -> bool:
        with self._lock:
            return username in self._records

    # ------------------------------------------------------------------
    # Reads (return copies for isolation)
    # ------------------------------------------------------------------

    def get(self, username: str) -> Optional[TrainerRecord]:
        """Get a snapshot of a trainer record, or None if the username is unknown."""
        with self._lock:
            record = self._records.get(username)
            if record is None:
                return None
            return record.model_copy(deep=True)

    def usernames(self) -> list[str]:
        """Known usernames in creation order."""
        with self._lock:
            return list(self._records)

    # ------------------------------------------------------------------
    # Writes (RLock-protected)
    # ------------------------------------------------------------------

    def get_or_create(self, username: str, seed: TrainerSeed) -> TrainerRecord:
        """
        Get a trainer record, creating it from seed fields if absent.

        Args:
            username: Trainer username
            seed: Profile fields for a newly created record

        Returns:
            Snapshot of the existing or newly created record
        """
        with self._lock:
            return self._get_or_create(username, seed).model_copy(deep=True)

    def mutate(
        self,
        username: str,
        seed: TrainerSeed,
        mutator: Callable[[TrainerRecord], T],
    ) -> T:
        """
        Run a mutation against a trainer record inside one critical section.

        The record is created from ``seed`` if absent. The lock is held from
        the existence check until ``mutator`` returns, so concurrent updates to
        the same record are serialized.

        Args:
            username: Trainer username
            seed: Profile fields for a newly created record
            mutator: Callable receiving the live record

        Returns:
            Whatever ``mutator`` returns
        """
        with self._lock:
            return mutator(self._get_or_create(username, seed))

    def seed(self, records: Iterable[TrainerRecord]) -> int:
        """
        Insert pre-built records for usernames not yet present.

        Existing records are never replaced. Nothing is inserted if any record
        has a blank username.

        Args:
            records: Records from a bootstrap source

        Returns:
            Number of records inserted

        Raises:
            InvalidTrainerData: If any record has a blank username
        """
        records = list(records)
        if not all(is_valid_trainer(record) for record in records):
            raise InvalidTrainerData()

        inserted = 0
        with self._lock:
            for record in records:
                if record.username in self._records:
                    logger.debug("Seed skipped, trainer already present: %s", record.username)
                    continue
                self._records[record.username] = record.model_copy(deep=True)
                inserted += 1
        logger.info("Seeded %d trainer record(s)", inserted)
        return inserted

    def clear(self) -> None:
        """Drop all records."""
        with self._lock:
            self._records.clear()

    def _get_or_create(self, username: str, seed: TrainerSeed) -> TrainerRecord:
        record = self._records.get(username)
        if record is None:
            record = TrainerRecord.from_seed(username, seed)
            self._records[username] = record
            logger.info("Created trainer record: %s", username)
        return record
