"""Aggregation of training events into per-trainer monthly totals."""

import logging
from typing import Optional

from trainer_workload.config import Settings
from trainer_workload.errors import InvalidTrainerData
from trainer_workload.models.events import TrainingEvent
from trainer_workload.models.trainer import MonthEntry, TrainerRecord, TrainerStatus, YearEntry
from trainer_workload.storage.trainers import TrainerStore
from trainer_workload.utils.dates import month_name
from trainer_workload.validation import is_valid_trainer

logger = logging.getLogger(__name__)


def find_or_add_year(record: TrainerRecord, year: int) -> YearEntry:
    """Return the record's entry for ``year``, appending an empty one if absent."""
    for entry in record.years:
        if entry.year == year:
            return entry
    entry = YearEntry(year=year)
    record.years.append(entry)
    return entry


def find_or_add_month(year_entry: YearEntry, name: str) -> MonthEntry:
    """Return the year's entry for month ``name``, appending a zero total if absent."""
    for entry in year_entry.months:
        if entry.month == name:
            return entry
    entry = MonthEntry(month=name)
    year_entry.months.append(entry)
    return entry


class AggregationEngine:
    """Applies signed training durations to trainer records held in a store."""

    def __init__(self, store: TrainerStore, settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or Settings()

    def apply(self, event: TrainingEvent) -> int:
        """
        Route one training event to its trainer/year/month total.

        The trainer record is created on first use from the event's name and
        status fields. Everything after validation runs under the store lock.

        Args:
            event: Canonical training event

        Returns:
            The month total after the update

        Raises:
            InvalidTrainerData: If the event's username is missing or blank
        """
        if not is_valid_trainer(event.username):
            raise InvalidTrainerData()

        seed = event.to_seed()
        name = month_name(event.date)
        delta = event.signed_duration

        def _update(record: TrainerRecord) -> int:
            if self.settings.refresh_profile_on_event:
                self._refresh_profile(record, event)
            year_entry = find_or_add_year(record, event.date.year)
            month_entry = find_or_add_month(year_entry, name)
            total = month_entry.total + delta
            if self.settings.clamp_negative_totals and total < 0:
                logger.debug(
                    "Clamping %s %s %d total for %s at 0 (was %d)",
                    event.action.value, name, year_entry.year, record.username, total,
                )
                total = 0
            month_entry.total = total
            return total

        total = self.store.mutate(event.username, seed, _update)
        logger.debug(
            "Applied %+d min to %s %s %d, total now %d",
            delta, event.username, name, event.date.year, total,
        )
        return total

    @staticmethod
    def _refresh_profile(record: TrainerRecord, event: TrainingEvent) -> None:
        if event.first_name is not None:
            record.first_name = event.first_name
        if event.last_name is not None:
            record.last_name = event.last_name
        record.status = TrainerStatus.from_active(event.active)
