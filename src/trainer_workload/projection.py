"""Read-only workload views of trainer records."""

from trainer_workload.errors import InvalidTrainerData, TrainerNotFound
from trainer_workload.models.trainer import TrainerRecord
from trainer_workload.models.views import TrainerView, YearView
from trainer_workload.storage.trainers import TrainerStore
from trainer_workload.validation import is_valid_trainer


def render_trainer_view(record: TrainerRecord) -> TrainerView:
    """Render a record snapshot, keeping years and months in stored order."""
    return TrainerView(
        username=record.username,
        first_name=record.first_name,
        last_name=record.last_name,
        status=record.status.name,
        years=[
            YearView(
                year=year_entry.year,
                months=[{entry.month: entry.total} for entry in year_entry.months],
            )
            for year_entry in record.years
        ],
    )


class TrainerQuery:
    """Answers workload queries against a trainer store."""

    def __init__(self, store: TrainerStore):
        self.store = store

    def get_trainer_view(self, username: str) -> TrainerView:
        """
        Get the monthly workload view for a trainer.

        Args:
            username: Trainer username

        Returns:
            Immutable TrainerView

        Raises:
            InvalidTrainerData: If the username is missing or blank
            TrainerNotFound: If no record exists for the username
        """
        if not is_valid_trainer(username):
            raise InvalidTrainerData()

        record = self.store.get(username)
        if record is None:
            raise TrainerNotFound(username)

        return render_trainer_view(record)
