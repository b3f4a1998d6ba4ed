"""Boundary between externally sourced event payloads and the aggregation engine."""

import logging
import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator

from trainer_workload.engine import AggregationEngine
from trainer_workload.errors import MalformedEvent
from trainer_workload.models.events import ActionType, TrainingEvent

logger = logging.getLogger(__name__)

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


class RawTrainingEvent(BaseModel):
    """Shape of an inbound training event payload.

    Accepts the camelCase keys of the workload API as well as the
    ``trainer*``/``training*`` keys used by older producers.
    """

    username: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("username", "trainerUsername")
    )
    first_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("firstName", "first_name", "trainerFirstName"),
    )
    last_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("lastName", "last_name", "trainerLastName"),
    )
    active: bool = Field(default=False, validation_alias=AliasChoices("active", "isActive"))
    training_date: date = Field(validation_alias=AliasChoices("date", "trainingDate"))
    duration_minutes: int = Field(
        ge=0,
        validation_alias=AliasChoices("durationMinutes", "duration_minutes", "trainingDuration"),
    )
    action_type: ActionType = Field(
        default=ActionType.ADD,
        validation_alias=AliasChoices("actionType", "action_type", "action"),
    )

    @field_validator("training_date", mode="before")
    @classmethod
    def _calendar_date_only(cls, value: Any) -> Any:
        # Timestamps and datetimes would otherwise be coerced to a day
        if isinstance(value, date) and not isinstance(value, datetime):
            return value
        if isinstance(value, str) and _ISO_DATE.fullmatch(value):
            return value
        raise ValueError("date must be a calendar date in YYYY-MM-DD format")

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def _reject_bool_duration(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("duration must be a number of minutes")
        return value

    @field_validator("action_type", mode="before")
    @classmethod
    def _normalize_action(cls, value: Any) -> Any:
        if value is None:
            return ActionType.ADD
        if isinstance(value, str):
            value = value.strip().upper()
            # DELETE is the wire name some producers use for REMOVE
            if value == "DELETE":
                return ActionType.REMOVE
        return value

    def to_event(self) -> TrainingEvent:
        return TrainingEvent(
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            active=self.active,
            date=self.training_date,
            duration_minutes=self.duration_minutes,
            action=self.action_type,
        )


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"]) or "payload"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


class EventIngestionAdapter:
    """Validates raw event payloads and hands canonical events to the engine."""

    def __init__(self, engine: AggregationEngine):
        self.engine = engine

    def parse(self, raw: Any) -> TrainingEvent:
        """
        Validate a raw payload into a canonical TrainingEvent.

        Args:
            raw: A mapping, or a JSON document as str/bytes

        Returns:
            Canonical TrainingEvent

        Raises:
            MalformedEvent: If the payload does not have the event shape
        """
        try:
            if isinstance(raw, (str, bytes, bytearray)):
                parsed = RawTrainingEvent.model_validate_json(raw)
            elif isinstance(raw, Mapping):
                parsed = RawTrainingEvent.model_validate(dict(raw))
            else:
                raise MalformedEvent(
                    f"expected a mapping or JSON document, got {type(raw).__name__}"
                )
        except ValidationError as e:
            errors = e.errors(include_url=False)
            logger.warning("Rejected training event: %s", _describe(e))
            raise MalformedEvent(_describe(e), errors=errors) from e
        return parsed.to_event()

    def handle(self, raw: Any) -> int:
        """
        Validate a raw payload and apply it.

        Args:
            raw: A mapping, or a JSON document as str/bytes

        Returns:
            The affected month total after the update

        Raises:
            MalformedEvent: If the payload does not have the event shape
            InvalidTrainerData: If the username is missing or blank
        """
        return self.engine.apply(self.parse(raw))
