"""Tests for the event ingestion adapter."""

import json
from datetime import date

import pytest

from trainer_workload.errors import InvalidTrainerData, MalformedEvent
from trainer_workload.ingestion import EventIngestionAdapter
from trainer_workload.models import ActionType, TrainerStatus


@pytest.fixture
def adapter(engine) -> EventIngestionAdapter:
    return EventIngestionAdapter(engine)


def _payload(**overrides):
    payload = {
        "username": "t1",
        "firstName": "Alice",
        "lastName": "Smith",
        "active": True,
        "date": "2024-11-01",
        "durationMinutes": 15,
    }
    payload.update(overrides)
    return payload


class TestParse:
    def test_canonical_payload(self, adapter):
        event = adapter.parse(_payload(actionType="REMOVE"))
        assert event.username == "t1"
        assert event.first_name == "Alice"
        assert event.last_name == "Smith"
        assert event.active is True
        assert event.date == date(2024, 11, 1)
        assert event.duration_minutes == 15
        assert event.action == ActionType.REMOVE

    def test_action_defaults_to_add(self, adapter):
        assert adapter.parse(_payload()).action == ActionType.ADD
        assert adapter.parse(_payload(actionType=None)).action == ActionType.ADD

    @pytest.mark.parametrize("value", ["DELETE", "delete", " remove "])
    def test_delete_is_remove(self, adapter, value):
        assert adapter.parse(_payload(actionType=value)).action == ActionType.REMOVE

    def test_legacy_field_names(self, adapter):
        event = adapter.parse(
            {
                "trainerUsername": "new_trainer",
                "trainerFirstName": "Alice",
                "trainerLastName": "Smith",
                "isActive": True,
                "trainingDate": "2024-11-01",
                "trainingDuration": 5,
                "actionType": "ADD",
            }
        )
        assert event.username == "new_trainer"
        assert event.active is True
        assert event.duration_minutes == 5

    def test_json_document(self, adapter):
        event = adapter.parse(json.dumps(_payload()))
        assert event.duration_minutes == 15

    def test_date_object(self, adapter):
        assert adapter.parse(_payload(date=date(2024, 2, 29))).date == date(2024, 2, 29)

    def test_numeric_string_duration(self, adapter):
        assert adapter.parse(_payload(durationMinutes="30")).duration_minutes == 30

    def test_missing_active_defaults_to_inactive(self, adapter):
        payload = _payload()
        del payload["active"]
        assert adapter.parse(payload).active is False

    @pytest.mark.parametrize(
        "overrides",
        [
            {"date": "2024-13-01"},
            {"date": "yesterday"},
            {"date": 0},
            {"date": 1730419200},
            {"date": "1730419200"},
            {"date": 1730419200000},
            {"date": "2024-11-01T00:00:00Z"},
            {"durationMinutes": -1},
            {"durationMinutes": "ten"},
            {"durationMinutes": 1.5},
            {"durationMinutes": True},
            {"actionType": "MULTIPLY"},
            {"username": 42},
        ],
    )
    def test_malformed_payloads(self, adapter, overrides):
        with pytest.raises(MalformedEvent, match="^Malformed training event: ") as exc:
            adapter.parse(_payload(**overrides))
        assert exc.value.errors

    def test_missing_required_fields(self, adapter):
        with pytest.raises(MalformedEvent) as exc:
            adapter.parse({"username": "t1"})
        locations = {error["loc"][0] for error in exc.value.errors}
        assert {"date", "durationMinutes"} <= locations

    def test_invalid_json(self, adapter):
        with pytest.raises(MalformedEvent):
            adapter.parse("{not json")

    def test_non_mapping_payload(self, adapter):
        with pytest.raises(MalformedEvent, match="got list"):
            adapter.parse([_payload()])


class TestHandle:
    def test_applies_event(self, adapter, store):
        assert adapter.handle(_payload()) == 15
        record = store.get("t1")
        assert record.first_name == "Alice"
        assert record.status == TrainerStatus.ACTIVE
        assert record.years[0].months[0].total == 15

    def test_malformed_event_does_not_mutate(self, adapter, store):
        with pytest.raises(MalformedEvent):
            adapter.handle(_payload(durationMinutes=-5))
        assert len(store) == 0

    @pytest.mark.parametrize("username", ["", "   "])
    def test_blank_username_is_invalid_trainer(self, adapter, store, username):
        with pytest.raises(InvalidTrainerData):
            adapter.handle(_payload(username=username))
        assert len(store) == 0

    def test_missing_username_is_invalid_trainer(self, adapter, store):
        payload = _payload()
        del payload["username"]
        with pytest.raises(InvalidTrainerData):
            adapter.handle(payload)
        assert len(store) == 0
