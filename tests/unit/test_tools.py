"""Tests for the MCP tool surface."""

import json

import pytest

from trainer_workload.tools import register_all_tools


class FakeMCP:
    """Records functions registered through ``@mcp.tool()``."""

    def __init__(self):
        self.tools = {}

    def tool(self):
        def decorator(fn):
            self.tools[fn.__name__] = fn
            return fn

        return decorator


@pytest.fixture
def tools(service):
    mcp = FakeMCP()
    register_all_tools(mcp, service)
    return mcp.tools


def _event(**overrides):
    payload = {"username": "t1", "active": True, "date": "2024-11-01", "durationMinutes": 10}
    payload.update(overrides)
    return json.dumps(payload)


class TestRecordTraining:
    def test_records_event(self, tools):
        result = tools["record_training"](_event())
        assert result == {
            "data": {"username": "t1", "year": 2024, "month": "november", "total_minutes": 10}
        }

    def test_remove(self, tools):
        tools["record_training"](_event())
        result = tools["record_training"](_event(actionType="DELETE", durationMinutes=4))
        assert result["data"]["total_minutes"] == 6

    def test_malformed_event_error(self, tools):
        result = tools["record_training"](_event(durationMinutes=-3))
        assert result["error"].startswith("Malformed training event: ")

    def test_invalid_trainer_error(self, tools):
        result = tools["record_training"](_event(username=" "))
        assert result == {"error": "Invalid trainer data (empty username)"}


class TestGetTrainerWorkload:
    def test_returns_camel_case_view(self, tools):
        tools["record_training"](_event(firstName="Alice", lastName="Smith"))
        assert tools["get_trainer_workload"]("t1") == {
            "data": {
                "username": "t1",
                "firstName": "Alice",
                "lastName": "Smith",
                "status": "ACTIVE",
                "years": [{"year": 2024, "months": [{"november": 10}]}],
            }
        }

    def test_not_found_error(self, tools):
        assert tools["get_trainer_workload"]("ghost") == {"error": "Trainer not found: ghost"}


class TestListTrainers:
    def test_lists_usernames(self, tools):
        tools["record_training"](_event(username="b"))
        tools["record_training"](_event(username="a"))
        assert tools["list_trainers"]() == {"data": {"trainers": ["b", "a"], "count": 2}}
