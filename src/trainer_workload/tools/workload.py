"""MCP tools for recording and querying trainer workload."""

from typing import Any

from trainer_workload.errors import TrainerWorkloadError
from trainer_workload.service import TrainerWorkloadService
from trainer_workload.utils.dates import month_name


def register_workload_tools(mcp, service: TrainerWorkloadService):
    """Register trainer workload MCP tools."""

    @mcp.tool()
    def record_training(event_json: str) -> dict[str, Any]:
        """
        Record one training session against a trainer's monthly workload.

        The event is a JSON object:
        {"username": "...", "firstName": "...", "lastName": "...", "active": true,
         "date": "YYYY-MM-DD", "durationMinutes": 60, "actionType": "ADD"}

        actionType is ADD (default) or REMOVE/DELETE. A trainer seen for the
        first time is created from the name and active fields.

        Args:
            event_json: JSON string containing the training event

        Returns:
            Dictionary with the trainer, month and resulting total
        """
        try:
            event = service.ingestion.parse(event_json)
            total = service.apply(event)
        except TrainerWorkloadError as e:
            return {"error": str(e)}
        return {
            "data": {
                "username": event.username,
                "year": event.date.year,
                "month": month_name(event.date),
                "total_minutes": total,
            }
        }

    @mcp.tool()
    def get_trainer_workload(username: str) -> dict[str, Any]:
        """
        Get a trainer's training minutes broken down by year and month.

        Args:
            username: Trainer username

        Returns:
            Dictionary with username, firstName, lastName, status and years,
            each year holding its months in the order they were first recorded
        """
        try:
            view = service.get_trainer_view(username)
        except TrainerWorkloadError as e:
            return {"error": str(e)}
        return {"data": view.model_dump(by_alias=True)}

    @mcp.tool()
    def list_trainers() -> dict[str, Any]:
        """
        List all trainers with recorded workload.

        Returns:
            Dictionary containing usernames and count
        """
        usernames = service.list_trainers()
        return {"data": {"trainers": usernames, "count": len(usernames)}}
