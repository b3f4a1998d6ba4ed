"""MCP tools for the trainer workload service."""

from trainer_workload.tools.workload import register_workload_tools

__all__ = [
    "register_workload_tools",
]


def register_all_tools(mcp, service):
    """Register all MCP tools with the server."""
    register_workload_tools(mcp, service)
