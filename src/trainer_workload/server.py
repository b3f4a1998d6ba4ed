#!/usr/bin/env python3
"""
MCP server for trainer workload tracking.
This server exposes tools to record training sessions and query monthly workload.
"""

import logging
import sys

from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError

from trainer_workload.config import load_settings, setup_logging
from trainer_workload.service import TrainerWorkloadService
from trainer_workload.tools import register_all_tools

logger = logging.getLogger(__name__)


def create_server(service: TrainerWorkloadService) -> FastMCP:
    """Build a FastMCP server with all workload tools bound to ``service``."""
    mcp = FastMCP("Trainer Workload MCP Server")
    register_all_tools(mcp, service)
    return mcp


def main() -> int:
    """Main function to start the trainer workload MCP server."""
    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1

    setup_logging(settings.log_level)
    logger.info("Starting trainer workload MCP server")

    with TrainerWorkloadService(settings) as service:
        create_server(service).run(transport="stdio")
    return 0


if __name__ == "__main__":
    exit(main())
