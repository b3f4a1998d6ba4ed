"""Runtime settings loaded from the environment and an optional .env file."""

import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

ENV_PREFIX = "TRAINER_WORKLOAD_"


class Settings(BaseModel):
    """Settings for the trainer workload service."""

    log_level: str = "INFO"
    # Clamp month totals at zero when a REMOVE would drive them negative
    clamp_negative_totals: bool = False
    # Let later events overwrite first/last name and status of an existing trainer
    refresh_profile_on_event: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load settings from environment variables.

    Args:
        env_file: Optional path to a .env file. Values already present in the
            environment take precedence unless the file is given explicitly.

    Returns:
        Validated Settings
    """
    if env_file:
        load_dotenv(dotenv_path=env_file, override=True)
    else:
        load_dotenv()

    values: dict[str, str] = {}
    for field_name in Settings.model_fields:
        raw = os.environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if raw is not None:
            values[field_name] = raw
    return Settings(**values)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging on stderr; stdout carries MCP traffic and reports."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
