#!/usr/bin/env python3
"""
Replay training events from a file and print the resulting workload.

The events file is either a JSON array of event objects or JSON lines
(one event object per line). Each event goes through the same validation
as live ingestion; rejected events are reported and skipped.
"""

import argparse
import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from trainer_workload.config import load_settings, setup_logging
from trainer_workload.errors import TrainerWorkloadError
from trainer_workload.models.views import TrainerView
from trainer_workload.service import TrainerWorkloadService
from trainer_workload.utils.formatting import format_minutes


def load_events(path: Path) -> list[Any]:
    """
    Load raw events from a JSON array, a single JSON object or a JSON-lines file.

    Args:
        path: Path to the events file

    Returns:
        List of raw event payloads (JSON-lines entries are kept as text)
    """
    text = path.read_text()
    stripped = text.lstrip()
    if stripped.startswith("["):
        events = json.loads(text)
        if not isinstance(events, list):
            raise ValueError(f"Expected a JSON array in {path}")
        return events
    if stripped.startswith("{"):
        # One pretty-printed object parses whole; JSON lines do not
        try:
            event = json.loads(text)
        except json.JSONDecodeError:
            event = None
        if isinstance(event, dict):
            return [event]
    return [line for line in text.splitlines() if line.strip()]


def print_trainer(view: TrainerView) -> None:
    """Print one trainer's year/month breakdown."""
    name = " ".join(part for part in (view.first_name, view.last_name) if part)
    header = f"{view.username} ({name})" if name else view.username
    print(f"{header} - {view.status}")
    if not view.years:
        print("  No training recorded")
    for year_view in view.years:
        year_total = sum(total for month in year_view.months for total in month.values())
        print(f"  {year_view.year}  total {format_minutes(year_total)}")
        for month in year_view.months:
            for month_label, total in month.items():
                print(f"    {month_label:<10} {format_minutes(total):>8}  ({total} min)")
    print()


def main() -> int:
    """Main function to replay events and print the workload report."""
    parser = argparse.ArgumentParser(
        description="Replay training events and print trainer workload"
    )
    parser.add_argument("events_file", type=Path, help="JSON array, single JSON object or JSON-lines file of events")
    parser.add_argument("--username", help="Only print this trainer")
    parser.add_argument(
        "--env-file",
        help="Path to .env file with trainer workload settings",
    )

    args = parser.parse_args()

    try:
        settings = load_settings(args.env_file)
    except ValidationError as e:
        print(f"Error: invalid settings: {e}")
        return 1
    setup_logging(settings.log_level)

    if not args.events_file.exists():
        print(f"Error: events file not found: {args.events_file}")
        return 1

    try:
        events = load_events(args.events_file)
    except ValueError as e:
        print(f"Error reading events: {e}")
        return 1

    print("=" * 80)
    print("TRAINER WORKLOAD REPLAY")
    print("=" * 80)

    with TrainerWorkloadService(settings) as service:
        rejected = 0
        for i, raw in enumerate(events, 1):
            try:
                service.handle_event(raw)
            except TrainerWorkloadError as e:
                rejected += 1
                print(f"  Skipped event {i}: {e}")

        print(f"Applied {len(events) - rejected} of {len(events)} events")
        print("-" * 80)

        usernames = [args.username] if args.username else service.list_trainers()
        for username in usernames:
            try:
                print_trainer(service.get_trainer_view(username))
            except TrainerWorkloadError as e:
                print(f"Error: {e}")
                return 1

    return 0


if __name__ == "__main__":
    exit(main())
