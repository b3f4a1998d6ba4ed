"""Formatting utilities for workload minutes."""


def format_minutes(minutes: int) -> str:
    """Convert minutes to H:MM format (e.g., '2:05'); negative totals keep their sign."""
    sign = "-" if minutes < 0 else ""
    minutes = abs(minutes)
    return f"{sign}{minutes // 60}:{minutes % 60:02d}"
