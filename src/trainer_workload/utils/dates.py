"""Date utility functions for the trainer workload service."""

from datetime import date

# calendar.month_name follows the process locale; these are fixed English names
MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)


def month_name(day: date) -> str:
    """Lowercase English month name for a date, e.g. 'november'."""
    return MONTH_NAMES[day.month - 1]
