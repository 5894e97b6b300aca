"""Date key helpers.

Date keys are fixed-width ``YYYY-MM-DD`` strings, so lexicographic order
matches calendar order and ranges can be checked with string comparison.
"""

import re
from datetime import date, timedelta

from ..errors import ValidationError

DATE_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

MONDAY = 0
SUNDAY = 6


def is_valid_date_key(value) -> bool:
    """Shape check only; '2024-02-31' passes."""
    return isinstance(value, str) and DATE_KEY_RE.match(value) is not None


def to_date_key(day: date) -> str:
    """Format a date as a date key."""
    return day.strftime("%Y-%m-%d")


def today_key() -> str:
    """Today's local date key."""
    return to_date_key(date.today())


def parse_date_key(date_key: str) -> date:
    """Parse a date key into a date.

    Raises:
        ValidationError: The key is not a real calendar date
    """
    if not is_valid_date_key(date_key):
        raise ValidationError(f"Invalid date '{date_key}'. Use YYYY-MM-DD.")
    try:
        return date.fromisoformat(date_key)
    except ValueError as e:
        raise ValidationError(f"'{date_key}' is not a calendar date") from e


def in_range(date_key: str, start_key: str, end_key: str) -> bool:
    """Inclusive range check by string comparison."""
    return start_key <= date_key <= end_key


def start_of_week(date_key: str, week_start: int = MONDAY) -> str:
    """First day of the week containing date_key.

    Args:
        date_key: The reference date
        week_start: ``date.weekday()`` number of the first day (0=Monday, 6=Sunday)
    """
    day = parse_date_key(date_key)
    offset = (day.weekday() - week_start) % 7
    return to_date_key(day - timedelta(days=offset))


def start_of_month(date_key: str) -> str:
    """First day of the month containing date_key."""
    return to_date_key(parse_date_key(date_key).replace(day=1))


def start_of_year(date_key: str) -> str:
    """First day of the year containing date_key."""
    return to_date_key(parse_date_key(date_key).replace(month=1, day=1))
