"""
Staleness classification.

Decides which people must be notified because they never logged activity
or have not logged for at least two weeks.
"""

import logging
import re
from datetime import date
from typing import Iterable, Iterator, Optional

from ..errors import InvalidDateError, ParseError
from .types import Person

logger = logging.getLogger(__name__)

STALE_AFTER_DAYS = 14

_YEAR = re.compile(r"[+-]?[0-9]+")
_MONTH_DAY = re.compile(r"\+?[0-9]+")


def _parse_component(value: str, text: str, pattern: "re.Pattern[str]", name: str) -> int:
    if not pattern.fullmatch(text):
        raise ParseError(value, f"{name} {text!r} is not an integer")
    return int(text)


def parse_last_log(value: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` last-log value.

    Only the first ten characters are read, at fixed positions. The
    separators at index 4 and 7 are never checked.

    Args:
        value: Non-empty last-log text

    Returns:
        The calendar date

    Raises:
        ParseError: Too short, or a component is not an integer
        InvalidDateError: Components do not form a real date
    """
    if len(value) < 10:
        raise ParseError(value, "expected at least 10 characters (YYYY-MM-DD)")

    year = _parse_component(value, value[0:4], _YEAR, "year")
    month = _parse_component(value, value[5:7], _MONTH_DAY, "month")
    day = _parse_component(value, value[8:10], _MONTH_DAY, "day")

    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidDateError(value, year, month, day) from None


def needs_notification(person: Person, today: date, threshold_days: int = STALE_AFTER_DAYS) -> bool:
    """
    Check whether a person must be notified.

    Args:
        person: Roster row
        today: The run's current date
        threshold_days: Days since last log at which a person is stale

    Returns:
        True if never logged or last logged ``threshold_days`` or more ago
    """
    if person.last_log == "":
        return True
    delta = today - parse_last_log(person.last_log)
    return delta.days >= threshold_days


class StalenessClassifier:
    """Classifies roster rows against a single "today" for the whole run."""

    def __init__(self, today: Optional[date] = None, threshold_days: int = STALE_AFTER_DAYS):
        """
        Initialize the classifier.

        Args:
            today: Reference date (local date at construction if None)
            threshold_days: Days since last log at which a person is stale
        """
        self.today = today if today is not None else date.today()
        self.threshold_days = threshold_days

    def is_stale(self, person: Person) -> bool:
        return needs_notification(person, self.today, self.threshold_days)

    def classify(self, records: Iterable[Person]) -> Iterator[Person]:
        """Yield the records that need notification."""
        for record in records:
            if self.is_stale(record):
                logger.debug(
                    f"{record.first_name} {record.last_name} needs notification "
                    f"(last log: {record.last_log or 'never'})"
                )
                yield record
