"""
Time aggregation.

Sums ``completed`` per (last name, first name) and orders the totals.
"""

import logging
from typing import Dict, Iterable, List, Tuple

import numpy as np

from .types import Person, TimeEntry

logger = logging.getLogger(__name__)


def aggregate_time(records: Iterable[Person]) -> List[TimeEntry]:
    """
    Sum completed time per person.

    Rows sharing a (last name, first name) pair are added together.
    Entries are ordered by total ascending, then last name, then first name.

    Args:
        records: Filtered roster rows

    Returns:
        Sorted TimeEntry list, one per distinct name pair
    """
    totals: Dict[Tuple[str, str], TimeEntry] = {}
    for record in records:
        key = (record.last_name, record.first_name)
        entry = totals.get(key)
        if entry is None:
            entry = totals[key] = TimeEntry(last_name=record.last_name, first_name=record.first_name)
        entry.completed += record.completed

    entries = sorted(
        totals.values(),
        key=lambda e: (e.completed, e.last_name, e.first_name),
    )
    logger.debug(f"Aggregated {len(entries)} time entries")
    return entries


def format_completed(value: float) -> str:
    """
    Render a total as the shortest positional text that round-trips.

    Whole numbers drop the fractional part: ``3.0`` -> ``"3"``,
    ``3.5`` -> ``"3.5"``.
    """
    return np.format_float_positional(value, trim="-")
