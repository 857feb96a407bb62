"""Deduplication and ordering of notification candidates."""

from typing import Iterable, List, Set

from .types import NotificationCandidate, Person


def collect_notifications(records: Iterable[Person]) -> List[NotificationCandidate]:
    """
    Collapse stale records to unique name triples.

    Two rows with different pids but identical names produce one
    candidate. Ordered by first name, then last name, then middle name.

    Args:
        records: Records already classified as needing notification

    Returns:
        Sorted unique candidates
    """
    unique: Set[NotificationCandidate] = {NotificationCandidate.from_person(r) for r in records}
    return sorted(unique, key=lambda c: (c.first_name, c.last_name, c.middle_name))
