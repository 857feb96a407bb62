"""First-name substring filter."""

from typing import Iterable, List

from .types import Person


def filter_by_first_name(records: Iterable[Person], substring: str) -> List[Person]:
    """
    Keep records whose first name contains ``substring``.

    Matching is literal and case-sensitive; an empty substring keeps
    every record.

    Args:
        records: Decoded roster rows
        substring: Text to look for in ``first_name``

    Returns:
        Matching records in input order
    """
    return [record for record in records if substring in record.first_name]
