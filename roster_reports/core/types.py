"""
Core data types for roster reports.

Defines the input row and the two derived entities.
"""

from dataclasses import dataclass, fields
from typing import Tuple


@dataclass
class Person:
    """
    One roster row.

    Only the name fields, ``completed`` and ``last_log`` feed the reports;
    the rest are decoded and carried through.
    """
    award_unit: str
    first_name: str
    middle_name: str
    last_name: str
    award_level: str
    sub_activity: str
    aim: str
    completed: float
    first_log_date: str
    assessor_name: str
    assessor_email: str
    pid: int
    last_log: str  # "" means never logged
    gender: str


ROSTER_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(Person))


@dataclass
class TimeEntry:
    """Accumulated ``completed`` for one (last name, first name) pair."""
    last_name: str
    first_name: str
    completed: float = 0.0


@dataclass(frozen=True)
class NotificationCandidate:
    """A person to notify, identified by the full name triple."""
    first_name: str
    middle_name: str
    last_name: str

    @classmethod
    def from_person(cls, person: Person) -> "NotificationCandidate":
        return cls(person.first_name, person.middle_name, person.last_name)

    def __str__(self) -> str:
        return f"{self.first_name} {self.middle_name} {self.last_name}"
