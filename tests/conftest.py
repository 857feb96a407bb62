"""
Pytest configuration for roster-reports tests.
"""

from datetime import date
from pathlib import Path
from typing import Callable, Iterable, List

import pytest

from roster_reports.core.types import Person, ROSTER_FIELDS

TODAY = date(2024, 3, 20)


def make_person(
    first_name: str = "Ann",
    middle_name: str = "Lee",
    last_name: str = "Smith",
    completed: float = 0.0,
    last_log: str = "",
    pid: int = 1,
) -> Person:
    """Build a roster row with placeholder values for unreported fields."""
    return Person(
        award_unit="Unit A",
        first_name=first_name,
        middle_name=middle_name,
        last_name=last_name,
        award_level="Bronze",
        sub_activity="Hiking",
        aim="3 months",
        completed=completed,
        first_log_date="2024-01-01",
        assessor_name="Pat Doe",
        assessor_email="pat@example.org",
        pid=pid,
        last_log=last_log,
        gender="F",
    )


def roster_line(person: Person) -> str:
    """Render a Person as a pipe-delimited row in ROSTER_FIELDS order."""
    return "|".join(str(getattr(person, name)) for name in ROSTER_FIELDS)


@pytest.fixture
def today() -> date:
    """Fixed reference date."""
    return TODAY


@pytest.fixture
def person_factory() -> Callable[..., Person]:
    """Factory for roster rows."""
    return make_person


@pytest.fixture
def write_roster(tmp_path: Path) -> Callable[[Iterable[Person]], Path]:
    """Write people to a roster file with a header and return its path."""

    def _write(people: Iterable[Person], name: str = "roster.psv") -> Path:
        lines: List[str] = ["|".join(ROSTER_FIELDS)]
        lines.extend(roster_line(p) for p in people)
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
