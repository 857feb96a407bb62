"""
Error types raised while building roster reports.

Every failure is fatal for the run; only the CLI catches these.
"""

from pathlib import Path
from typing import Optional, Union


class RosterReportError(Exception):
    """Base class for all roster report failures."""


class DecodeError(RosterReportError):
    """Input row does not match the roster schema."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class ParseError(RosterReportError):
    """A last-log date component is not an integer."""

    def __init__(self, value: str, message: str):
        self.value = value
        super().__init__(f"cannot parse date {value!r}: {message}")


class InvalidDateError(RosterReportError):
    """Year, month and day parsed but do not name a calendar date."""

    def __init__(self, value: str, year: int, month: int, day: int):
        self.value = value
        self.year = year
        self.month = month
        self.day = day
        super().__init__(
            f"invalid calendar date {value!r} (year={year}, month={month}, day={day})"
        )


class ReportIOError(RosterReportError):
    """Input could not be read or an output file could not be written."""

    def __init__(self, path: Union[str, Path], cause: OSError):
        self.path = Path(path)
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"{self.path}: {reason}")
