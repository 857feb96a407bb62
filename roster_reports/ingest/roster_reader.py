"""
RosterReader - Decode pipe-delimited roster files into Person records.

The header row must name exactly the roster columns, in any order.
"""

import csv
import logging
import re
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Union

from ..core.types import Person, ROSTER_FIELDS
from ..errors import DecodeError, ReportIOError

logger = logging.getLogger(__name__)

DELIMITER = "|"
PID_MAX = 2**32 - 1
_PID = re.compile(r"\+?[0-9]+")
_COMPLETED = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _parse_completed(text: str, line_number: int) -> float:
    if not _COMPLETED.fullmatch(text):
        raise DecodeError(f"completed {text!r} is not a number", line_number)
    return float(text)


def _parse_pid(text: str, line_number: int) -> int:
    if not _PID.fullmatch(text):
        raise DecodeError(f"pid {text!r} is not an unsigned integer", line_number)
    pid = int(text)
    if pid > PID_MAX:
        raise DecodeError(f"pid {text!r} is out of range", line_number)
    return pid


class RosterReader:
    """Decodes roster rows from any iterable of text lines."""

    def __init__(self, delimiter: str = DELIMITER):
        self.delimiter = delimiter

    def _check_header(self, header: List[str]) -> None:
        missing = [name for name in ROSTER_FIELDS if name not in header]
        unknown = [name for name in header if name not in ROSTER_FIELDS]
        duplicated = sorted({name for name in header if header.count(name) > 1})
        problems = []
        if missing:
            problems.append(f"missing columns: {', '.join(missing)}")
        if unknown:
            problems.append(f"unexpected columns: {', '.join(unknown)}")
        if duplicated:
            problems.append(f"duplicated columns: {', '.join(duplicated)}")
        if problems:
            raise DecodeError("; ".join(problems), 1)

    def _to_person(self, row: Dict[str, str], line_number: int) -> Person:
        values: Dict[str, Union[str, int, float]] = dict(row)
        values["completed"] = _parse_completed(row["completed"], line_number)
        values["pid"] = _parse_pid(row["pid"], line_number)
        return Person(**values)

    def iter_records(self, lines: Iterable[str]) -> Iterator[Person]:
        """
        Decode records from text lines.

        Args:
            lines: Input lines, header first

        Yields:
            Person per data row

        Raises:
            DecodeError: Header or row does not match the schema
        """
        reader = csv.reader(lines, delimiter=self.delimiter)
        try:
            header = next(reader)
        except StopIteration:
            raise DecodeError("input is empty, expected a header row") from None
        except csv.Error as e:
            raise DecodeError(str(e), reader.line_num) from None
        self._check_header(header)

        while True:
            try:
                fields = next(reader)
            except StopIteration:
                return
            except csv.Error as e:
                raise DecodeError(str(e), reader.line_num) from None

            if not fields:
                continue
            if len(fields) != len(header):
                raise DecodeError(
                    f"expected {len(header)} fields, found {len(fields)}",
                    reader.line_num,
                )
            yield self._to_person(dict(zip(header, fields)), reader.line_num)

    def read(self, path: Union[str, Path]) -> List[Person]:
        """
        Read every record from a roster file.

        Args:
            path: Roster file path

        Returns:
            All decoded records

        Raises:
            ReportIOError: File cannot be opened or read
            DecodeError: Content does not match the schema
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8-sig", newline="") as f:
                records = list(self.iter_records(f))
        except UnicodeDecodeError as e:
            raise DecodeError(f"{path} is not valid UTF-8: {e.reason}") from None
        except OSError as e:
            raise ReportIOError(path, e) from e

        logger.info(f"Read {len(records)} records from {path}")
        return records


def read_roster(path: Union[str, Path]) -> List[Person]:
    """Read a pipe-delimited roster file."""
    return RosterReader().read(path)
