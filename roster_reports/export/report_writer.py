"""
ReportWriter - Write derived reports as line-oriented text files.

Each write replaces whatever was at the target path.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..core.time_aggregator import format_completed
from ..core.types import NotificationCandidate, TimeEntry
from ..errors import ReportIOError

logger = logging.getLogger(__name__)


class ReportWriter:
    """Renders time and email reports to disk."""

    def _write_lines(self, lines: List[str], path: Union[str, Path]) -> Path:
        path = Path(path)
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                for line in lines:
                    f.write(line + "\n")
        except OSError as e:
            raise ReportIOError(path, e) from e
        return path

    def write_time_report(self, entries: Iterable[TimeEntry], path: Union[str, Path]) -> Path:
        """
        Write one total per line, without the name it belongs to.

        Args:
            entries: Sorted time entries
            path: Output file path

        Returns:
            Path to the written file
        """
        lines = [format_completed(entry.completed) for entry in entries]
        output_path = self._write_lines(lines, path)
        logger.info(f"Time report ({len(lines)} lines) saved to {output_path}")
        return output_path

    def write_email_report(
        self, candidates: Iterable[NotificationCandidate], path: Union[str, Path]
    ) -> Path:
        """
        Write one ``first middle last`` line per candidate.

        Args:
            candidates: Sorted unique candidates
            path: Output file path

        Returns:
            Path to the written file
        """
        lines = [str(candidate) for candidate in candidates]
        output_path = self._write_lines(lines, path)
        logger.info(f"Email report ({len(lines)} lines) saved to {output_path}")
        return output_path
