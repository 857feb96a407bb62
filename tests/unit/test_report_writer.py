"""
Tests for ReportWriter - writing time and email reports.
"""

import pytest

from roster_reports.core.types import NotificationCandidate, TimeEntry
from roster_reports.errors import ReportIOError
from roster_reports.export.report_writer import ReportWriter


class TestTimeReport:
    """Test time report output."""

    def test_one_total_per_line(self, tmp_path) -> None:
        entries = [
            TimeEntry(last_name="Jones", first_name="Ann", completed=2.0),
            TimeEntry(last_name="Smith", first_name="Ann", completed=3.5),
        ]
        path = tmp_path / "time.txt"

        ReportWriter().write_time_report(entries, path)

        assert path.read_text(encoding="utf-8") == "2\n3.5\n"

    def test_empty_report_creates_empty_file(self, tmp_path) -> None:
        path = tmp_path / "time.txt"

        ReportWriter().write_time_report([], path)

        assert path.read_text(encoding="utf-8") == ""


class TestEmailReport:
    """Test email report output."""

    def test_one_name_triple_per_line(self, tmp_path) -> None:
        candidates = [
            NotificationCandidate("Ann", "Lee", "Smith"),
            NotificationCandidate("Bob", "", "Adams"),
        ]
        path = tmp_path / "emails.txt"

        ReportWriter().write_email_report(candidates, path)

        assert path.read_text(encoding="utf-8") == "Ann Lee Smith\nBob  Adams\n"

    def test_overwrites_existing_file(self, tmp_path) -> None:
        path = tmp_path / "emails.txt"
        path.write_text("stale content\nfrom before\n", encoding="utf-8")

        ReportWriter().write_email_report([NotificationCandidate("Ann", "Lee", "Smith")], path)

        assert path.read_text(encoding="utf-8") == "Ann Lee Smith\n"

    def test_missing_parent_directory_raises_io_error(self, tmp_path) -> None:
        path = tmp_path / "no" / "such" / "dir" / "emails.txt"

        with pytest.raises(ReportIOError) as exc_info:
            ReportWriter().write_email_report([], path)
        assert exc_info.value.path == path
        assert not path.parent.exists()
