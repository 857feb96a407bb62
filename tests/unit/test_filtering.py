"""
Tests for the first-name filter.
"""

from roster_reports.core.filtering import filter_by_first_name


class TestFilterByFirstName:
    """Test substring filtering on first names."""

    def test_keeps_only_matching_records(self, person_factory) -> None:
        """Every kept record contains the substring; no match is dropped."""
        records = [
            person_factory(first_name="Ann"),
            person_factory(first_name="Joanne"),
            person_factory(first_name="Bob"),
            person_factory(first_name="Annabel"),
        ]

        kept = filter_by_first_name(records, "Ann")

        assert [r.first_name for r in kept] == ["Ann", "Annabel"]
        assert all("Ann" in r.first_name for r in kept)

    def test_is_case_sensitive(self, person_factory) -> None:
        """Lowercase substring matches inside, not at a capitalised start."""
        records = [person_factory(first_name="Ann"), person_factory(first_name="Joanne")]

        kept = filter_by_first_name(records, "ann")

        assert [r.first_name for r in kept] == ["Joanne"]

    def test_empty_substring_keeps_everything(self, person_factory) -> None:
        """An empty filter matches all records."""
        records = [person_factory(first_name="Ann"), person_factory(first_name="")]

        assert filter_by_first_name(records, "") == records

    def test_no_wildcard_semantics(self, person_factory) -> None:
        """Pattern characters are matched literally."""
        records = [person_factory(first_name="Ann"), person_factory(first_name="A*n")]

        kept = filter_by_first_name(records, "A*n")

        assert [r.first_name for r in kept] == ["A*n"]

    def test_does_not_filter_on_other_names(self, person_factory) -> None:
        """Only the first name is searched."""
        records = [person_factory(first_name="Bob", middle_name="Ann", last_name="Ann")]

        assert filter_by_first_name(records, "Ann") == []
