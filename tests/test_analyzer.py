"""
Unit tests for the field completeness analyzer.
"""

from conftest import make_venue

from venue_crawler.analyzer import (
    analyze_venue,
    compute_statistics,
    is_empty,
    severity_label,
    sort_worst_first,
)
from venue_crawler.models import AnalysisResult, LocationContext, ScanEntry, Severity


def entry_for(venue):
    return ScanEntry(venue=venue, analysis=analyze_venue(venue), location=LocationContext(), name=venue.name or "")


class TestIsEmpty:
    """Tests for is_empty."""

    def test_none_and_blank(self):
        assert is_empty(None)
        assert is_empty("")
        assert is_empty("   \t\n")

    def test_values(self):
        assert not is_empty("x")
        assert not is_empty(" 555-1234 ")
        assert not is_empty(0)


class TestAnalyzeVenue:
    """Tests for the severity decision table."""

    def test_complete(self):
        venue = make_venue(phone="303-555-0100", url="https://joes.example")
        result = analyze_venue(venue)
        assert result.severity == Severity.COMPLETE
        assert result.missing == ()
        assert result.has_contact_info is True

    def test_no_contact_is_critical(self):
        """Joe's Cafe with no phone and no website."""
        result = analyze_venue(make_venue(phone="", url=""))
        assert result.severity == Severity.CRITICAL
        assert list(result.missing) == ["Phone", "Website"]
        assert result.has_contact_info is False

    def test_no_contact_and_no_name_is_critical(self):
        result = analyze_venue(make_venue(name="", phone=None, url="  "))
        assert result.severity == Severity.CRITICAL
        assert list(result.missing) == ["Name", "Phone", "Website"]

    def test_one_missing_with_contact_is_minor(self):
        """Acme Garage has a phone but no website."""
        venue = make_venue(name="Acme Garage", phone="555-1234", url="", categories=())
        result = analyze_venue(venue)
        assert list(result.missing) == ["Website"]
        assert result.has_contact_info is True
        assert result.severity == Severity.MINOR

    def test_two_missing_with_contact_is_major(self):
        result = analyze_venue(make_venue(name=" ", phone="555-1234", url=""))
        assert list(result.missing) == ["Name", "Website"]
        assert result.severity == Severity.MAJOR

    def test_website_only_counts_as_contact(self):
        result = analyze_venue(make_venue(phone="", url="https://joes.example"))
        assert result.has_contact_info is True
        assert result.severity == Severity.MINOR
        assert list(result.missing) == ["Phone"]

    def test_street_does_not_affect_severity(self):
        with_street = analyze_venue(make_venue(street="123 Main St"))
        without_street = analyze_venue(make_venue(street=""))
        assert with_street == without_street

    def test_idempotent(self):
        venue = make_venue(phone="555-1234")
        first = analyze_venue(venue)
        second = analyze_venue(venue)
        assert first == second
        assert isinstance(first, AnalysisResult)


class TestSeverityOrdering:
    """Tests for labels, statistics and sorting."""

    def test_order(self):
        assert Severity.COMPLETE < Severity.MINOR < Severity.MAJOR < Severity.CRITICAL

    def test_labels(self):
        assert severity_label(Severity.COMPLETE) == "Complete"
        assert severity_label(Severity.MINOR) == "Minor Issues"
        assert severity_label(Severity.MAJOR) == "Major Issues"
        assert severity_label(Severity.CRITICAL) == "Critical"

    def test_statistics(self):
        entries = [
            entry_for(make_venue("1", phone="1", url="u")),
            entry_for(make_venue("2", phone="1")),
            entry_for(make_venue("3")),
            entry_for(make_venue("4")),
        ]
        stats = compute_statistics(entries)
        assert stats == {"total": 4, "complete": 1, "minor": 1, "major": 0, "critical": 2}

    def test_sort_worst_first_is_stable(self):
        entries = [
            entry_for(make_venue("a", phone="1", url="u")),
            entry_for(make_venue("b")),
            entry_for(make_venue("c", phone="1")),
            entry_for(make_venue("d")),
        ]
        ordered = sort_worst_first(entries)
        assert [e.venue_id for e in ordered] == ["b", "d", "c", "a"]

    def test_issues_only(self):
        entries = [
            entry_for(make_venue("a", phone="1", url="u")),
            entry_for(make_venue("b")),
        ]
        assert [e.venue_id for e in sort_worst_first(entries, issues_only=True)] == ["b"]
