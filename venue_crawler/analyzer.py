"""
Field Completeness Analyzer

Scores venues by how much contact data they are missing.

Only three fields are checked: name, phone and website. Description,
hours and other attributes never affect the score.
"""

from typing import Any, Dict, Iterable, List

from .models import AnalysisResult, ScanEntry, Severity, VenueRecord

# (attribute, label) in reporting order
CHECKED_FIELDS = (
    ('name', 'Name'),
    ('phone', 'Phone'),
    ('url', 'Website'),
)

SEVERITY_LABELS = {
    Severity.COMPLETE: 'Complete',
    Severity.MINOR: 'Minor Issues',
    Severity.MAJOR: 'Major Issues',
    Severity.CRITICAL: 'Critical',
}


def is_empty(value: Any) -> bool:
    """True for None or a string that is blank after trimming."""
    return value is None or (isinstance(value, str) and value.strip() == '')


def analyze_venue(venue: VenueRecord) -> AnalysisResult:
    """
    Determine which checked fields a venue is missing and how severe that is.

    Args:
        venue: Venue record from the host

    Returns:
        AnalysisResult with severity, missing labels and contact flag
    """
    missing = tuple(
        label for attr, label in CHECKED_FIELDS
        if is_empty(getattr(venue, attr))
    )

    has_contact_info = not is_empty(venue.phone) or not is_empty(venue.url)

    if not missing:
        severity = Severity.COMPLETE
    elif not has_contact_info:
        severity = Severity.CRITICAL
    elif len(missing) >= 2:
        severity = Severity.MAJOR
    else:
        severity = Severity.MINOR

    return AnalysisResult(
        severity=severity,
        missing=missing,
        has_contact_info=has_contact_info,
    )


def severity_label(severity: Severity) -> str:
    """Human-readable label for a severity level."""
    return SEVERITY_LABELS.get(severity, 'Unknown')


def compute_statistics(entries: Iterable[ScanEntry]) -> Dict[str, int]:
    """Count entries per severity level."""
    stats = {'total': 0, 'complete': 0, 'minor': 0, 'major': 0, 'critical': 0}
    for entry in entries:
        stats['total'] += 1
        stats[entry.severity.name.lower()] += 1
    return stats


def sort_worst_first(entries: Iterable[ScanEntry], issues_only: bool = False) -> List[ScanEntry]:
    """Order entries by severity, worst first. Ties keep scan order."""
    ordered = sorted(entries, key=lambda e: e.severity, reverse=True)
    if issues_only:
        ordered = [e for e in ordered if e.severity != Severity.COMPLETE]
    return ordered
