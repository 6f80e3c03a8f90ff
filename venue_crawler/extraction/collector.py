"""
Venue Scan Collector

Classifies every eligible venue in the current editor view and keeps the
results keyed by venue id.

Each scan is a full replacement: previous entries are dropped before the
new ones are stored. Only the extraction orchestrator mutates entries
afterwards, and only their ``extracted`` field.
"""

import logging
from datetime import datetime
from typing import Dict, Iterable, Iterator, List, Optional

from ..analyzer import analyze_venue, compute_statistics, sort_worst_first
from ..config import EXCLUDED_CATEGORIES, VENUE_OBJECT_TYPE
from ..models import (
    ExtractionResult,
    LocationContext,
    ScanEntry,
    ScanReport,
    VenueRecord,
)

logger = logging.getLogger(__name__)


def is_excluded(venue: VenueRecord, excluded_categories: Iterable[str] = EXCLUDED_CATEGORIES) -> bool:
    """True if any of the venue's categories is on the exclusion list."""
    excluded = set(excluded_categories)
    return any(category in excluded for category in venue.categories)


class ScanResultSet:
    """Scan results for one editing session, keyed by venue id."""

    def __init__(self, excluded_categories: Iterable[str] = EXCLUDED_CATEGORIES):
        self.excluded_categories = tuple(excluded_categories)
        self._entries: Dict[str, ScanEntry] = {}
        self.last_scan_time: Optional[datetime] = None

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[ScanEntry]:
        return iter(self._entries.values())

    def __contains__(self, venue_id: str) -> bool:
        return venue_id in self._entries

    def get(self, venue_id: str) -> Optional[ScanEntry]:
        return self._entries.get(venue_id)

    def clear(self):
        self._entries.clear()

    def scan(self, venues: Optional[Iterable[VenueRecord]], location: LocationContext = None) -> ScanReport:
        """
        Classify all loaded venues, replacing any previous results.

        Args:
            venues: Venue records from the host, or None if the host model
                    is not ready (previous results are then kept)
            location: City/state of the current view, shared by all venues

        Returns:
            ScanReport with scanned and skipped counts
        """
        if venues is None:
            logger.error("Editor model not ready")
            return ScanReport(scanned=0, skipped=0, available=False)

        location = location or LocationContext()
        self._entries.clear()
        scanned = 0
        skipped = 0

        for venue in venues:
            if venue is None or venue.object_type != VENUE_OBJECT_TYPE:
                continue

            # Nothing to search for without a name
            name = venue.name
            if not name or not name.strip():
                skipped += 1
                continue

            if is_excluded(venue, self.excluded_categories):
                skipped += 1
                continue

            analysis = analyze_venue(venue)
            self._entries[venue.venue_id] = ScanEntry(
                venue=venue,
                analysis=analysis,
                location=location,
                name=name,
                phone=venue.phone or '',
                url=venue.url or '',
                address=venue.street or '',
                categories=list(venue.categories),
            )
            scanned += 1

        self.last_scan_time = datetime.now()
        logger.info("Scanned %d venues (skipped %d excluded/unnamed venues)", scanned, skipped)
        return ScanReport(
            scanned=scanned,
            skipped=skipped,
            available=True,
            scanned_at=self.last_scan_time,
        )

    def store_extraction(self, entry: ScanEntry, result: ExtractionResult) -> bool:
        """
        Attach a result to the entry an attempt started from.

        False, without storing, if a later scan has replaced that entry.
        """
        if self._entries.get(entry.venue_id) is not entry:
            return False
        entry.extracted = result
        return True

    def statistics(self) -> Dict[str, int]:
        return compute_statistics(self._entries.values())

    def sorted_entries(self, issues_only: bool = False) -> List[ScanEntry]:
        return sort_worst_first(self._entries.values(), issues_only=issues_only)
