"""
VenueCrawler - High-level API for venue scanning and data extraction.

Owns one session: the scan result set, the in-flight tracking and the
network collaborators. Create one per editing session.

Usage:
    from venue_crawler import VenueCrawler
    from venue_crawler.host import SnapshotHost

    crawler = VenueCrawler()
    report = crawler.scan_host(SnapshotHost.from_file("snapshot.json"))
    for entry in crawler.entries(issues_only=True):
        print(entry.name, entry.missing)
    asyncio.run(crawler.extract_many([e.venue_id for e in crawler.entries()]))
"""

import asyncio
from typing import Any, Dict, Iterable, List, Optional

import httpx

from . import __version__
from .analyzer import severity_label
from .config_manager import CrawlerConfig
from .extraction import ExtractionOrchestrator, PageFetcher, ScanResultSet, SearchProvider
from .host import LocationSource, VenueSource
from .models import ExtractionResult, LocationContext, ScanEntry, ScanReport, VenueRecord


class VenueCrawler:
    """High-level interface for one venue-crawling session.

    Args:
        config: Crawler configuration. Defaults to CrawlerConfig().
        transport: Optional httpx transport shared by search and fetch
                   (e.g. httpx.MockTransport for offline runs).
        search_provider: Override the web search collaborator.
        page_fetcher: Override the page fetch collaborator.

    Example:
        crawler = VenueCrawler(CrawlerConfig(timeout=5.0))
        crawler.scan(venues, LocationContext("Denver", "Colorado", "CO"))
        result = await crawler.extract(venue_id)
    """

    def __init__(
        self,
        config: Optional[CrawlerConfig] = None,
        *,
        transport: httpx.AsyncBaseTransport = None,
        search_provider=None,
        page_fetcher=None,
    ):
        self.config = config or CrawlerConfig()
        self.results = ScanResultSet()
        self.last_report: Optional[ScanReport] = None
        self.orchestrator = ExtractionOrchestrator(
            self.results,
            search_provider=search_provider or SearchProvider(self.config, transport=transport),
            page_fetcher=page_fetcher or PageFetcher(self.config, transport=transport),
        )

    def __len__(self):
        return len(self.results)

    def __iter__(self):
        return iter(self.results)

    def __repr__(self):
        stats = self.statistics()
        return f"<VenueCrawler: {stats['total']} venues, {stats['critical']} critical>"

    def scan(self, venues: Optional[Iterable[VenueRecord]], location: LocationContext = None) -> ScanReport:
        """Classify loaded venues, replacing the previous scan."""
        self.last_report = self.results.scan(venues, location)
        return self.last_report

    def scan_host(self, venue_source: VenueSource, location_source: LocationSource = None) -> ScanReport:
        """Scan the host's loaded venues.

        The location comes from ``location_source``, or from ``venue_source``
        when it also implements LocationSource (as SnapshotHost does).
        """
        venues = venue_source.venues()
        if venues is None:
            return self.scan(None)
        locator = location_source or venue_source
        return self.scan(venues, locator.location_context())

    def get(self, venue_id: str) -> Optional[ScanEntry]:
        return self.results.get(venue_id)

    def entries(self, issues_only: bool = False) -> List[ScanEntry]:
        """Scanned entries, worst severity first."""
        return self.results.sorted_entries(issues_only=issues_only)

    def statistics(self) -> Dict[str, int]:
        return self.results.statistics()

    def is_extracting(self, venue_id: str) -> bool:
        return self.orchestrator.is_in_flight(venue_id)

    async def extract(self, venue_id: str) -> Optional[ExtractionResult]:
        """Look up one venue's website. None if unknown or already running."""
        return await self.orchestrator.extract_for_venue(venue_id)

    async def extract_many(self, venue_ids: Iterable[str]) -> Dict[str, Optional[ExtractionResult]]:
        """Look up several venues concurrently.

        Duplicate ids in one batch collapse: only the first runs.
        """
        ids = list(venue_ids)
        outcomes = await asyncio.gather(*(self.extract(venue_id) for venue_id in ids))
        results: Dict[str, Optional[ExtractionResult]] = {}
        for venue_id, outcome in zip(ids, outcomes):
            if outcome is not None or venue_id not in results:
                results[venue_id] = outcome
        return results

    def to_dict(self) -> Dict[str, Any]:
        """Full session as plain data: metadata, statistics and venues."""
        venues = []
        for entry in self.entries():
            data = entry.to_dict()
            data['severity_label'] = severity_label(entry.severity)
            venues.append(data)

        return {
            'metadata': {
                'version': __version__,
                'scan': self.last_report.to_dict() if self.last_report else None,
            },
            'statistics': self.statistics(),
            'venues': venues,
        }
