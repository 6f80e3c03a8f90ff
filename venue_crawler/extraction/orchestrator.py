"""
Extraction Orchestrator

Looks up a scanned venue on the web and stores what its website says.

Sequence per venue:
    1. Build the search query from the stored name/categories/location
    2. Search; take the first organic result
    3. Fetch that page
    4. Run the content extractors over the markup
    5. Store the result on the venue's ScanEntry

A venue id is marked in flight for the whole sequence. A second request
for the same id while the first runs returns immediately without touching
the entry or issuing a request.

The outcome is written to the entry the attempt started from. If a rescan
replaced that entry meanwhile, the outcome is returned but not stored.
"""

import logging
from dataclasses import replace
from typing import Optional, Set

from ..exceptions import FetchError, FetchTimeoutError, SearchError, SearchTimeoutError
from ..models import ExtractionResult
from ..parsers import extract_contact_data
from .collector import ScanResultSet
from .fetch import PageFetcher
from .query import build_search_query
from .search import SearchProvider

logger = logging.getLogger(__name__)

# Error reasons stored on failed attempts
NO_RESULTS = "No search results found"
SEARCH_FAILED = "Search request failed"
SEARCH_TIMED_OUT = "Search request timed out"
FETCH_FAILED = "Failed to fetch website"
FETCH_TIMED_OUT = "Website fetch timed out"


class ExtractionOrchestrator:
    """Runs search -> fetch -> extract for venues in a ScanResultSet.

    Args:
        results: Scan results the outcomes are written to
        search_provider: Object with ``async first_result(query) -> Optional[str]``
        page_fetcher: Object with ``async fetch(url) -> str``
    """

    def __init__(
        self,
        results: ScanResultSet,
        search_provider: SearchProvider = None,
        page_fetcher: PageFetcher = None,
    ):
        self.results = results
        self.search_provider = search_provider or SearchProvider()
        self.page_fetcher = page_fetcher or PageFetcher()
        self._in_flight: Set[str] = set()

    @property
    def in_flight(self) -> Set[str]:
        """Venue ids with an extraction currently running (copy)."""
        return set(self._in_flight)

    def is_in_flight(self, venue_id: str) -> bool:
        return venue_id in self._in_flight

    async def extract_for_venue(self, venue_id: str) -> Optional[ExtractionResult]:
        """
        Look up one venue and store the outcome on its entry.

        Args:
            venue_id: Id of a venue from the last scan

        Returns:
            The ExtractionResult, or None if the venue is unknown or an
            extraction for it is already running
        """
        entry = self.results.get(venue_id)
        if entry is None:
            logger.error("Venue not found: %s", venue_id)
            return None

        if venue_id in self._in_flight:
            logger.info("Extraction already in progress for: %s", entry.name)
            return None

        # No await between the check above and this add
        self._in_flight.add(venue_id)
        try:
            query = build_search_query(
                entry.name,
                entry.categories,
                entry.location.city_name,
                entry.location.state_abbr,
            )
            logger.info("Starting extraction for: %s", entry.name)
            logger.info("Search query: %s", query)

            result = await self._run(query)
            if not self.results.store_extraction(entry, result):
                logger.info("Discarding extraction for %s: venues were rescanned", entry.name)
            return result
        finally:
            self._in_flight.discard(venue_id)

    async def _run(self, query: str) -> ExtractionResult:
        try:
            website_url = await self.search_provider.first_result(query)
        except SearchTimeoutError:
            logger.warning("Search timed out for: %s", query)
            return ExtractionResult.failure(SEARCH_TIMED_OUT, query)
        except SearchError as e:
            logger.warning("Search failed for %s: %s", query, e)
            return ExtractionResult.failure(SEARCH_FAILED, query)

        if not website_url:
            logger.warning("No search results for: %s", query)
            return ExtractionResult.failure(NO_RESULTS, query)

        try:
            html = await self.page_fetcher.fetch(website_url)
        except FetchTimeoutError:
            logger.warning("Website fetch timed out: %s", website_url)
            return ExtractionResult.failure(FETCH_TIMED_OUT, query, website_url)
        except FetchError as e:
            logger.warning("Scraping failed for %s: %s", website_url, e)
            return ExtractionResult.failure(FETCH_FAILED, query, website_url)

        extracted = extract_contact_data(html, source_url=website_url)
        if extracted is None:
            return ExtractionResult.nothing_found(website_url, search_query=query)
        return replace(extracted, search_query=query)
