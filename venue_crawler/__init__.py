"""
Venue Data Crawler

Scans map-editor venues for missing contact data and recovers it from the
venues' own websites for manual review.

Quick start (library usage):
    import asyncio
    from venue_crawler import VenueCrawler, VenueRecord, LocationContext

    crawler = VenueCrawler()
    crawler.scan(
        [VenueRecord("1", name="Joe's Cafe", categories=("CAFE",))],
        LocationContext(city_name="Denver", state_abbr="CO"),
    )
    result = asyncio.run(crawler.extract("1"))
    print(result.to_dict())

Or serve the presentation API:
    python run_server.py
"""

__version__ = "0.2.1"

from .models import (
    AnalysisResult,
    ExtractionMethod,
    ExtractionResult,
    LocationContext,
    ScanEntry,
    ScanReport,
    Severity,
    VenueRecord,
)
from .analyzer import analyze_venue
from .config_manager import CrawlerConfig
from .crawler import VenueCrawler

__all__ = [
    "VenueCrawler",
    "CrawlerConfig",
    "VenueRecord",
    "LocationContext",
    "AnalysisResult",
    "ExtractionResult",
    "ExtractionMethod",
    "ScanEntry",
    "ScanReport",
    "Severity",
    "analyze_venue",
]
