"""
Extraction module for scanning venues and recovering missing data.

- query.py: Build search queries for venues
- search.py: Execute web searches
- fetch.py: Fetch venue websites
- collector.py: Scan and classify loaded venues
- orchestrator.py: Search -> fetch -> extract per venue
"""

from .query import build_search_query, get_category_hint
from .search import SearchProvider
from .fetch import PageFetcher
from .collector import ScanResultSet, is_excluded
from .orchestrator import ExtractionOrchestrator
