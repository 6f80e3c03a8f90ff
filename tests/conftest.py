"""
Pytest configuration and shared fixtures for venue_crawler tests.
"""

import asyncio
import os

import pytest

from venue_crawler import config
from venue_crawler.exceptions import FetchError, SearchError
from venue_crawler.models import LocationContext, VenueRecord

# Keep proxy settings from the developer environment out of the tests
for _var in (config.PROXY_HOST_ENV, config.PROXY_USER_ENV, config.PROXY_PASS_ENV):
    os.environ.pop(_var, None)


def make_venue(venue_id="1", name="Joe's Cafe", phone="", url="", street="", categories=("CAFE",), object_type="venue"):
    return VenueRecord(
        venue_id=venue_id,
        name=name,
        phone=phone,
        url=url,
        street=street,
        categories=tuple(categories),
        object_type=object_type,
    )


class FakeSearchProvider:
    """Search provider returning a fixed URL, None, or raising."""

    def __init__(self, url=None, error: Exception = None):
        self.url = url
        self.error = error
        self.queries = []
        self.started = asyncio.Event()
        self.release = None  # asyncio.Event to hold the search open

    async def first_result(self, query):
        self.queries.append(query)
        self.started.set()
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.url


class FakePageFetcher:
    """Page fetcher returning fixed markup or raising."""

    def __init__(self, html="", error: Exception = None):
        self.html = html
        self.error = error
        self.urls = []

    async def fetch(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.html


@pytest.fixture
def denver():
    return LocationContext(city_name="Denver", state_name="Colorado", state_abbr="CO")


@pytest.fixture
def schema_html():
    return """
    <html><head>
    <script type="application/ld+json">
    {"@context": "https://schema.org", "@type": "CafeOrCoffeeShop"}
    </script>
    <script type="application/ld+json">
    {"@context": "https://schema.org", "@type": "Restaurant",
     "name": "Joe's Cafe", "telephone": "(303) 555-0100",
     "url": "https://joescafe.example",
     "address": {"@type": "PostalAddress", "streetAddress": "123 Main St"}}
    </script>
    </head><body>Call 720-555-9999</body></html>
    """


@pytest.fixture
def search_page():
    return (
        '<html><body>'
        '<a href="/search?q=other">Images</a>'
        '<a href="/url?q=https://joescafe.example/&amp;sa=U&amp;ved=abc">Joe\'s Cafe</a>'
        '<a href="/url?q=https://yelp.example/joes&amp;sa=U">Yelp</a>'
        '</body></html>'
    )


__all__ = ["make_venue", "FakeSearchProvider", "FakePageFetcher", "SearchError", "FetchError"]
