"""
Tests for the FastAPI presentation API.
"""

import asyncio

import httpx
import pytest
import uvicorn
from conftest import FakePageFetcher, FakeSearchProvider
from fastapi.testclient import TestClient

from venue_crawler.config_manager import CrawlerConfig
from venue_crawler.crawler import VenueCrawler
from venue_crawler.server import create_app, run_server

SCAN_BODY = {
    "venues": [
        {"id": "1", "name": "Joe's Cafe", "phone": "", "url": "", "categories": ["CAFE"]},
        {"id": "2", "name": "Acme Garage", "phone": "555-1234", "url": "https://acme.example"},
        {"id": "3", "name": "City Park", "categories": ["PARK"]},
        {"id": "4", "type": "segment", "name": "Main St"},
    ],
    "location": {"city_name": "Denver", "state_name": "Colorado", "state_abbr": "CO"},
}


@pytest.fixture
def search():
    return FakeSearchProvider(url="https://joescafe.example/")


@pytest.fixture
def client(search, schema_html):
    crawler = VenueCrawler(search_provider=search, page_fetcher=FakePageFetcher(html=schema_html))
    app = create_app(crawler)
    # Every request must go through the fakes, never the network
    assert app.state.crawler is crawler
    return TestClient(app)


class TestScanEndpoints:
    """Tests for scanning and listing."""

    def test_health(self, client):
        assert client.get("/api/health").json() == {"status": "ok"}

    def test_scan(self, client):
        data = client.post("/api/scan", json=SCAN_BODY).json()
        assert data["success"] is True
        assert data["scanned"] == 2
        assert data["skipped"] == 1
        assert data["statistics"] == {"total": 2, "complete": 1, "minor": 0, "major": 0, "critical": 1}

    def test_scan_host_not_ready(self, client):
        data = client.post("/api/scan", json={"venues": None}).json()
        assert data["success"] is False
        assert data["available"] is False
        assert data["scanned"] == 0

    def test_list_worst_first(self, client):
        client.post("/api/scan", json=SCAN_BODY)
        venues = client.get("/api/venues").json()["venues"]
        assert [v["venue_id"] for v in venues] == ["1", "2"]
        assert venues[0]["severity"] == "CRITICAL"
        assert venues[0]["missing"] == ["Phone", "Website"]
        assert venues[0]["location"]["state_abbr"] == "CO"

    def test_list_issues_only(self, client):
        client.post("/api/scan", json=SCAN_BODY)
        data = client.get("/api/venues", params={"issues_only": True}).json()
        assert data["count"] == 1

    def test_get_venue(self, client):
        client.post("/api/scan", json=SCAN_BODY)
        data = client.get("/api/venues/2").json()
        assert data["severity"] == "COMPLETE"
        assert data["in_progress"] is False

    def test_unknown_venue(self, client):
        client.post("/api/scan", json=SCAN_BODY)
        assert client.get("/api/venues/99").status_code == 404
        assert client.post("/api/venues/99/extract").status_code == 404


class TestExtractEndpoint:
    """Tests for triggering extraction."""

    def test_extract(self, client, search):
        client.post("/api/scan", json=SCAN_BODY)
        data = client.post("/api/venues/1/extract").json()

        assert data["success"] is True
        assert data["in_progress"] is False
        assert data["extracted"]["method"] == "Schema.org"
        assert data["extracted"]["phone"] == "(303) 555-0100"
        assert data["extracted"]["search_query"] == "Joe's Cafe cafe Denver CO"
        assert search.queries == ["Joe's Cafe cafe Denver CO"]

        stored = client.get("/api/venues/1").json()["extracted"]
        assert stored == data["extracted"]

    def test_extract_error(self, client, search):
        search.url = None
        client.post("/api/scan", json=SCAN_BODY)
        data = client.post("/api/venues/1/extract").json()
        assert data["success"] is False
        assert data["extracted"] == {"error": "No search results found", "search_query": "Joe's Cafe cafe Denver CO"}


def run_concurrently(app, scenario):
    """Drive the app in-process on one event loop so requests can overlap."""
    async def main():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            return await scenario(client)

    return asyncio.run(main())


class TestConcurrentExtraction:
    """Tests for extraction requests that overlap other requests."""

    def test_duplicate_request_reports_in_progress(self, search, schema_html):
        crawler = VenueCrawler(search_provider=search, page_fetcher=FakePageFetcher(html=schema_html))
        app = create_app(crawler)

        async def scenario(client):
            await client.post("/api/scan", json=SCAN_BODY)
            stored = (await client.post("/api/venues/1/extract")).json()["extracted"]

            search.started = asyncio.Event()
            search.release = asyncio.Event()
            first = asyncio.create_task(client.post("/api/venues/1/extract"))
            await search.started.wait()

            duplicate = (await client.post("/api/venues/1/extract")).json()
            detail = (await client.get("/api/venues/1")).json()

            search.release.set()
            return stored, duplicate, detail, (await first).json()

        stored, duplicate, detail, first = run_concurrently(app, scenario)

        assert duplicate["success"] is False
        assert duplicate["in_progress"] is True
        assert duplicate["extracted"] == stored
        assert detail["in_progress"] is True
        assert first["in_progress"] is False
        assert len(search.queries) == 2
        assert not crawler.is_extracting("1")

    def test_rescan_during_extraction_keeps_fresh_entry(self, search, schema_html):
        crawler = VenueCrawler(search_provider=search, page_fetcher=FakePageFetcher(html=schema_html))
        app = create_app(crawler)

        async def scenario(client):
            await client.post("/api/scan", json=SCAN_BODY)
            search.release = asyncio.Event()
            first = asyncio.create_task(client.post("/api/venues/1/extract"))
            await search.started.wait()

            await client.post("/api/scan", json=SCAN_BODY)
            search.release.set()
            response = (await first).json()
            return response, (await client.get("/api/venues/1")).json()

        response, detail = run_concurrently(app, scenario)

        assert response["extracted"]["method"] == "Schema.org"
        assert detail["extracted"] is None


class TestCreateApp:
    """Tests for create_app."""

    def test_keeps_injected_unscanned_crawler(self):
        crawler = VenueCrawler(search_provider=FakeSearchProvider(), page_fetcher=FakePageFetcher())
        assert len(crawler) == 0
        assert create_app(crawler).state.crawler is crawler

    def test_run_server_uses_config(self, monkeypatch):
        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda app, host, port: calls.append((app, host, port)))

        run_server(CrawlerConfig(server_host="0.0.0.0", server_port=9001, timeout=3.0))

        app, host, port = calls[0]
        assert (host, port) == ("0.0.0.0", 9001)
        assert app.state.crawler.config.timeout == 3.0
