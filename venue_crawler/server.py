"""
FastAPI Server for the Venue Data Crawler

Presentation-side API. A UI posts the editor's loaded venues to scan,
reads the classified list and triggers website extraction per venue.

Endpoints:
- GET  /api/health
- POST /api/scan
- GET  /api/venues
- GET  /api/venues/{venue_id}
- POST /api/venues/{venue_id}/extract
- GET  /api/statistics
"""

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .config_manager import CrawlerConfig
from .crawler import VenueCrawler
from .models import LocationContext, VenueRecord


# Request Models
class VenueInput(BaseModel):
    id: str
    type: str = "venue"
    name: Optional[str] = None
    phone: Optional[str] = None
    url: Optional[str] = None
    street: Optional[str] = None
    categories: List[str] = Field(default_factory=list)


class LocationInput(BaseModel):
    city_name: str = ""
    state_name: str = ""
    state_abbr: str = ""


class ScanRequest(BaseModel):
    venues: Optional[List[VenueInput]] = None  # None = editor model not ready
    location: LocationInput = Field(default_factory=LocationInput)


def _to_record(venue: VenueInput) -> VenueRecord:
    return VenueRecord(
        venue_id=venue.id,
        name=venue.name,
        phone=venue.phone,
        url=venue.url,
        street=venue.street,
        categories=tuple(venue.categories),
        object_type=venue.type,
    )


def create_app(crawler: VenueCrawler = None) -> FastAPI:
    """Build the API app around one crawler session."""
    app = FastAPI(title="Venue Data Crawler API")
    # An unscanned crawler has len() 0, so test against None
    app.state.crawler = crawler if crawler is not None else VenueCrawler()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def get_entry_or_404(venue_id: str):
        entry = app.state.crawler.get(venue_id)
        if entry is None:
            raise HTTPException(status_code=404, detail=f"Venue not found: {venue_id}")
        return entry

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/scan")
    async def scan(request: ScanRequest):
        """Classify the posted venues, replacing the previous scan."""
        venues = None
        if request.venues is not None:
            venues = [_to_record(v) for v in request.venues]
        location = LocationContext(
            city_name=request.location.city_name,
            state_name=request.location.state_name,
            state_abbr=request.location.state_abbr,
        )
        report = app.state.crawler.scan(venues, location)
        return {
            "success": report.available,
            **report.to_dict(),
            "statistics": app.state.crawler.statistics(),
        }

    @app.get("/api/venues")
    async def list_venues(issues_only: bool = False):
        """Scanned venues, worst severity first."""
        entries = app.state.crawler.entries(issues_only=issues_only)
        return {
            "count": len(entries),
            "venues": [entry.to_dict() for entry in entries],
        }

    @app.get("/api/venues/{venue_id}")
    async def get_venue(venue_id: str):
        """One scanned venue."""
        entry = get_entry_or_404(venue_id)
        return {
            **entry.to_dict(),
            "in_progress": app.state.crawler.is_extracting(venue_id),
        }

    @app.post("/api/venues/{venue_id}/extract")
    async def extract_venue(venue_id: str):
        """Search for the venue's website and scrape it.

        If an extraction for this venue is already running, returns at once
        with ``in_progress: true`` and the currently stored result.
        """
        entry = get_entry_or_404(venue_id)
        result = await app.state.crawler.extract(venue_id)
        if result is None:
            return {
                "success": False,
                "venue_id": venue_id,
                "in_progress": True,
                "extracted": entry.extracted.to_dict() if entry.extracted else None,
            }
        return {
            "success": not result.is_error,
            "venue_id": venue_id,
            "in_progress": False,
            "extracted": result.to_dict(),
        }

    @app.get("/api/statistics")
    async def statistics():
        """Severity counts for the current scan."""
        return app.state.crawler.statistics()

    return app


# FastAPI app
app = create_app()


def run_server(config: CrawlerConfig = None):
    """Run the API server on ``config.server_host:config.server_port``."""
    import uvicorn
    config = config or CrawlerConfig()
    uvicorn.run(create_app(VenueCrawler(config)), host=config.server_host, port=config.server_port)


if __name__ == "__main__":
    run_server()
