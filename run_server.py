#!/usr/bin/env python
"""
Run the API Server

Starts the FastAPI presentation server for the venue crawler.

Usage:
    python run_server.py

The server runs on http://localhost:8000

Endpoints:
    GET  /api/health                    - Health check
    POST /api/scan                      - Scan posted venues
    GET  /api/venues                    - Scanned venues, worst first
    GET  /api/venues/{id}               - One scanned venue
    POST /api/venues/{id}/extract       - Look up a venue's website
    GET  /api/statistics                - Severity counts
"""

from venue_crawler.config_manager import CrawlerConfig
from venue_crawler.server import run_server

if __name__ == "__main__":
    run_server(CrawlerConfig(server_host="0.0.0.0", server_port=8000))
