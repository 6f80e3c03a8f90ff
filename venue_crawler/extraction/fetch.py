"""
Website Fetching

Downloads a venue website so its markup can be scraped.
"""

import asyncio
import logging

import httpx

from ..config_manager import CrawlerConfig
from ..exceptions import FetchError, FetchTimeoutError

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetch page markup over HTTP. Uses proxy if configured.

    Args:
        config: Crawler configuration (timeout, headers, proxy)
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests
    """

    def __init__(self, config: CrawlerConfig = None, transport: httpx.AsyncBaseTransport = None):
        self.config = config or CrawlerConfig()
        self.transport = transport

    async def _get_text(self, url: str) -> str:
        async with httpx.AsyncClient(
            timeout=self.config.timeout,
            follow_redirects=True,
            proxy=self.config.proxy_url,
            transport=self.transport,
        ) as client:
            response = await client.get(url, headers=self.config.headers)
            return response.text

    async def fetch(self, url: str) -> str:
        """
        Fetch a URL and return the response body as text.

        The body is returned whatever the status code; error pages are
        scraped like any other page. ``config.timeout`` bounds the whole
        download, so a slowly trickling body still times out.

        Raises:
            FetchTimeoutError: If the request times out
            FetchError: On any other transport failure
        """
        logger.info("Scraping: %s", url)
        try:
            return await asyncio.wait_for(self._get_text(url), self.config.timeout)
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise FetchTimeoutError(f"Website fetch timed out: {url}", url=url) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(f"Failed to fetch {url}: {e}", url=url) from e
