"""
Search Execution

Runs a web search for a venue and returns the first organic result URL.
"""

import asyncio
import logging
from typing import Optional

import httpx

from ..config_manager import CrawlerConfig
from ..exceptions import SearchError, SearchTimeoutError
from ..parsers import extract_first_result_url

logger = logging.getLogger(__name__)


class SearchProvider:
    """Web search over HTTP. Uses proxy if configured.

    Args:
        config: Crawler configuration (search URL, timeout, headers, proxy)
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests
    """

    def __init__(self, config: CrawlerConfig = None, transport: httpx.AsyncBaseTransport = None):
        self.config = config or CrawlerConfig()
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            follow_redirects=True,
            proxy=self.config.proxy_url,
            transport=self.transport,
        )

    async def _get(self, query: str) -> httpx.Response:
        async with self._client() as client:
            return await client.get(
                self.config.search_url,
                params={'q': query},
                headers=self.config.headers,
            )

    async def first_result(self, query: str) -> Optional[str]:
        """
        Search for a query and return the first organic result.

        ``config.timeout`` bounds the whole request, body included.

        Args:
            query: Search query

        Returns:
            Result URL, or None if the results page has no organic link

        Raises:
            SearchTimeoutError: If the request times out
            SearchError: On any other transport failure
        """
        logger.info("Web search: %s", query)
        try:
            response = await asyncio.wait_for(self._get(query), self.config.timeout)
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise SearchTimeoutError(f"Search timed out for {query!r}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise SearchError(f"Search failed for {query!r}: {e}") from e

        url = extract_first_result_url(response.text)
        if url:
            logger.info("Found URL: %s", url)
        else:
            logger.info("No search results found (HTTP %d)", response.status_code)
        return url
