"""Page fetching for stock checks."""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

import aiohttp

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """A page could not be fetched or decoded."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class PageFetcher:
    """Fetch page bodies through a shared session.

    Holds no per-request state, so one instance can serve every monitor task.
    """

    def __init__(self, session: aiohttp.ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> str:
        """Return the body of ``url`` as text, whatever the status code."""
        logger.info("Making request to %s", url)
        try:
            async with self.session.get(url) as response:
                if response.status >= 400:
                    logger.debug("%s answered with status %s", url, response.status)
                return await response.text()
        except asyncio.TimeoutError as exc:
            raise FetchError(url, "request timed out") from exc
        except UnicodeDecodeError as exc:
            raise FetchError(url, f"undecodable body: {exc}") from exc
        except aiohttp.ClientConnectionError as exc:
            raise FetchError(url, f"connection error: {exc}") from exc
        except aiohttp.ClientError as exc:
            raise FetchError(url, f"request failed: {exc}") from exc

    async def get_page_content(self, url: str) -> Optional[str]:
        """Fetch ``url``; any failure yields ``None`` instead of raising."""
        try:
            return await self.fetch(url)
        except FetchError as exc:
            logger.warning("Error fetching page %s", exc)
            logger.debug("Fetch error details", exc_info=True)
            return None
