"""Plain HTTP source for pages that render their listings server-side."""

import asyncio
import logging

import httpx

from nowshowing.config import settings
from nowshowing.sources.base import BaseSource, SourceError

logger = logging.getLogger(__name__)

_UA = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36"

BACKOFF_BASE = 1  # seconds


class HttpSource(BaseSource):
    """Fetch the listings page HTML with httpx."""

    name = "http"

    def __init__(self, url: str | None = None, max_retries: int | None = None) -> None:
        """
        Args:
            url: Listings page (uses settings if not provided)
            max_retries: Attempts before giving up (uses settings if not provided)
        """
        self.url = url or settings.cinema_url
        self.max_retries = max_retries or settings.scrape_max_retries

    async def fetch(self) -> str:
        """GET the page, retrying with exponential backoff."""
        last_error: Exception | None = None

        for attempt in range(1, self.max_retries + 1):
            try:
                async with httpx.AsyncClient(
                    timeout=settings.scrape_timeout, follow_redirects=True
                ) as client:
                    response = await client.get(
                        self.url,
                        headers={"User-Agent": _UA, "Accept": "text/html"},
                    )
                    response.raise_for_status()
                    logger.info(f"HTTP: fetched {self.url} ({len(response.text)} chars)")
                    return response.text

            except Exception as e:
                last_error = e
                if attempt < self.max_retries:
                    delay = BACKOFF_BASE * (2 ** (attempt - 1))
                    logger.warning(
                        f"HTTP: request failed (attempt {attempt}/{self.max_retries}): {e}. "
                        f"Retrying in {delay}s..."
                    )
                    await asyncio.sleep(delay)

        logger.error(f"HTTP: all {self.max_retries} attempts failed. Last error: {last_error}")
        raise SourceError(f"Failed to fetch {self.url}: {last_error}")
