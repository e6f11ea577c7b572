"""SerpAPI client for Google's showtimes panel."""

import logging
from typing import Any

import httpx

from nowshowing.config import settings
from nowshowing.sources.base import BaseSource, SourceError

logger = logging.getLogger(__name__)


class SerpApiSource(BaseSource):
    """
    Fetch today's showtimes via SerpAPI's Google search engine.

    A query such as "Vue Nottingham showtimes" returns a ``showtimes`` block:
    one entry per day, each listing ``movies`` with their ``showing`` times.
    Only the first day (today) is used. The result is a list of
    ``(title, times)`` pairs for the API extractor.
    """

    name = "serpapi"

    BASE_URL = "https://serpapi.com/search.json"

    def __init__(
        self,
        api_key: str | None = None,
        query: str | None = None,
        location: str | None = None,
    ) -> None:
        """
        Args:
            api_key: SerpAPI key (uses settings if not provided)
            query: Search query (uses settings if not provided)
            location: SerpAPI location string (uses settings if not provided)
        """
        self.api_key = api_key or settings.serpapi_api_key
        self.query = query or settings.serpapi_query
        self.location = location or settings.serpapi_location
        if not self.api_key:
            logger.warning("SerpAPI key not configured")

    async def fetch(self) -> list[tuple[str, list[str]]]:
        """Query SerpAPI and return today's (title, times) pairs."""
        if not self.api_key:
            raise SourceError("SerpAPI key not configured")

        params: dict[str, Any] = {
            "engine": "google",
            "q": self.query,
            "location": self.location,
            "hl": "en",
            "gl": "uk",
            "api_key": self.api_key,
        }

        try:
            async with httpx.AsyncClient(timeout=settings.scrape_timeout) as client:
                response = await client.get(self.BASE_URL, params=params)
                response.raise_for_status()
                data = response.json()
        except Exception as e:
            raise SourceError(f"SerpAPI request failed: {e}") from e

        if data.get("error"):
            raise SourceError(f"SerpAPI error: {data['error']}")

        pairs = self.parse_showtimes(data)
        if not pairs:
            raise SourceError(f"No showtimes in SerpAPI results for {self.query!r}")

        logger.info(f"SerpAPI: {len(pairs)} films with showtimes")
        return pairs

    @staticmethod
    def parse_showtimes(data: dict[str, Any]) -> list[tuple[str, list[str]]]:
        """
        Extract today's (title, times) pairs from a SerpAPI response.

        Args:
            data: Decoded SerpAPI JSON

        Returns:
            List of (film title, time tokens); empty if the block is missing
        """
        days = data.get("showtimes") or []
        if not days:
            return []

        pairs: list[tuple[str, list[str]]] = []
        for movie in days[0].get("movies", []):
            title = movie.get("name", "")
            times: list[str] = []
            for showing in movie.get("showing", []):
                times.extend(showing.get("time", []))
            if title and times:
                pairs.append((title, times))
        return pairs
