"""Extractor for (title, times) pairs from a structured API response."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from nowshowing.extractors.base import BaseExtractor
from nowshowing.extractors.models import ShowingCandidate
from nowshowing.utils.clock import to_24_hour
from nowshowing.utils.text import clean_text

logger = logging.getLogger(__name__)


class ApiPairsExtractor(BaseExtractor):
    """
    Turn pre-parsed API results into candidates.

    Accepts a sequence whose items are either ``(title, times)`` /
    ``(title, times, screen)`` tuples or mappings with ``film``/``title``,
    ``times`` and optional ``screen`` keys. 12-hour times such as "6:30pm"
    are converted to 24-hour here; anything unparsable is passed through
    untouched for the normalizer to drop.
    """

    name = "api"

    def accepts(self, document: Any) -> bool:
        return isinstance(document, Sequence) and not isinstance(document, (str, bytes))

    def extract(self, document: Any) -> list[ShowingCandidate]:
        """Expand each title's time list into one candidate per time."""
        if not self.accepts(document):
            return []

        candidates: list[ShowingCandidate] = []
        for item in document:
            try:
                candidates.extend(self._parse_item(item))
            except Exception as e:
                logger.warning(f"API pairs: failed to parse item {item!r}: {e}")
        return candidates

    def _parse_item(self, item: Any) -> list[ShowingCandidate]:
        if isinstance(item, Mapping):
            title = item.get("film") or item.get("title") or item.get("name") or ""
            times = item.get("times") or item.get("showtimes") or []
            screen = item.get("screen")
        else:
            title, times = item[0], item[1]
            screen = item[2] if len(item) > 2 else None

        title = clean_text(str(title))
        if not title:
            return []

        if isinstance(times, str):
            times = [times]

        candidates = []
        for token in times:
            token = str(token).strip()
            candidates.append(
                ShowingCandidate(film=title, start=to_24_hour(token) or token, screen=screen)
            )
        return candidates
