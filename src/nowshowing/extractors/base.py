"""Base extractor interface for all schedule extractors."""

import re
from abc import ABC, abstractmethod
from typing import Any

from nowshowing.extractors.models import ShowingCandidate


class BaseExtractor(ABC):
    """
    Abstract base class for all extraction strategies.

    Extractors turn one raw document into an unordered list of candidates.
    They are tried in order by the extraction chain; an empty list means
    "no match, try the next strategy".
    """

    name: str = "base"

    @abstractmethod
    def extract(self, document: Any) -> list[ShowingCandidate]:
        """
        Extract showing candidates from a raw document.

        Args:
            document: Markup string, plain text, or pre-parsed API pairs

        Returns:
            List of candidates (possibly empty)

        Raises:
            Should NOT raise exceptions. Return empty list on malformed input
            and log warnings.
        """
        pass

    def accepts(self, document: Any) -> bool:
        """Whether this extractor understands the document's shape at all."""
        return isinstance(document, str)


_MARKUP_HINT = re.compile(
    r"<\s*(?:!doctype|html|body|div|section|article|main|ul|li|p|span|h[1-6]|time|a)\b",
    re.IGNORECASE,
)


def looks_like_markup(document: Any) -> bool:
    """Cheap check for an HTML string as opposed to rendered plain text."""
    return isinstance(document, str) and bool(_MARKUP_HINT.search(document))
