"""Extraction strategies and the fallback chain that runs them."""

import logging
from typing import Any

from nowshowing.extractors.api_pairs import ApiPairsExtractor
from nowshowing.extractors.base import BaseExtractor, looks_like_markup
from nowshowing.extractors.cards import CardExtractor
from nowshowing.extractors.models import Showing, ShowingCandidate
from nowshowing.extractors.text_sweep import TextSweepExtractor

logger = logging.getLogger(__name__)


def default_chain(document: Any) -> list[BaseExtractor]:
    """
    Pick the extractors to try for a document, in order.

    Args:
        document: Markup string, plain text, or pre-parsed API pairs

    Returns:
        Ordered list of extractors; later ones run only if earlier ones find nothing
    """
    if isinstance(document, str):
        if looks_like_markup(document):
            return [CardExtractor(), TextSweepExtractor()]
        return [TextSweepExtractor()]
    return [ApiPairsExtractor()]


def extract_candidates(
    document: Any,
    extractors: list[BaseExtractor] | None = None,
) -> tuple[list[ShowingCandidate], str | None]:
    """
    Run extractors in order until one yields candidates.

    Args:
        document: Raw document from a source
        extractors: Strategy chain (uses default_chain if not provided)

    Returns:
        Tuple of (candidates, name of the extractor that produced them).
        The name is None when every strategy came up empty.
    """
    chain = extractors if extractors is not None else default_chain(document)

    for extractor in chain:
        if not extractor.accepts(document):
            continue
        try:
            candidates = extractor.extract(document)
        except Exception as e:
            logger.error(f"Extractor {extractor.name} failed: {e}", exc_info=True)
            continue

        if candidates:
            logger.info(f"Extractor {extractor.name}: {len(candidates)} candidates")
            return candidates, extractor.name

        logger.info(f"Extractor {extractor.name}: no candidates, falling back")

    return [], None


__all__ = [
    "ApiPairsExtractor",
    "BaseExtractor",
    "CardExtractor",
    "Showing",
    "ShowingCandidate",
    "TextSweepExtractor",
    "default_chain",
    "extract_candidates",
]
