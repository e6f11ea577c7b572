"""Normalizer for validating, deduplicating and ordering candidates."""

import logging

from nowshowing.extractors.models import Showing, ShowingCandidate
from nowshowing.utils.clock import is_24_hour_token, parse_clock, to_24_hour
from nowshowing.utils.text import clean_text

logger = logging.getLogger(__name__)


def normalise_screen(screen: str | int | None) -> str | None:
    """Screens are canonically nullable strings: ``3`` -> ``"3"``, ``""`` -> ``None``."""
    if screen is None or isinstance(screen, bool):
        return None
    text = clean_text(str(screen))
    return text or None


def normalise_candidate(candidate: ShowingCandidate) -> Showing | None:
    """
    Validate a single candidate.

    Args:
        candidate: Raw candidate from an extractor

    Returns:
        Showing with canonical "HH:MM" times, or None if the film or start
        time is unusable. A bad end time only loses the end time.
    """
    film = clean_text(candidate.film or "")
    if not film:
        logger.debug(f"Dropping candidate with no film title: {candidate!r}")
        return None

    # 12-hour tokens become 24-hour before the strict shape check
    start = to_24_hour(candidate.start) or candidate.start
    if not is_24_hour_token(start):
        logger.debug(f"Dropping '{film}': invalid start time {candidate.start!r}")
        return None

    end = to_24_hour(candidate.end) if candidate.end else None
    if candidate.end and end is None:
        logger.debug(f"'{film}': ignoring invalid end time {candidate.end!r}")

    return Showing(
        film=film,
        start=to_24_hour(start),
        end=end,
        screen=normalise_screen(candidate.screen),
    )


def normalize_candidates(candidates: list[ShowingCandidate]) -> list[Showing]:
    """
    Filter, deduplicate and sort candidates into the day's showings.

    Identical (film, start, screen) triples collapse to the first occurrence.
    The sort is stable, so showings with the same start keep discovery order.

    Args:
        candidates: Candidates in discovery order

    Returns:
        Showings ordered ascending by start time
    """
    showings: list[Showing] = []
    seen: set[tuple[str, str, str | None]] = set()

    for candidate in candidates:
        showing = normalise_candidate(candidate)
        if showing is None:
            continue

        key = (showing.film, showing.start, showing.screen)
        if key in seen:
            continue
        seen.add(key)
        showings.append(showing)

    showings.sort(key=lambda s: parse_clock(s.start))

    dropped = len(candidates) - len(showings)
    if dropped:
        logger.info(f"Normalized {len(showings)} showings ({dropped} dropped or duplicate)")
    return showings
