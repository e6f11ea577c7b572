"""Structured extractor for film "cards" in rendered listings HTML."""

import logging
import re
from typing import Any

from bs4 import BeautifulSoup, Tag

from nowshowing.config import settings
from nowshowing.extractors.base import BaseExtractor, looks_like_markup
from nowshowing.extractors.models import ShowingCandidate
from nowshowing.utils.clock import find_clock_tokens
from nowshowing.utils.text import clean_text

logger = logging.getLogger(__name__)

_HEADINGS = ["h1", "h2", "h3", "h4"]
_TITLE_CLASS = re.compile(r"title", re.IGNORECASE)
_SCREEN_CLASS = re.compile(r"screen", re.IGNORECASE)
# "showtime", "session-time", "time-slot"; but not "runtime"
_TIME_CLASS = re.compile(r"(?<!run)time|session", re.IGNORECASE)
_SCREEN_REF = re.compile(r"\bScreen\s+([A-Za-z0-9]+)\b", re.IGNORECASE)
_BARE_SCREEN = re.compile(r"^[A-Za-z0-9]{1,4}$")


class CardExtractor(BaseExtractor):
    """
    Extract showings from repeating film cards.

    Listings pages usually render one element per film holding a title
    heading, an optional screen label and a row of session buttons. Each
    CSS selector in ``selectors`` is tried in turn and the first one whose
    cards yield any showings wins.
    """

    name = "cards"

    def __init__(self, selectors: list[str] | None = None) -> None:
        """
        Args:
            selectors: CSS selectors identifying a card (uses settings if not provided)
        """
        self.selectors = selectors or list(settings.card_selectors)

    def accepts(self, document: Any) -> bool:
        return looks_like_markup(document)

    def extract(self, document: Any) -> list[ShowingCandidate]:
        """Parse film cards from a markup string."""
        if not self.accepts(document):
            return []

        try:
            soup = BeautifulSoup(document, "html.parser")
        except Exception as e:
            logger.warning(f"Cards: failed to parse markup: {e}")
            return []

        for selector in self.selectors:
            try:
                cards = self._find_cards(soup, selector)
            except Exception as e:
                # Invalid selector from configuration
                logger.warning(f"Cards: selector {selector!r} failed: {e}")
                continue

            candidates: list[ShowingCandidate] = []
            for card in cards:
                try:
                    candidates.extend(self._parse_card(card))
                except Exception as e:
                    logger.warning(f"Cards: failed to parse card: {e}")

            if candidates:
                logger.debug(
                    f"Cards: {len(candidates)} candidates from {len(cards)} "
                    f"cards matching {selector!r}"
                )
                return candidates

        return []

    @staticmethod
    def _find_cards(soup: BeautifulSoup, selector: str) -> list[Tag]:
        """Select cards, keeping only the outermost when cards nest."""
        matches = soup.select(selector)
        matched_ids = {id(tag) for tag in matches}
        return [
            tag for tag in matches
            if not any(id(parent) in matched_ids for parent in tag.parents)
        ]

    def _parse_card(self, card: Tag) -> list[ShowingCandidate]:
        title = self._extract_title(card)
        if not title or len(title) < 2:
            return []

        card_screen = self._extract_screen(card)

        candidates: list[ShowingCandidate] = []
        for element in self._time_elements(card):
            text = clean_text(element.get_text(" "))
            tokens = find_clock_tokens(text)
            if not tokens and element.get("datetime"):
                tokens = find_clock_tokens(str(element["datetime"]))

            screen_match = _SCREEN_REF.search(text)
            screen = screen_match.group(1) if screen_match else card_screen
            for token in tokens:
                candidates.append(ShowingCandidate(film=title, start=token, screen=screen))

        if not candidates:
            # No marked-up sessions; take any times in the card's text
            for token in find_clock_tokens(clean_text(card.get_text(" "))):
                candidates.append(ShowingCandidate(film=title, start=token, screen=card_screen))

        return candidates

    @staticmethod
    def _extract_title(card: Tag) -> str | None:
        data_title = card.get("data-film")
        if isinstance(data_title, str) and data_title.strip():
            return clean_text(data_title)

        title_tag = card.find(_HEADINGS) or card.find(class_=_TITLE_CLASS)
        if not isinstance(title_tag, Tag):
            return None
        return clean_text(title_tag.get_text(" "))

    @staticmethod
    def _extract_screen(card: Tag) -> str | None:
        data_screen = card.get("data-screen")
        if isinstance(data_screen, str) and data_screen.strip():
            return clean_text(data_screen)

        screen_tag = card.find(class_=_SCREEN_CLASS)
        if isinstance(screen_tag, Tag):
            text = clean_text(screen_tag.get_text(" "))
            m = _SCREEN_REF.search(text)
            if m:
                return m.group(1)
            if _BARE_SCREEN.match(text):
                return text

        m = _SCREEN_REF.search(clean_text(card.get_text(" ")))
        return m.group(1) if m else None

    @staticmethod
    def _time_elements(card: Tag) -> list[Tag]:
        """Innermost elements that mark up a session time."""
        elements = card.find_all("time") + card.find_all(class_=_TIME_CLASS)

        seen: set[int] = set()
        leaves: list[Tag] = []
        for element in elements:
            if id(element) in seen:
                continue
            seen.add(id(element))
            if element.find("time") or element.find(class_=_TIME_CLASS):
                continue
            leaves.append(element)

        # find_all order differs between the two queries; restore document order
        order = {id(tag): i for i, tag in enumerate(card.find_all(True))}
        leaves.sort(key=lambda tag: order.get(id(tag), 0))
        return leaves
