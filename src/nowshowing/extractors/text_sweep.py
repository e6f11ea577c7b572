"""Line-by-line sweep over a page's visible text."""

import logging
import re
from dataclasses import dataclass
from functools import reduce
from typing import Any

from bs4 import BeautifulSoup, NavigableString

from nowshowing.extractors.base import BaseExtractor, looks_like_markup
from nowshowing.extractors.models import ShowingCandidate
from nowshowing.utils.clock import find_clock_tokens
from nowshowing.utils.text import split_lines

logger = logging.getLogger(__name__)

_LETTER = re.compile(r"[A-Za-z]")
_SCREEN_WORD = re.compile(r"\bScreen\b", re.IGNORECASE)
_SCREEN_REF = re.compile(r"\bScreen\s+([A-Za-z0-9]+)\b", re.IGNORECASE)

_TOKEN = r"\d{1,2}:\d{2}(?:\s?[AaPp][Mm])?"
_ONLY_TIMES = re.compile(rf"^{_TOKEN}(?:\s+{_TOKEN})?$")

# Elements that start a new line in a browser's innerText
_BLOCK_TAGS = [
    "address", "article", "aside", "blockquote", "dd", "div", "dl", "dt",
    "figcaption", "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "li", "main", "nav", "ol", "p", "section", "table", "td",
    "th", "tr", "ul",
]


@dataclass(frozen=True)
class SweepState:
    """Accumulator threaded through the sweep: last title seen + output so far."""

    title: str | None = None
    candidates: tuple[ShowingCandidate, ...] = ()


def looks_like_title(line: str) -> bool:
    """
    Title heuristic: has a letter, doesn't mention a screen, and isn't just
    one or two times.
    """
    return (
        bool(_LETTER.search(line))
        and not _SCREEN_WORD.search(line)
        and not _ONLY_TIMES.match(line)
    )


def find_screen(line: str) -> str | None:
    m = _SCREEN_REF.search(line)
    return m.group(1) if m else None


def sweep_line(state: SweepState, line: str) -> SweepState:
    """Advance the sweep by one line."""
    title = line if looks_like_title(line) else state.title

    times = find_clock_tokens(line)
    if title is None or not times:
        return SweepState(title=title, candidates=state.candidates)

    screen = find_screen(line)
    if len(times) >= 2:
        # Two times on one line is an explicit start/end interval
        candidate = ShowingCandidate(film=title, start=times[0], end=times[1], screen=screen)
    else:
        candidate = ShowingCandidate(film=title, start=times[0], screen=screen)

    return SweepState(title=title, candidates=state.candidates + (candidate,))


def visible_text(html: str) -> str:
    """Approximate ``document.body.innerText`` for a markup string."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript", "template", "head"]):
        tag.decompose()
    # Source formatting whitespace is not rendered; only block boundaries break lines
    for string in soup.find_all(string=True):
        if type(string) is NavigableString:
            string.replace_with(re.sub(r"\s+", " ", string))
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for tag in soup.find_all(_BLOCK_TAGS):
        tag.insert_before("\n")
        tag.insert_after("\n")
    return soup.get_text()


class TextSweepExtractor(BaseExtractor):
    """
    Fallback extractor for pages whose markup we can't rely on.

    Treats the document as a flat sequence of lines. The most recent
    title-looking line is remembered, and every line carrying a time is
    attributed to it. Works equally on rendered innerText and on raw HTML
    (which is flattened to text first).
    """

    name = "text-sweep"

    def extract(self, document: Any) -> list[ShowingCandidate]:
        """Sweep the document's lines for title/time pairs."""
        if not isinstance(document, str) or not document.strip():
            return []

        try:
            text = visible_text(document) if looks_like_markup(document) else document
        except Exception as e:
            logger.warning(f"Text sweep: failed to flatten markup, sweeping raw text: {e}")
            text = document

        lines = split_lines(text)
        state = reduce(sweep_line, lines, SweepState())

        logger.debug(
            f"Text sweep: {len(state.candidates)} candidates from {len(lines)} lines"
        )
        return list(state.candidates)
