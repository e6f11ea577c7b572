"""Data models for extracted showings."""

from dataclasses import dataclass

from nowshowing.utils.clock import parse_clock


@dataclass
class ShowingCandidate:
    """
    Raw showing data from an extractor.

    Nothing here is validated: the time tokens are exactly as they appeared in
    the source document. The normalizer turns candidates into Showings.
    """

    film: str  # Film title as it appears in the source
    start: str  # Start time token, e.g. "18:00" or "6:00 PM"
    end: str | None = None  # End time token when the source gives an interval
    screen: str | int | None = None  # Screen/auditorium identifier


@dataclass(frozen=True)
class Showing:
    """A validated showing with canonical "HH:MM" times."""

    film: str
    start: str
    end: str | None = None
    screen: str | None = None

    @property
    def start_minute(self) -> int:
        return parse_clock(self.start)

    @property
    def end_minute(self) -> int | None:
        if self.end is None:
            return None
        return parse_clock(self.end)
