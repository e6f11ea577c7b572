"""Derive "next starting" and "now showing / next finishing" from a day's showings."""

from dataclasses import dataclass

from nowshowing.extractors.models import Showing
from nowshowing.utils.clock import format_clock

DEFAULT_DURATION_MINUTES = 120


@dataclass(frozen=True)
class FinishingShowing:
    """The showing currently in progress, with its (possibly assumed) end."""

    film: str
    screen: str | None
    start: str
    end: str


@dataclass(frozen=True)
class DerivedEvents:
    next_starting: Showing | None
    next_finishing: FinishingShowing | None


def end_minute(showing: Showing, default_duration: int = DEFAULT_DURATION_MINUTES) -> int:
    """Explicit end if the source gave one, otherwise start + default duration."""
    explicit = showing.end_minute
    if explicit is not None:
        return explicit
    return showing.start_minute + default_duration


def find_next_starting(showings: list[Showing], now_minute: int) -> Showing | None:
    """First showing (in list order) that starts strictly after now."""
    return next((s for s in showings if s.start_minute > now_minute), None)


def find_current(
    showings: list[Showing],
    now_minute: int,
    default_duration: int = DEFAULT_DURATION_MINUTES,
) -> tuple[Showing, int] | None:
    """
    The in-progress showing that finishes soonest.

    Intervals are half-open, ``[start, end)``, and compared as same-day
    minute values; an interval running past midnight is not wrapped.

    Returns:
        Tuple of (showing, end minute) or None if nothing is playing
    """
    current: tuple[Showing, int] | None = None
    for showing in showings:
        finish = end_minute(showing, default_duration)
        if not (showing.start_minute <= now_minute < finish):
            continue
        if current is None or finish < current[1]:
            current = (showing, finish)
    return current


def derive_events(
    showings: list[Showing],
    now_minute: int,
    default_duration: int = DEFAULT_DURATION_MINUTES,
) -> DerivedEvents:
    """
    Work out what starts next and what is playing now.

    Args:
        showings: Normalized showings, ascending by start
        now_minute: Current minute of day (0-1439)
        default_duration: Assumed running time for showings without an end

    Returns:
        DerivedEvents; either field may be None
    """
    next_starting = find_next_starting(showings, now_minute)

    current = find_current(showings, now_minute, default_duration)
    next_finishing = None
    if current is not None:
        showing, finish = current
        next_finishing = FinishingShowing(
            film=showing.film,
            screen=showing.screen,
            start=format_clock(showing.start_minute),
            end=format_clock(finish),
        )

    return DerivedEvents(next_starting=next_starting, next_finishing=next_finishing)
