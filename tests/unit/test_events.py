"""Unit tests for next-starting / next-finishing derivation."""

from nowshowing.extractors.models import Showing
from nowshowing.pipeline.events import (
    FinishingShowing,
    derive_events,
    end_minute,
    find_current,
    find_next_starting,
)
from nowshowing.utils.clock import parse_clock


def at(hhmm: str) -> int:
    return parse_clock(hhmm)


SCHEDULE = [
    Showing(film="Paddington", start="10:00", screen="1"),
    Showing(film="Wicked", start="13:30", end="16:15", screen="2"),
    Showing(film="Dune", start="15:00", screen="IMAX"),
    Showing(film="Nosferatu", start="20:45", screen="3"),
]


class TestEndMinute:
    def test_uses_explicit_end(self) -> None:
        assert end_minute(Showing(film="Y", start="17:00", end="19:10")) == at("19:10")

    def test_defaults_to_two_hours(self) -> None:
        assert end_minute(Showing(film="X", start="18:00")) == at("20:00")

    def test_custom_default_duration(self) -> None:
        assert end_minute(Showing(film="X", start="18:00"), default_duration=95) == at("19:35")


class TestNextStarting:
    def test_first_showing_after_now(self) -> None:
        assert find_next_starting(SCHEDULE, at("14:00")).film == "Dune"

    def test_start_equal_to_now_is_not_next(self) -> None:
        assert find_next_starting(SCHEDULE, at("15:00")).film == "Nosferatu"

    def test_none_after_last_showing(self) -> None:
        assert find_next_starting(SCHEDULE, at("21:00")) is None

    def test_none_for_empty_schedule(self) -> None:
        assert find_next_starting([], at("12:00")) is None


class TestCurrent:
    def test_nothing_playing_before_first_showing(self) -> None:
        assert find_current(SCHEDULE, at("09:59")) is None

    def test_start_minute_is_inside_interval(self) -> None:
        showing, finish = find_current(SCHEDULE, at("10:00"))
        assert showing.film == "Paddington"
        assert finish == at("12:00")

    def test_end_minute_is_outside_interval(self) -> None:
        assert find_current(SCHEDULE, at("12:00")) is None

    def test_picks_showing_finishing_soonest(self) -> None:
        # Wicked ends 16:15, Dune (assumed) ends 17:00
        showing, finish = find_current(SCHEDULE, at("15:30"))
        assert showing.film == "Wicked"
        assert finish == at("16:15")

    def test_ties_keep_first_in_list(self) -> None:
        showings = [
            Showing(film="A", start="18:00", end="20:00"),
            Showing(film="B", start="18:30", end="20:00"),
        ]
        showing, _ = find_current(showings, at("19:00"))
        assert showing.film == "A"

    def test_interval_is_not_wrapped_past_midnight(self) -> None:
        late = [Showing(film="Late", start="23:30")]
        assert find_current(late, at("00:30")) is None


class TestDeriveEvents:
    def test_explicit_end_and_next_start(self) -> None:
        showings = [
            Showing(film="Y", start="17:00", end="19:10"),
            Showing(film="X", start="18:00"),
        ]
        events = derive_events(showings, at("17:30"))
        assert events.next_starting == Showing(film="X", start="18:00")
        assert events.next_finishing == FinishingShowing(
            film="Y", screen=None, start="17:00", end="19:10"
        )

    def test_assumed_end_is_formatted(self) -> None:
        events = derive_events(SCHEDULE, at("11:00"))
        assert events.next_finishing.end == "12:00"

    def test_assumed_end_wraps_for_display(self) -> None:
        events = derive_events([Showing(film="Late", start="23:00")], at("23:30"))
        assert events.next_finishing.end == "01:00"

    def test_assumed_end_not_written_back(self) -> None:
        derive_events(SCHEDULE, at("11:00"))
        assert SCHEDULE[0].end is None

    def test_next_finishing_interval_contains_now(self) -> None:
        for now in range(0, 1440, 7):
            events = derive_events(SCHEDULE, now)
            if events.next_finishing is None:
                continue
            showing = next(
                s for s in SCHEDULE
                if s.film == events.next_finishing.film
                and s.start == events.next_finishing.start
            )
            assert showing.start_minute <= now < end_minute(showing)

    def test_next_starting_is_strictly_after_now(self) -> None:
        for now in range(0, 1440, 7):
            events = derive_events(SCHEDULE, now)
            if events.next_starting is not None:
                assert events.next_starting.start_minute > now

    def test_is_idempotent(self) -> None:
        first = derive_events(SCHEDULE, at("15:30"))
        second = derive_events(SCHEDULE, at("15:30"))
        assert first == second

    def test_empty_schedule(self) -> None:
        events = derive_events([], at("12:00"))
        assert events.next_starting is None
        assert events.next_finishing is None
