"""Unit tests for the API pairs extractor."""

from nowshowing.extractors.api_pairs import ApiPairsExtractor
from nowshowing.extractors.models import ShowingCandidate


class TestApiPairsExtract:
    def setup_method(self) -> None:
        self.extractor = ApiPairsExtractor()

    def test_expands_tuples(self) -> None:
        candidates = self.extractor.extract([("Dune", ["18:00", "20:45"])])
        assert candidates == [
            ShowingCandidate(film="Dune", start="18:00"),
            ShowingCandidate(film="Dune", start="20:45"),
        ]

    def test_converts_12_hour_times(self) -> None:
        candidates = self.extractor.extract([("Z", ["9:05PM", "12:30pm"])])
        assert [c.start for c in candidates] == ["21:05", "12:30"]

    def test_reads_mappings(self) -> None:
        candidates = self.extractor.extract([
            {"title": "Wicked", "times": ["13:00"], "screen": 5},
            {"film": "Dune", "showtimes": "18:00"},
        ])
        assert candidates == [
            ShowingCandidate(film="Wicked", start="13:00", screen=5),
            ShowingCandidate(film="Dune", start="18:00"),
        ]

    def test_reads_screen_from_triples(self) -> None:
        candidates = self.extractor.extract([("Dune", ["18:00"], "IMAX")])
        assert candidates[0].screen == "IMAX"

    def test_passes_unparsable_times_through(self) -> None:
        candidates = self.extractor.extract([("Dune", ["Sold out"])])
        assert candidates == [ShowingCandidate(film="Dune", start="Sold out")]

    def test_skips_items_without_title(self) -> None:
        assert self.extractor.extract([("", ["18:00"]), {"times": ["19:00"]}]) == []

    def test_skips_malformed_items(self) -> None:
        candidates = self.extractor.extract([("Lonely title",), ("Dune", ["18:00"])])
        assert candidates == [ShowingCandidate(film="Dune", start="18:00")]

    def test_ignores_strings(self) -> None:
        assert self.extractor.extract("Dune 18:00") == []
        assert not self.extractor.accepts("Dune 18:00")
