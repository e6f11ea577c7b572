"""Unit tests for text clean-up utilities."""

from nowshowing.utils.text import clean_text, slugify, split_lines


class TestCleanText:
    def test_passthrough_clean_text(self) -> None:
        assert clean_text("Nosferatu") == "Nosferatu"

    def test_collapses_internal_whitespace(self) -> None:
        assert clean_text("The   Wild\n Robot") == "The Wild Robot"

    def test_replaces_non_breaking_spaces(self) -> None:
        assert clean_text("Screen\xa03") == "Screen 3"

    def test_removes_zero_width_characters(self) -> None:
        assert clean_text("Wic\u200bked") == "Wicked"

    def test_returns_empty_string_unchanged(self) -> None:
        assert clean_text("") == ""


class TestSplitLines:
    def test_drops_blank_lines_and_trims(self) -> None:
        assert split_lines("  Dune \n\n\n  18:00\n   \n") == ["Dune", "18:00"]

    def test_empty_document(self) -> None:
        assert split_lines("") == []


class TestSlugify:
    def test_lowercases_input(self) -> None:
        assert slugify("Nottingham") == "nottingham"

    def test_replaces_spaces_with_hyphens(self) -> None:
        assert slugify("Vue Nottingham") == "vue-nottingham"

    def test_removes_special_characters(self) -> None:
        assert slugify("Vue: Nottingham!") == "vue-nottingham"

    def test_collapses_multiple_hyphens(self) -> None:
        assert slugify("word  word") == "word-word"

    def test_strips_leading_and_trailing_hyphens(self) -> None:
        assert slugify(":test:") == "test"

    def test_converts_underscores_to_hyphens(self) -> None:
        assert slugify("some_cinema") == "some-cinema"
