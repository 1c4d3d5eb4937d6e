"""Tests for text normalization."""

import pytest

from applecast.extraction.text import clean_text


class TestCleanText:
    """Tests for clean_text function."""

    def test_strips_tags(self) -> None:
        """Should remove markup tags and keep the text between them."""
        assert clean_text("<p>In this episode...</p>") == "In this episode..."

    def test_collapses_whitespace(self) -> None:
        """Should collapse spaces, tabs, and newlines into single spaces."""
        assert clean_text("one  two\t\tthree\n\nfour") == "one two three four"

    def test_trims_ends(self) -> None:
        """Should trim leading and trailing whitespace."""
        assert clean_text("   padded   ") == "padded"

    def test_tags_and_whitespace_together(self) -> None:
        """Should handle markup spread across lines."""
        raw = "\n  <div>\n    <p>First</p>\n    <p>Second   line</p>\n  </div>\n"
        assert clean_text(raw) == "First Second line"

    def test_nested_tag_fragments_removed(self) -> None:
        """Should not leave a tag reassembled from fragments."""
        result = clean_text("<<b>script>alert</<i>script>")
        assert "<" not in result or ">" not in result
        assert clean_text(result) == result

    def test_unclosed_angle_bracket_kept(self) -> None:
        """Should keep a lone '<' that does not open a tag."""
        assert clean_text("3 < 5") == "3 < 5"

    def test_entities_untouched(self) -> None:
        """Should leave HTML entities as-is."""
        assert clean_text("Fish &amp; Chips") == "Fish &amp; Chips"

    def test_empty_string(self) -> None:
        """Should return empty string for empty input."""
        assert clean_text("") == ""

    def test_whitespace_only(self) -> None:
        """Should return empty string for whitespace-only input."""
        assert clean_text(" \n\t ") == ""

    @pytest.mark.parametrize(
        "raw",
        [
            "<p>Hello</p>   world",
            "<<a>b>",
            "a < b > c",
            "<br/>line<br/>break",
            "  <span>nested <em>tags</em></span>  ",
            "no markup at all",
            "<unterminated",
            "",
        ],
    )
    def test_idempotent(self, raw: str) -> None:
        """Cleaning twice should equal cleaning once."""
        once = clean_text(raw)
        assert clean_text(once) == once

    @pytest.mark.parametrize(
        "raw",
        [
            "<p>Hello</p>",
            "<<a>b>",
            "<div class='x'><span>deep</span></div>",
            "text <img src='a.png'> more",
        ],
    )
    def test_no_tags_remain(self, raw: str) -> None:
        """Output should never contain a complete tag."""
        result = clean_text(raw)
        assert not ("<" in result and ">" in result[result.index("<"):])
