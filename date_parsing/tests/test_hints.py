"""Unit tests for hint extraction and forgery levels."""

import pytest
from date_parsing.hints import extract_hints, forgery_level


class TestExtractHints:
    """Test cases for extract_hints."""

    @pytest.mark.parametrize("text,expected_text,expected_hints", [
        ("21 AD", "21 AD", []),
        ("21 AD (hello)", "21 AD", ["hello"]),
        ("21 AD [hello]", "21 AD", ["hello"]),
        ("21 AD [hello (world)]", "21 AD", ["hello (world)"]),
        ("21 AD [hello] (world)", "21 AD", ["hello", "world"]),
        ("196 AD [set up betw. 205 and 211?]", "196 AD", ["set up betw. 205 and 211?"]),
        ("c. 300 (early) BC", "c. 300 BC", ["early"]),
        ("21 AD ()", "21 AD", []),
    ])
    def test_extract(self, text, expected_text, expected_hints):
        assert extract_hints(text) == (expected_text, expected_hints)

    def test_unbalanced_closer_is_kept(self):
        text, hints = extract_hints("21 AD hello)")
        assert text == "21 AD hello)"
        assert hints == []

    def test_mismatched_brackets_are_kept(self):
        text, hints = extract_hints("21 AD (hello]")
        assert text == "21 AD (hello]"
        assert hints == []

    def test_none_raises(self):
        with pytest.raises(ValueError):
            extract_hints(None)


class TestForgeryLevel:
    """Test cases for forgery_level."""

    @pytest.mark.parametrize("hints,expected", [
        ([], None),
        (["pottery"], None),
        (["forgery"], "1"),
        (["forgery?"], "1"),
        (["Forgery?"], "1"),
        (["probable forgery"], "2"),
        (["perhaps forgery"], "3"),
        (["re-inscr.", "perhaps forgery"], "3"),
        (["[Probable forgery]"], "2"),
        (["not a forgery"], None),
        (["forgery of the 19th c."], None),
        (["perhaps forgery, see IG I³ 1"], None),
    ])
    def test_levels(self, hints, expected):
        assert forgery_level(hints) == expected
