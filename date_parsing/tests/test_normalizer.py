"""Unit tests for date phrase normalization."""

import pytest
from date_parsing.normalizer import normalize_dashes, normalize_ws, preprocess_for_split


class TestNormalizeWs:
    """Test cases for normalize_ws."""

    def test_collapses_whitespace(self):
        assert normalize_ws(" \t21  AD\r\n \t ") == "21 AD"

    def test_empty(self):
        assert normalize_ws("") == ""

    def test_none_raises(self):
        with pytest.raises(ValueError):
            normalize_ws(None)


class TestNormalizeDashes:
    """Test cases for normalize_dashes."""

    @pytest.mark.parametrize("text,expected", [
        ("440–410 a.", "440-410 a."),
        ("440 - 410 a.", "440-410 a."),
        ("440 − 410 a.", "440-410 a."),
        ("440-410 a.", "440-410 a."),
    ])
    def test_dashes(self, text, expected):
        assert normalize_dashes(text) == expected


class TestPreprocessForSplit:
    """Test cases for preprocess_for_split."""

    @pytest.mark.parametrize("text,expected", [
        ("", ""),
        ("21 AD", "21 AD"),
        (" \t21  AD\r\n \t ", "21 AD"),
        ("21 AD (hello)", "21 AD"),
        ("21 AD [hello]", "21 AD"),
        ("21 AD [hello (world)]", "21 AD"),
        ("21 AD [hello] (world)", "21 AD"),
        ("21 AD or lat.", "21 AD"),
        ("21 AD or sh. lat.", "21 AD"),
        ("21 AD or shortly lat.", "21 AD"),
        ("21 AD or slightly lat.", "21 AD"),
        ("21 AD or sh. later", "21 AD"),
        ("21 AD or sh. aft.", "21 AD"),
        ("21 AD or sh. after", "21 AD"),
        ("21 AD or sh. earlier", "21 AD"),
        ("21 AD or sh. früher", "21 AD"),
        ("21 AD or sh. später", "21 AD"),
        ("s. II AD, early", "s. II AD"),
        ("21 AD, 3 Jan.", "21 AD{d=3,m=1}"),
        ("21 AD, 3 January", "21 AD{d=3,m=1}"),
        ("21 AD, Aug.", "21 AD{m=8}"),
        ("21 AD w/ 214", "21 AD w 214"),
        ("21 AD w// 214", "21 AD w 214"),
        ("21 AD, July/August", "21 AD{m=7}"),
        ("mid-1st c. BC", "med. 1st c. BC"),
        ("c. 300 (?) BC", "c. 300 ? BC"),
    ])
    def test_text(self, text, expected):
        actual, _ = preprocess_for_split(text)
        assert actual == expected

    @pytest.mark.parametrize("text,expected_hints", [
        ("21 AD", []),
        ("21 AD [forgery?]", ["forgery?"]),
        ("21 AD or lat.", ["or later"]),
        ("21 AD or sh. earlier", ["or earlier"]),
        ("21 AD or sh. früher", ["or earlier"]),
        ("21 AD at the earliest", ["at the earliest"]),
        ("s. II AD, early", ["early"]),
    ])
    def test_hints(self, text, expected_hints):
        _, hints = preprocess_for_split(text)
        assert hints == expected_hints

    def test_none_raises(self):
        with pytest.raises(ValueError):
            preprocess_for_split(None)
