"""Unit tests for the segment classifiers."""

import pytest
from date_parsing import DateParser
from note_parsing.classifiers import (
    classify_date,
    classify_layout,
    classify_reference,
    classify_type,
    is_forgery_wording,
)
from note_parsing.references import ReferencePrefixes
from note_parsing.text_node_property import TextNodeProperty


def _pairs(properties):
    return [(p.name, p.value) for p in properties]


class TestClassifyType:
    """Test cases for classify_type."""

    def test_bracketed(self):
        assert classify_type("[pottery]", 1) == [TextNodeProperty(1, "type", "pottery")]

    @pytest.mark.parametrize("text", ["pottery", "[pottery] 2", "[]", "[forgery?]", "[probable forgery]"])
    def test_not_a_type(self, text):
        assert classify_type(text, 1) is None


class TestClassifyLayout:
    """Test cases for classify_layout."""

    def test_stoich(self):
        assert _pairs(classify_layout("stoich. 28", 1)) == [
            ("layout", "stoich. 28"),
            ("stoich-min", "28"),
            ("stoich-max", "28"),
        ]

    def test_stoich_range(self):
        assert _pairs(classify_layout("stoich. 30/28", 1)) == [
            ("layout", "stoich. 30/28"),
            ("stoich-min", "28"),
            ("stoich-max", "30"),
        ]

    def test_non_stoich(self):
        assert _pairs(classify_layout("non-stoich. c.20-25", 1)) == [
            ("layout", "non-stoich. c.20-25"),
            ("non-stoich-min", "20"),
            ("non-stoich-max", "25"),
        ]

    def test_stoich_without_count(self):
        assert _pairs(classify_layout("stoich.", 1)) == [
            ("layout", "stoich."),
            ("stoich-min", "0"),
            ("stoich-max", "0"),
        ]

    def test_counts_are_integers(self):
        properties = classify_layout("stoich. 28", 1)
        assert [p.type for p in properties] == [None, "integer", "integer"]

    @pytest.mark.parametrize("text,expected", [
        ("boustr.", "boustr."),
        ("retrogr.", "retrogr."),
        ("retr.", "retrogr."),
        ("retr. (lines 1-3)", "retrogr. (lines 1-3)"),
    ])
    def test_other_layouts(self, text, expected):
        assert _pairs(classify_layout(text, 1)) == [("layout", expected)]

    @pytest.mark.parametrize("text", ["Athens", "440-410 a.", "stoichedon"])
    def test_not_a_layout(self, text):
        assert classify_layout(text, 1) is None


class TestClassifyDate:
    """Test cases for classify_date."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = DateParser()

    def test_single_date(self):
        assert _pairs(classify_date("440-410 a.", 1, self.parser)) == [
            ("date-phi", "440-410 a."),
            ("date-txt", "440 -- 410 BC"),
            ("date-val", "-425"),
        ]

    def test_alternatives_are_suffixed(self):
        assert _pairs(classify_date("fin. s. VI/init. s. V a.", 1, self.parser)) == [
            ("date-phi", "fin. s. VI/init. s. V a."),
            ("date-txt", "c. 510 BC"),
            ("date-val", "-510"),
            ("date-txt#2", "c. 490 BC"),
            ("date-val#2", "-490"),
        ]

    def test_date_values_are_integers(self):
        properties = classify_date("427 a.", 1, self.parser)
        assert {p.name: p.type for p in properties} == {
            "date-phi": None,
            "date-txt": None,
            "date-val": "integer",
        }

    def test_non_numeric(self):
        assert _pairs(classify_date("early imp.", 1, self.parser)) == [
            ("date-phi", "early imp."),
            ("date-nan", "early imp."),
        ]

    @pytest.mark.parametrize("hint,level", [
        ("forgery?", "1"),
        ("probable forgery", "2"),
        ("perhaps forgery", "3"),
    ])
    def test_forgery_hint(self, hint, level):
        properties = classify_date(f"s. IV a. [{hint}]", 1, self.parser)
        assert ("date-txt", "IV BC {" + hint + "}") in _pairs(properties)
        assert properties[-1] == TextNodeProperty(1, "forgery", level, "integer")

    def test_forgery_mention_has_no_level(self):
        names = [p.name for p in classify_date("s. IV a. [not a forgery]", 1, self.parser)]
        assert names == ["date-phi", "date-txt", "date-val"]

    @pytest.mark.parametrize("text,level", [
        ("forgery?", "1"),
        ("[forgery?]", "1"),
        ("probable forgery", "2"),
        ("[perhaps forgery]", "3"),
    ])
    def test_bare_forgery(self, text, level):
        assert _pairs(classify_date(text, 1, self.parser)) == [("forgery", level)]

    @pytest.mark.parametrize("text", ["Athens: Akropolis", "IG I³ 87", "[pottery]"])
    def test_not_a_date(self, text):
        assert classify_date(text, 1, self.parser) is None


class TestClassifyReference:
    """Test cases for classify_reference."""

    def setup_method(self):
        """Set up test fixtures."""
        self.prefixes = ReferencePrefixes()

    @pytest.mark.parametrize("text", [
        "IG I˛ 87,f + 141,a, + 174",
        "SEG 12.100",
        "Hesperia 7 (1938) 1",
        "I.Cret. IV 72",
        "Syll.³ 1",
        "AM 35 (1910) 12",
    ])
    def test_reference(self, text):
        assert classify_reference(text, 1, self.prefixes) == [TextNodeProperty(1, "reference", text)]

    @pytest.mark.parametrize("text", ["Athens: Akropolis", "Lamptrai: Thiti", "Ig", ""])
    def test_not_a_reference(self, text):
        assert classify_reference(text, 1, self.prefixes) is None


class TestReferencePrefixes:
    """Test cases for ReferencePrefixes."""

    def setup_method(self):
        """Set up test fixtures."""
        self.prefixes = ReferencePrefixes()

    def test_longest_prefix_wins(self):
        assert self.prefixes.match("IGUR 1234") == "IGUR"
        assert self.prefixes.match("IG II² 1") == "IG"
        assert self.prefixes.match("Syll.³ 1") == "Syll.³"

    def test_case_sensitive(self):
        assert self.prefixes.match("ig II² 1") is None

    def test_prefixes_sorted_longest_first(self):
        lengths = [len(p) for p in self.prefixes.prefixes]
        assert lengths == sorted(lengths, reverse=True)


@pytest.mark.parametrize("text,expected", [
    ("forgery?", True),
    ("[probable forgery]", True),
    ("Perhaps forgery", True),
    ("forgery of the 19th c.", False),
    ("pottery", False),
])
def test_is_forgery_wording(text, expected):
    assert is_forgery_wording(text) is expected
