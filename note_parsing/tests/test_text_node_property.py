"""Unit tests for TextNodeProperty."""

import pytest
from note_parsing.text_node_property import TextNodeProperty


class TestTextNodeProperty:
    """Test cases for TextNodeProperty."""

    def test_str(self):
        assert str(TextNodeProperty(3, "date-val", "-425", "integer")) == "date-val=-425 (#3)"

    def test_str_truncates_long_values(self):
        prop = TextNodeProperty(3, "reference", "x" * 80)
        assert str(prop) == f"reference={'x' * 60} (#3)"

    @pytest.mark.parametrize("node_id,name,value", [
        (-1, "region", "Att."),
        (True, "region", "Att."),
        ("1", "region", "Att."),
        (1, "", "Att."),
        (1, "region", None),
        (1, "region", 12),
    ])
    def test_invalid(self, node_id, name, value):
        with pytest.raises(ValueError):
            TextNodeProperty(node_id, name, value)

    def test_frozen(self):
        prop = TextNodeProperty(1, "region", "Att.")
        with pytest.raises(AttributeError):
            prop.value = "Boiot."
