"""
Tests for line tokenizing
"""

import pytest

from distwiz.errors import FormatError
from distwiz.parsing import Edge, parse_edge, try_parse_edge


class TestParseEdge:
    def test_parse_simple(self):
        assert parse_edge("A B 0.5\n") == Edge("A", "B", 0.5)

    def test_arbitrary_whitespace(self):
        assert parse_edge("  A\t\tB   0.25  \n") == Edge("A", "B", 0.25)

    @pytest.mark.parametrize("value,expected", [
        ("1.", 1.0),
        (".5", 0.5),
        ("+2", 2.0),
        ("3E2", 300.0),
    ])
    def test_decimal_spellings(self, value, expected):
        assert parse_edge(f"A B {value}").distance == expected

    def test_negative_and_exponent(self):
        assert parse_edge("A B -1.5").distance == -1.5
        assert parse_edge("A B 1e-3").distance == 0.001

    def test_missing_distance(self):
        with pytest.raises(FormatError) as exc:
            parse_edge("X Y\n", line_number=7, source="in.txt")
        assert exc.value.line_number == 7
        assert "in.txt:line 7" in str(exc.value)
        assert "'X Y'" in str(exc.value)

    def test_too_many_fields(self):
        with pytest.raises(FormatError):
            parse_edge("A B 0.1 extra")

    @pytest.mark.parametrize("value", ["abc", "nan", "inf", "-inf", "1_0", "\uff10.\uff15", "1e999", "0x1p-2"])
    def test_invalid_distance(self, value):
        with pytest.raises(FormatError):
            parse_edge(f"A B {value}")

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_edge("A")


class TestTryParseEdge:
    def test_valid(self):
        assert try_parse_edge("A B 0.3") == Edge("A", "B", 0.3)

    def test_invalid_returns_none(self):
        assert try_parse_edge("A B") is None
        assert try_parse_edge("A B x") is None
        assert try_parse_edge("A B NaN") is None
        assert try_parse_edge("A B 1_0") is None
        assert try_parse_edge("A B \uff10.\uff15") is None
        assert try_parse_edge("") is None
