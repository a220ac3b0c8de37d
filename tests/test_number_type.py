"""Tests for the number family and its float/integer refinements."""

from __future__ import annotations

import math

import pytest

from typeone import NumberTypeError, create, float_type, integer_type, number_type


class TestNumberValidation:
    """Tests for number value checks."""

    def test_unbounded(self) -> None:
        """Test that an unbounded number accepts any number."""
        dt = number_type()
        assert dt.is_valid(0) is True
        assert dt.is_valid(-1e300) is True
        assert dt.is_valid(6.3) is True
        assert dt.is_valid(math.inf) is True

    @pytest.mark.parametrize("value", ["1", None, True, [1], {}])
    def test_rejects_non_numbers(self, value: object) -> None:
        """Test that only numbers pass."""
        assert number_type().is_valid(value) is False

    def test_range_is_inclusive(self) -> None:
        """Test that both bounds belong to the range."""
        dt = number_type(-10, 10)
        assert dt.is_valid(-10) is True
        assert dt.is_valid(10) is True
        assert dt.is_valid(10.5) is False
        assert dt.is_valid(-11) is False

    def test_assert_valid_out_of_range(self) -> None:
        """Test the range error message."""
        dt = integer_type(-10, 10)
        with pytest.raises(NumberTypeError, match=r"Value 32 out of range \(-10, 10\)"):
            dt.assert_valid(32)

    def test_assert_valid_not_a_number(self) -> None:
        """Test that the primitive check comes first."""
        with pytest.raises(NumberTypeError, match="NUMBER primitive assertion failed"):
            number_type().assert_valid("32")

    def test_integer_requires_integral(self) -> None:
        """Test that integer types reject fractions but accept 10.0."""
        dt = integer_type()
        assert dt.is_valid(6) is True
        assert dt.is_valid(10.0) is True
        assert dt.is_valid(6.3) is False
        assert dt.is_valid(math.nan) is False
        with pytest.raises(NumberTypeError, match="not a valid integer"):
            dt.assert_valid(6.3)

    def test_float_accepts_fractions(self) -> None:
        """Test that the float refinement adds no rule."""
        dt = float_type(0, 1)
        assert dt.is_valid(0.25) is True
        assert dt.is_valid(2) is False


class TestNumberStrings:
    """Tests for number text checks and conversion."""

    @pytest.mark.parametrize("text", ["0", "10", "-2.73", "6.3"])
    def test_valid_strings(self, text: str) -> None:
        """Test that exact number text is valid."""
        assert number_type().is_valid_string(text) is True

    @pytest.mark.parametrize("text", ["2a", "abc", "", " 10", "10.0", "+1"])
    def test_invalid_strings(self, text: str) -> None:
        """Test that partial or non-canonical text is rejected."""
        assert number_type().is_valid_string(text) is False

    @pytest.mark.parametrize("text", ["0.00001", "0.000001", "-0.000025", "1e-7"])
    def test_small_decimals_round_trip(self, text: str) -> None:
        """Test that small decimals keep their usual textual form."""
        dt = float_type()
        assert dt.is_valid_string(text) is True
        assert dt.to_string(dt.from_string(text)) == text

    def test_small_decimal_to_string(self) -> None:
        """Test that small decimals print positionally down to 1e-6."""
        assert float_type().to_string(0.00001) == "0.00001"
        assert float_type().to_string(1e-7) == "1e-7"

    def test_valid_string_respects_rules(self) -> None:
        """Test that the parsed value must also be valid."""
        assert integer_type().is_valid_string("6.3") is False
        assert integer_type(-10, 10).is_valid_string("32") is False
        assert integer_type(-10, 10).is_valid_string("-10") is True

    def test_from_string(self) -> None:
        """Test parsing of valid number text."""
        assert number_type().from_string("-2.73") == -2.73
        assert float_type().from_string("6.3") == 6.3
        assert integer_type().from_string("32") == 32

    def test_integer_from_string_truncates(self) -> None:
        """Test that integer text parsing stops at the fraction."""
        assert integer_type().from_string("6.9") == 6

    def test_from_string_out_of_range(self) -> None:
        """Test strict and coercing conversion of out-of-range text."""
        dt = integer_type(-10, 10)
        with pytest.raises(NumberTypeError, match="out of range"):
            dt.from_string("32")
        assert dt.from_string("32", True) == 10
        assert dt.from_string("-32", coerce=True) == -10

    def test_from_string_unparseable(self) -> None:
        """Test that text with no number raises unless coerced."""
        dt = number_type()
        with pytest.raises(NumberTypeError, match="not a valid number representation"):
            dt.from_string("abc")
        assert math.isnan(dt.from_string("abc", coerce=True))

    def test_to_string(self) -> None:
        """Test rendering of valid numbers."""
        assert number_type().to_string(10.0) == "10"
        assert number_type().to_string(-2.73) == "-2.73"
        assert integer_type().to_string(32) == "32"

    def test_to_string_invalid(self) -> None:
        """Test that invalid values cannot be rendered."""
        with pytest.raises(NumberTypeError):
            integer_type().to_string(5.5)
        with pytest.raises(NumberTypeError):
            number_type(0, 1).to_string(2)


class TestNumberRepair:
    """Tests for make_valid and defaults."""

    def test_clamps_into_range(self) -> None:
        """Test clamping at both ends."""
        dt = integer_type(-10, 10)
        assert dt.is_valid(32) is False
        assert dt.make_valid(32) == 10
        assert dt.make_valid(-32) == -10
        assert dt.make_valid(4) == 4

    def test_integer_truncates(self) -> None:
        """Test truncation toward zero before clamping."""
        dt = integer_type()
        assert dt.make_valid(6.9) == 6
        assert dt.make_valid(-6.9) == -6
        assert dt.make_valid("12abc") == 12

    def test_float_parses_text(self) -> None:
        """Test that float repair reads the numeric prefix."""
        assert float_type().make_valid("2a") == 2.0
        assert math.isnan(float_type().make_valid("abc"))

    def test_default(self) -> None:
        """Test that the default is zero for every refinement."""
        assert number_type().get_default() == 0
        assert float_type().get_default() == 0
        assert integer_type().get_default() == 0


class TestNumberDescriptor:
    """Tests for parameters, properties and serialized form."""

    def test_properties(self) -> None:
        """Test that numbers are comparable only."""
        dt = number_type()
        assert dt.is_comparable() is True
        assert dt.is_enumerable() is False
        assert dt.is_searchable() is False
        assert dt.is_fragmentable() is False

    def test_accessors(self) -> None:
        """Test the range accessors."""
        dt = number_type(-5, 5, 0.5)
        assert dt.min == -5
        assert dt.max == 5
        assert dt.mul == 0.5
        assert number_type().min == -math.inf

    def test_serialize_named(self) -> None:
        """Test serialized form of a bounded named variant."""
        assert (
            create("INTEGER", max_value=10).serialize()
            == 'INTEGER/INTEGER/number {"min":-10,"max":10,"mul":1}'
        )

    def test_serialize_unbounded(self) -> None:
        """Test that infinite bounds are written as null."""
        assert create("FLOAT").serialize() == 'FLOAT/FLOAT/number {"min":null,"max":null,"mul":1}'

    def test_serialize_family_level(self) -> None:
        """Test family class names for unnamed types."""
        assert number_type(0.5, 2.5).serialize() == (
            'NumberType/undefined/number {"min":0.5,"max":2.5,"mul":1}'
        )
        assert float_type().serialize().startswith("FloatType/undefined/number ")
        assert integer_type(-10, 10).serialize() == (
            'IntegerType/undefined/number {"min":-10,"max":10,"mul":1}'
        )
