"""Tests for the boolean family."""

from __future__ import annotations

import pytest

from typeone import BooleanTypeError, boolean_type, create


class TestBooleanType:
    """Tests for boolean types."""

    def test_is_valid(self) -> None:
        """Test that only True and False are valid."""
        dt = create("BOOLEAN")
        assert dt.is_valid(True) is True
        assert dt.is_valid(False) is True
        assert dt.is_valid(1) is False
        assert dt.is_valid("true") is False

    def test_assert_valid(self) -> None:
        """Test the primitive error for non-booleans."""
        with pytest.raises(BooleanTypeError, match="BOOLEAN primitive assertion failed"):
            create("BOOLEAN").assert_valid(1)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1", True),
            ("t", True),
            ("true", True),
            ("yes", True),
            ("TRUE", True),
            ("Yes", True),
            ("0", False),
            ("f", False),
            ("false", False),
            ("no", False),
            ("F", False),
            ("NO", False),
        ],
    )
    def test_token_table(self, text: str, expected: bool) -> None:
        """Test every recognized token in either case."""
        dt = create("BOOLEAN")
        assert dt.is_valid_string(text) is True
        assert dt.from_string(text) is expected

    @pytest.mark.parametrize("text", ["", "bla", "y", "2", "on"])
    def test_unknown_tokens(self, text: str) -> None:
        """Test that other text is invalid and reads as False when coerced."""
        dt = create("BOOLEAN")
        assert dt.is_valid_string(text) is False
        assert dt.from_string(text, coerce=True) is False
        with pytest.raises(BooleanTypeError, match="not a valid boolean representation"):
            dt.from_string(text)

    def test_make_valid(self) -> None:
        """Test repair by truthiness."""
        dt = create("BOOLEAN")
        assert dt.make_valid(0) is False
        assert dt.make_valid(1) is True
        assert dt.make_valid("") is False
        assert dt.make_valid("abc") is True

    def test_to_string(self) -> None:
        """Test rendering of booleans."""
        dt = create("BOOLEAN")
        assert dt.to_string(True) == "true"
        assert dt.to_string(False) == "false"
        with pytest.raises(BooleanTypeError):
            dt.to_string(1)

    def test_default_and_properties(self) -> None:
        """Test the default value and behavioral flags."""
        dt = create("BOOLEAN")
        assert dt.get_default() is False
        assert dt.is_enumerable() is True
        assert dt.is_comparable() is False
        assert dt.is_searchable() is False
        assert dt.is_fragmentable() is False

    def test_serialize(self) -> None:
        """Test named and family-level serialized forms."""
        assert create("BOOLEAN").serialize() == "BOOLEAN/BOOLEAN/boolean"
        assert boolean_type().serialize() == "BooleanType/undefined/boolean"
