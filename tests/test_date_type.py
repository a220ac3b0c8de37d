"""Tests for the date family."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from typeone import DateTypeError, create, date_type
from typeone.families.date import format_instant

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class TestDateValidation:
    """Tests for date value and text checks."""

    def test_is_valid(self) -> None:
        """Test that only datetime values are valid."""
        dt = create("DATETIME")
        assert dt.is_valid(EPOCH) is True
        assert dt.is_valid(0) is False
        assert dt.is_valid("1970-01-01") is False

    def test_assert_valid(self) -> None:
        """Test the primitive error for non-dates."""
        with pytest.raises(DateTypeError, match="DATE primitive assertion failed"):
            create("DATETIME").assert_valid("1970-01-01")

    @pytest.mark.parametrize(
        "text",
        ["1970-01-01T00:00:00.000Z", "2020-06-07 14:13:43", "2020-06-07", "2020-06-07T14:13:43+02:00"],
    )
    def test_valid_strings(self, text: str) -> None:
        """Test that ISO-8601 text is valid."""
        assert create("DATETIME").is_valid_string(text) is True

    @pytest.mark.parametrize("text", ["", "yesterday", "2020-13-01"])
    def test_invalid_strings(self, text: str) -> None:
        """Test that other text is invalid."""
        assert create("DATETIME").is_valid_string(text) is False


class TestDateConversion:
    """Tests for date text conversion."""

    def test_from_string(self) -> None:
        """Test parsing into aware datetimes."""
        dt = create("DATETIME")
        assert dt.from_string("1970-01-01T00:00:00.000Z") == EPOCH
        assert dt.from_string("2020-06-07T16:13:43+02:00") == datetime(
            2020, 6, 7, 14, 13, 43, tzinfo=timezone.utc
        )

    def test_from_string_naive_is_utc(self) -> None:
        """Test that text without an offset is read as UTC."""
        parsed = create("DATETIME").from_string("2020-06-07 14:13:43")
        assert parsed.tzinfo is not None
        assert parsed.utcoffset() == timedelta(0)

    def test_from_string_invalid(self) -> None:
        """Test strict and coercing conversion of non-date text."""
        dt = create("DATETIME")
        with pytest.raises(DateTypeError, match="not a valid date representation"):
            dt.from_string("yesterday")
        assert dt.from_string("yesterday", coerce=True) is None

    def test_to_string_epoch(self) -> None:
        """Test the UTC millisecond rendering."""
        assert create("DATETIME").to_string(EPOCH) == "1970-01-01T00:00:00.000Z"

    def test_to_string_converts_to_utc(self) -> None:
        """Test that offsets are normalized to UTC."""
        value = datetime(2020, 1, 1, 2, 0, 0, 123456, tzinfo=timezone(timedelta(hours=2)))
        assert create("DATETIME").to_string(value) == "2020-01-01T00:00:00.123Z"

    def test_to_string_invalid(self) -> None:
        """Test that non-dates cannot be rendered."""
        with pytest.raises(DateTypeError):
            create("DATETIME").to_string("1970-01-01")

    def test_format_naive(self) -> None:
        """Test that naive datetimes are written as UTC."""
        assert format_instant(datetime(1986, 10, 16, 20, 0, 0)) == "1986-10-16T20:00:00.000Z"

    def test_make_valid(self) -> None:
        """Test that dates cannot be repaired."""
        assert create("DATETIME").make_valid("yesterday") is None


class TestDateDescriptor:
    """Tests for defaults, flags and serialized form."""

    def test_default_is_now(self) -> None:
        """Test that the default is the current instant."""
        before = datetime.now(timezone.utc)
        value = create("DATETIME").get_default()
        after = datetime.now(timezone.utc)
        assert before <= value <= after

    def test_properties(self) -> None:
        """Test that dates are comparable and searchable."""
        dt = create("DATETIME")
        assert dt.is_comparable() is True
        assert dt.is_searchable() is True
        assert dt.is_enumerable() is False
        assert dt.is_fragmentable() is False

    @pytest.mark.parametrize(
        ("name", "has_date", "has_time"),
        [("DATETIME", True, True), ("DATEONLY", True, False), ("TIMEONLY", False, True)],
    )
    def test_component_flags(self, name: str, has_date: bool, has_time: bool) -> None:
        """Test the date/time component flags of each variant."""
        dt = create(name)
        assert dt.has_date() is has_date
        assert dt.has_time() is has_time

    def test_flags_do_not_change_parsing(self) -> None:
        """Test that DATEONLY still parses full instants."""
        assert create("DATEONLY").from_string("2020-06-07T14:13:43Z").hour == 14

    def test_serialize(self) -> None:
        """Test serialized forms."""
        assert create("DATEONLY").serialize() == 'DATEONLY/DATEONLY/date {"date":true,"time":false}'
        assert date_type().serialize() == 'DateType/undefined/date {"date":true,"time":true}'
