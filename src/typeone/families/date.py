"""Date/time family.

Date types hold ``datetime`` instants. Text is read as ISO-8601 and written
as a UTC instant with millisecond precision (``1970-01-01T00:00:00.000Z``).
The date/time component flags describe which parts are meaningful to the
consumer; parsing and validation always work on the full instant.

Dates are comparable and searchable but not enumerable or fragmentable.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from typeone.errors import DateTypeError
from typeone.families.base import FamilyBehavior
from typeone.kinds import DateParams, Family
from typeone.primitive import PrimitiveKind, parse_datetime
from typeone.properties import TypeProperties

if TYPE_CHECKING:
    from typeone.data_type import DataType


def format_instant(value: datetime) -> str:
    """Format a datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC.

    Naive datetimes are taken to be in UTC already.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"


class DateBehavior(FamilyBehavior):
    """Rules for date/time types."""

    family = Family.DATE
    primitive_kind = PrimitiveKind.DATE
    error_class = DateTypeError
    params_class = DateParams
    default_properties = TypeProperties(comparable=True, searchable=True)

    def class_name(self, data_type: DataType) -> str:
        return "DateType"

    def get_default(self, data_type: DataType) -> datetime:
        """Return the current instant, read at call time."""
        return datetime.now(timezone.utc)

    def is_valid_string(self, data_type: DataType, text: str) -> bool:
        try:
            parse_datetime(text)
        except (TypeError, ValueError):
            return False
        return True

    def make_valid(self, data_type: DataType, value: Any) -> None:
        return None

    def from_string(self, data_type: DataType, text: str, coerce: bool) -> datetime | None:
        try:
            return parse_datetime(text)
        except (TypeError, ValueError, AttributeError) as e:
            if coerce:
                return self.make_valid(data_type, text)
            raise DateTypeError(f"Value {text!r} not a valid date representation") from e

    def to_string(self, data_type: DataType, value: Any) -> str:
        self.assert_valid(data_type, value)
        return format_instant(value)

    def params_json(self, data_type: DataType) -> dict[str, Any]:
        params: DateParams = data_type.params
        return {"date": params.date, "time": params.time}
