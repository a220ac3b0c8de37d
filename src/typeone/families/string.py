"""String family.

String types accept text up to a maximum length in characters. Strings are
self-representing, so the text checks are the value checks and conversion to
text only validates.

Strings are comparable, enumerable, searchable and fragmentable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from typeone.errors import StringTypeError
from typeone.families.base import FamilyBehavior
from typeone.kinds import Family, StringParams
from typeone.numeric import format_number, is_number
from typeone.primitive import PrimitiveKind
from typeone.properties import TypeProperties

if TYPE_CHECKING:
    from typeone.data_type import DataType

# Default maximum lengths, in characters
BASE_LEN = 255
TINY_LEN = 255
TEXT_LEN = 65535
BLOB_LEN = 65535
UUID_LEN = 128
CIDR_LEN = 128
INET_LEN = 128
MACA_LEN = 128


class StringBehavior(FamilyBehavior):
    """Rules for string types."""

    family = Family.STRING
    primitive_kind = PrimitiveKind.STRING
    error_class = StringTypeError
    params_class = StringParams
    default_properties = TypeProperties(
        enumerable=True,
        comparable=True,
        searchable=True,
        fragmentable=True,
    )

    def class_name(self, data_type: DataType) -> str:
        return "StringType"

    def get_default(self, data_type: DataType) -> str:
        return ""

    def is_valid(self, data_type: DataType, value: Any) -> bool:
        if not super().is_valid(data_type, value):
            return False
        return len(value) <= data_type.params.max_len

    def assert_valid(self, data_type: DataType, value: Any) -> None:
        super().assert_valid(data_type, value)
        max_len = data_type.params.max_len
        if len(value) > max_len:
            raise StringTypeError(f"String length {len(value)} out of range (max={max_len})")

    def is_valid_string(self, data_type: DataType, text: str) -> bool:
        return self.is_valid(data_type, text)

    def make_valid(self, data_type: DataType, value: Any) -> str:
        """Convert value to text and truncate it to the maximum length.

        None and booleans use their JSON spellings (``null``, ``true``) and
        numbers their usual textual form (``1.0`` -> ``"1"``).
        """
        if value is None:
            text = "null"
        elif isinstance(value, bool):
            text = "true" if value else "false"
        elif is_number(value):
            text = format_number(value)
        else:
            text = str(value)
        return text[: data_type.params.max_len]

    def from_string(self, data_type: DataType, text: str, coerce: bool) -> str:
        return self._checked(data_type, text, coerce)

    def to_string(self, data_type: DataType, value: Any) -> str:
        return self.from_string(data_type, value, False)

    def params_json(self, data_type: DataType) -> dict[str, Any]:
        params: StringParams = data_type.params
        result: dict[str, Any] = {"maxLen": params.max_len}
        if params.encoding is not None:
            result["encoding"] = params.encoding
        return result
