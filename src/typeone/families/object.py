"""Object family.

Object types hold structured data: dicts, lists or None. Text conversion
uses JSON. There is no generic way to repair a malformed value, so
make_valid always returns None.

Objects are enumerable but not comparable, searchable or fragmentable.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from typeone.errors import ObjectTypeError
from typeone.families.base import FamilyBehavior
from typeone.kinds import Family
from typeone.primitive import PrimitiveKind
from typeone.properties import TypeProperties

if TYPE_CHECKING:
    from typeone.data_type import DataType


class ObjectBehavior(FamilyBehavior):
    """Rules for object types."""

    family = Family.OBJECT
    primitive_kind = PrimitiveKind.OBJECT
    error_class = ObjectTypeError
    default_properties = TypeProperties(enumerable=True)

    def class_name(self, data_type: DataType) -> str:
        return "ObjectType"

    def get_default(self, data_type: DataType) -> dict[str, Any]:
        return {}

    def is_valid_string(self, data_type: DataType, text: str) -> bool:
        try:
            parsed = json.loads(text)
        except (TypeError, ValueError):
            return False
        return self.is_valid(data_type, parsed)

    def make_valid(self, data_type: DataType, value: Any) -> None:
        return None

    def from_string(self, data_type: DataType, text: str, coerce: bool) -> Any:
        try:
            parsed = json.loads(text)
        except (TypeError, ValueError):
            parsed = None
            valid = False
        else:
            valid = self.is_valid(data_type, parsed)
        if valid:
            return parsed
        if coerce:
            return self.make_valid(data_type, text)
        raise ObjectTypeError(f"Value {text!r} not a valid object representation")

    def to_string(self, data_type: DataType, value: Any) -> str:
        self.assert_valid(data_type, value)
        try:
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise ObjectTypeError(f"Value {value!r} has no JSON representation: {e}") from e
