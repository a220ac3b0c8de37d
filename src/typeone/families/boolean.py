"""Boolean family.

Text conversion recognizes these tokens, case-insensitively:

- true-ish: 1, t, true, yes
- false-ish: 0, f, false, no

Booleans are enumerable but not comparable, searchable or fragmentable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from typeone.errors import BooleanTypeError
from typeone.families.base import FamilyBehavior
from typeone.kinds import Family
from typeone.primitive import BOOLEAN_TOKENS, FALSE_TOKENS, TRUE_TOKENS, PrimitiveKind
from typeone.properties import TypeProperties

if TYPE_CHECKING:
    from typeone.data_type import DataType


class BooleanBehavior(FamilyBehavior):
    """Rules for boolean types."""

    family = Family.BOOLEAN
    primitive_kind = PrimitiveKind.BOOLEAN
    error_class = BooleanTypeError
    default_properties = TypeProperties(enumerable=True)

    def class_name(self, data_type: DataType) -> str:
        return "BooleanType"

    def get_default(self, data_type: DataType) -> bool:
        return False

    def is_valid_string(self, data_type: DataType, text: str) -> bool:
        return text.lower() in BOOLEAN_TOKENS

    def make_valid(self, data_type: DataType, value: Any) -> bool:
        """Turn any value into a boolean by truthiness (0 -> False, 1 -> True)."""
        return bool(value)

    def from_string(self, data_type: DataType, text: str, coerce: bool) -> bool:
        token = text.lower()
        if token in FALSE_TOKENS:
            return False
        if token in TRUE_TOKENS:
            return True
        if coerce:
            return False
        raise BooleanTypeError(f"Value {text!r} not a valid boolean representation")

    def to_string(self, data_type: DataType, value: Any) -> str:
        self.assert_valid(data_type, value)
        return "true" if value else "false"
