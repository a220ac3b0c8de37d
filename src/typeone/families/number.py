"""Number family.

Number types check that a value is a number within ``[min, max]``. The
integer refinement also requires the value to be integral and parses text
by truncation; the float refinement adds nothing beyond the base number
rules. Width-specific semantics (32/64-bit overflow and the like) are not
modeled: all numbers share one representation.

Numbers are comparable but not enumerable, searchable or fragmentable.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from typeone.errors import NumberTypeError
from typeone.families.base import FamilyBehavior
from typeone.kinds import Family, NumberParams, Refinement
from typeone.numeric import format_number, is_integral, parse_float, parse_int
from typeone.primitive import PrimitiveKind
from typeone.properties import TypeProperties

if TYPE_CHECKING:
    from typeone.data_type import DataType

logger = logging.getLogger(__name__)

_CLASS_NAMES = {
    Refinement.NONE: "NumberType",
    Refinement.FLOAT: "FloatType",
    Refinement.INTEGER: "IntegerType",
}


def _json_number(value: float) -> float | None:
    # Unbounded ends are written as null, integral floats without ".0".
    if not math.isfinite(value):
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class NumberBehavior(FamilyBehavior):
    """Rules for number types and their float/integer refinements."""

    family = Family.NUMBER
    primitive_kind = PrimitiveKind.NUMBER
    error_class = NumberTypeError
    params_class = NumberParams
    refinements = frozenset(Refinement)
    default_properties = TypeProperties(comparable=True)

    def class_name(self, data_type: DataType) -> str:
        return _CLASS_NAMES[data_type.refinement]

    def get_default(self, data_type: DataType) -> int:
        return 0

    def is_valid(self, data_type: DataType, value: Any) -> bool:
        if not super().is_valid(data_type, value):
            return False
        params: NumberParams = data_type.params
        if value < params.min or value > params.max:
            return False
        if _is_integer(data_type) and not is_integral(value):
            return False
        return True

    def assert_valid(self, data_type: DataType, value: Any) -> None:
        super().assert_valid(data_type, value)
        params: NumberParams = data_type.params
        if value < params.min or value > params.max:
            raise NumberTypeError(
                f"Value {format_number(value)} out of range "
                f"({format_number(params.min)}, {format_number(params.max)})"
            )
        if _is_integer(data_type) and not is_integral(value):
            raise NumberTypeError(f"Value {format_number(value)} not a valid integer")

    def is_valid_string(self, data_type: DataType, text: str) -> bool:
        """Check that text is exactly a number's textual form and the number is valid.

        Partial numbers such as ``"2a"`` are rejected.
        """
        parsed = parse_float(text)
        if format_number(parsed) != text:
            return False
        return self.is_valid(data_type, parsed)

    def make_valid(self, data_type: DataType, value: Any) -> int | float:
        """Parse value as a number and clamp it into range.

        Integer types truncate toward zero before clamping. Values with no
        numeric reading come back as NaN.
        """
        params: NumberParams = data_type.params
        number = parse_int(value) if _is_integer(data_type) else parse_float(value)
        if number < params.min:
            number = params.min
        if number > params.max:
            number = params.max
        return number

    def from_string(self, data_type: DataType, text: str, coerce: bool) -> int | float:
        number = parse_int(text) if _is_integer(data_type) else parse_float(text)
        if isinstance(number, float) and math.isnan(number):
            if coerce:
                return self.make_valid(data_type, text)
            logger.debug("Rejected unparseable number text %r", text)
            raise NumberTypeError(f"Value {text!r} not a valid number representation")
        return self._checked(data_type, number, coerce)

    def to_string(self, data_type: DataType, value: Any) -> str:
        self.assert_valid(data_type, value)
        return format_number(value)

    def params_json(self, data_type: DataType) -> dict[str, Any]:
        params: NumberParams = data_type.params
        return {
            "min": _json_number(params.min),
            "max": _json_number(params.max),
            "mul": _json_number(params.mul),
        }


def _is_integer(data_type: DataType) -> bool:
    return data_type.refinement is Refinement.INTEGER
