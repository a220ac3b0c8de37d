"""typeone: semantic data types that validate, convert and repair values.

Types are built from five primitives (boolean, number, string, object,
date) and carry behavioral flags that host applications use to decide how
fields may be filtered, sorted or displayed.
"""

from __future__ import annotations

from typeone.data_type import DataType
from typeone.errors import (
    BooleanTypeError,
    DataTypeError,
    DateTypeError,
    NumberTypeError,
    ObjectTypeError,
    StringTypeError,
)
from typeone.factories import (
    boolean_type,
    create,
    date_type,
    float_type,
    integer_type,
    number_type,
    object_type,
    string_type,
)
from typeone.kinds import DateParams, Family, NumberParams, Refinement, StringParams
from typeone.primitive import Primitive, PrimitiveKind, get_primitive
from typeone.properties import TypeProperties
from typeone.variants import Variant, find_variant

__version__ = "0.1.0"

__all__ = [
    # Contract
    "DataType",
    "TypeProperties",
    "Family",
    "Refinement",
    "NumberParams",
    "StringParams",
    "DateParams",
    # Primitives
    "Primitive",
    "PrimitiveKind",
    "get_primitive",
    # Errors
    "DataTypeError",
    "BooleanTypeError",
    "NumberTypeError",
    "StringTypeError",
    "ObjectTypeError",
    "DateTypeError",
    # Constructors
    "Variant",
    "create",
    "find_variant",
    "boolean_type",
    "number_type",
    "float_type",
    "integer_type",
    "string_type",
    "object_type",
    "date_type",
]
