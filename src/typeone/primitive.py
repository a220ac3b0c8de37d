"""Primitive value validators.

A primitive is the lowest-level check a type relies on: it knows which kind
of Python value it accepts and how to turn text into such a value without
any further validation. There are exactly five primitives, built once at
import time and shared by every type of the matching family.

Each primitive provides:

- from_string: unchecked conversion of text to a value (``"1"`` -> ``1.0``)
- is_valid: whether a value is of the primitive kind (``"1"`` is not a number)
- is_valid_string: whether text represents a value of the primitive kind
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any

from typeone.numeric import is_number, parse_float

TRUE_TOKENS = frozenset({"1", "t", "true", "yes"})
FALSE_TOKENS = frozenset({"0", "f", "false", "no"})
BOOLEAN_TOKENS = TRUE_TOKENS | FALSE_TOKENS


class PrimitiveKind(str, Enum):
    """The five value kinds every type is built on."""

    BOOLEAN = "BOOLEAN"
    NUMBER = "NUMBER"
    STRING = "STRING"
    OBJECT = "OBJECT"
    DATE = "DATE"


@dataclass(frozen=True)
class Primitive:
    """An immutable validator for one primitive value kind.

    Attributes:
        name: Kind tag (e.g., "NUMBER").
        from_string: Unchecked conversion from text to a value.
        is_valid: Check that a value is of this kind.
        is_valid_string: Check that text represents a value of this kind.
    """

    name: str
    from_string: Callable[[str], Any]
    is_valid: Callable[[Any], bool]
    is_valid_string: Callable[[str], bool]


def parse_datetime(text: str) -> datetime:
    """Parse ISO-8601 text into an aware datetime.

    A trailing ``Z`` is accepted and naive results are taken as UTC.

    Raises:
        ValueError: If the text is not an ISO-8601 date or date-time.
    """
    parsed = datetime.fromisoformat(text.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _accept_any(text: str) -> bool:
    return True


_REGISTRY: Mapping[PrimitiveKind, Primitive] = MappingProxyType(
    {
        PrimitiveKind.BOOLEAN: Primitive(
            name=PrimitiveKind.BOOLEAN.value,
            from_string=lambda text: text.lower() in TRUE_TOKENS,
            is_valid=lambda value: isinstance(value, bool),
            is_valid_string=lambda text: text.lower() in BOOLEAN_TOKENS,
        ),
        PrimitiveKind.NUMBER: Primitive(
            name=PrimitiveKind.NUMBER.value,
            from_string=parse_float,
            is_valid=is_number,
            # Family-level number types perform the real check.
            is_valid_string=_accept_any,
        ),
        PrimitiveKind.STRING: Primitive(
            name=PrimitiveKind.STRING.value,
            from_string=lambda text: text,
            is_valid=lambda value: isinstance(value, str),
            is_valid_string=_accept_any,
        ),
        PrimitiveKind.OBJECT: Primitive(
            name=PrimitiveKind.OBJECT.value,
            from_string=json.loads,
            # None counts as a structured value.
            is_valid=lambda value: value is None or isinstance(value, (dict, list)),
            is_valid_string=_accept_any,
        ),
        PrimitiveKind.DATE: Primitive(
            name=PrimitiveKind.DATE.value,
            from_string=parse_datetime,
            is_valid=lambda value: isinstance(value, datetime),
            is_valid_string=_accept_any,
        ),
    }
)


def get_primitive(kind: PrimitiveKind | str) -> Primitive:
    """Look up a primitive by kind.

    Args:
        kind: A PrimitiveKind or its name (e.g., "NUMBER").

    Returns:
        The shared Primitive for that kind.

    Raises:
        ValueError: If the name does not match a primitive kind.
    """
    return _REGISTRY[PrimitiveKind(kind)]


def all_primitives() -> Mapping[PrimitiveKind, Primitive]:
    """Return the read-only primitive registry."""
    return _REGISTRY


BOOLEAN = _REGISTRY[PrimitiveKind.BOOLEAN]
NUMBER = _REGISTRY[PrimitiveKind.NUMBER]
STRING = _REGISTRY[PrimitiveKind.STRING]
OBJECT = _REGISTRY[PrimitiveKind.OBJECT]
DATE = _REGISTRY[PrimitiveKind.DATE]
