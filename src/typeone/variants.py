"""Catalog of named type variants.

Named variants are the leaf types schema consumers refer to by name
(INTEGER, UUID, DATEONLY, ...). Variants of one family differ only in name
and default parameters; the four float and the four integer variants
validate identically and exist as descriptive tags.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from typeone.families.string import (
    BASE_LEN,
    BLOB_LEN,
    CIDR_LEN,
    INET_LEN,
    MACA_LEN,
    TEXT_LEN,
    TINY_LEN,
    UUID_LEN,
)
from typeone.kinds import Family, Refinement


def new_uuid() -> str:
    """Return a random version 4 UUID in canonical text form."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class VariantSpec:
    """Defaults of a named variant.

    Attributes:
        family: Family of the variant.
        refinement: Number refinement, NONE for other families.
        takes_bound: Accepts a symmetric ``max_value`` bound (numbers).
        max_len: Default maximum length (strings).
        takes_length: Accepts a custom ``max_len`` (strings).
        date: Calendar date component flag (dates).
        time: Time-of-day component flag (dates).
        default_factory: Producer of default values replacing the family's.
        description: One-line summary for listings.
    """

    family: Family
    refinement: Refinement = Refinement.NONE
    takes_bound: bool = False
    max_len: int | None = None
    takes_length: bool = False
    date: bool = True
    time: bool = True
    default_factory: Callable[[], Any] | None = None
    description: str = ""


class Variant(str, Enum):
    """Named leaf variants; the value is the name used in serialized form."""

    BOOLEAN = "BOOLEAN"

    FLOAT = "FLOAT"
    REAL = "REAL"
    DOUBLE = "DOUBLE"
    DECIMAL = "DECIMAL"

    INTEGER = "INTEGER"
    BIGINT = "BIGINT"
    SMALLINT = "SMALLINT"
    TINYINT = "TINYINT"

    STRING = "STRING"
    BINARY = "BINARY"
    TEXT = "TEXT"
    TINYTEXT = "TINYTEXT"
    CITEXT = "CITEXT"
    BLOB = "BLOB"
    TINYBLOB = "TINYBLOB"
    UUID = "UUID"
    CIDR = "CIDR"
    INET = "INET"
    MACADDR = "MACADDR"

    OBJECT = "OBJECT"

    DATETIME = "DATETIME"
    DATEONLY = "DATEONLY"
    TIMEONLY = "TIMEONLY"

    @property
    def spec(self) -> VariantSpec:
        return _SPECS[self]


def _float(description: str) -> VariantSpec:
    return VariantSpec(Family.NUMBER, Refinement.FLOAT, takes_bound=True, description=description)


def _integer(description: str) -> VariantSpec:
    return VariantSpec(Family.NUMBER, Refinement.INTEGER, takes_bound=True, description=description)


def _string(max_len: int, description: str, **kwargs: Any) -> VariantSpec:
    return VariantSpec(Family.STRING, max_len=max_len, description=description, **kwargs)


_SPECS: dict[Variant, VariantSpec] = {
    Variant.BOOLEAN: VariantSpec(Family.BOOLEAN, description="True/false value"),
    Variant.FLOAT: _float("Floating point number"),
    Variant.REAL: _float("Real number"),
    Variant.DOUBLE: _float("Double precision number"),
    Variant.DECIMAL: _float("Decimal number"),
    Variant.INTEGER: _integer("Integer"),
    Variant.BIGINT: _integer("Big integer"),
    Variant.SMALLINT: _integer("Small integer"),
    Variant.TINYINT: _integer("Tiny integer"),
    Variant.STRING: _string(BASE_LEN, "Short string", takes_length=True),
    Variant.BINARY: _string(BASE_LEN, "Short binary string", takes_length=True),
    Variant.TEXT: _string(TEXT_LEN, "Long text"),
    Variant.TINYTEXT: _string(TINY_LEN, "Tiny text"),
    Variant.CITEXT: _string(TEXT_LEN, "Case-insensitive text"),
    Variant.BLOB: _string(BLOB_LEN, "Binary large object"),
    Variant.TINYBLOB: _string(TINY_LEN, "Tiny binary object"),
    Variant.UUID: _string(UUID_LEN, "UUID", default_factory=new_uuid),
    Variant.CIDR: _string(CIDR_LEN, "Network address block"),
    Variant.INET: _string(INET_LEN, "Network host address"),
    Variant.MACADDR: _string(MACA_LEN, "MAC address"),
    Variant.OBJECT: VariantSpec(Family.OBJECT, description="Structured (JSON) data"),
    Variant.DATETIME: VariantSpec(Family.DATE, description="Date and time of day"),
    Variant.DATEONLY: VariantSpec(Family.DATE, time=False, description="Calendar date"),
    Variant.TIMEONLY: VariantSpec(Family.DATE, date=False, description="Time of day"),
}


def find_variant(name: str | Variant) -> Variant:
    """Resolve a variant by name, case-insensitively.

    Args:
        name: Variant name (e.g., "integer") or Variant.

    Returns:
        The matching Variant.

    Raises:
        ValueError: If no variant has that name.
    """
    if isinstance(name, Variant):
        return name
    try:
        return Variant(name.strip().upper())
    except ValueError:
        known = ", ".join(v.value for v in Variant)
        raise ValueError(f"Unknown type variant: {name!r} (known: {known})") from None
