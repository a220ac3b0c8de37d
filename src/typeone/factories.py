"""Constructors for data types.

``create`` builds a named variant from the catalog; the ``*_type`` helpers
build unnamed family-level types with explicit parameters.
"""

from __future__ import annotations

import math

from typeone.data_type import DataType
from typeone.kinds import DateParams, Family, NumberParams, Refinement, StringParams
from typeone.variants import Variant, find_variant


def create(
    variant: Variant | str,
    *,
    max_value: float | None = None,
    max_len: int | None = None,
) -> DataType:
    """Create a named variant.

    Args:
        variant: Variant or its name (case-insensitive).
        max_value: Symmetric bound for number variants; the range becomes
            ``[-max_value, max_value]``. Unbounded when omitted.
        max_len: Maximum length for STRING and BINARY; other string variants
            have a fixed length.

    Returns:
        A new DataType named after the variant.

    Raises:
        ValueError: If the variant is unknown or does not take the given
            parameter.
    """
    variant = find_variant(variant)
    spec = variant.spec

    if max_value is not None and not spec.takes_bound:
        raise ValueError(f"{variant.value} does not take a max_value bound")
    if max_len is not None and not spec.takes_length:
        raise ValueError(f"{variant.value} does not take a max_len")

    params: NumberParams | StringParams | DateParams | None = None
    if spec.family is Family.NUMBER:
        params = NumberParams() if max_value is None else NumberParams(-max_value, max_value)
    elif spec.family is Family.STRING:
        length = max_len if max_len is not None else spec.max_len
        params = StringParams(length)
    elif spec.family is Family.DATE:
        params = DateParams(spec.date, spec.time)

    return DataType(
        spec.family,
        spec.refinement,
        name=variant.value,
        params=params,
        default_factory=spec.default_factory,
    )


def _number_params(
    min_value: float | None, max_value: float | None, mul: float | None
) -> NumberParams:
    return NumberParams(
        min=-math.inf if min_value is None else min_value,
        max=math.inf if max_value is None else max_value,
        mul=1 if mul is None else mul,
    )


def boolean_type() -> DataType:
    return DataType(Family.BOOLEAN)


def number_type(
    min_value: float | None = None,
    max_value: float | None = None,
    mul: float | None = None,
) -> DataType:
    """Create a number type accepting ``[min_value, max_value]``.

    Omitted bounds are unbounded; ``mul`` (step) is stored but not enforced.
    """
    return DataType(Family.NUMBER, params=_number_params(min_value, max_value, mul))


def float_type(
    min_value: float | None = None,
    max_value: float | None = None,
    mul: float | None = None,
) -> DataType:
    return DataType(
        Family.NUMBER, Refinement.FLOAT, params=_number_params(min_value, max_value, mul)
    )


def integer_type(
    min_value: float | None = None,
    max_value: float | None = None,
    mul: float | None = None,
) -> DataType:
    """Create an integer type accepting integral values in ``[min_value, max_value]``."""
    return DataType(
        Family.NUMBER, Refinement.INTEGER, params=_number_params(min_value, max_value, mul)
    )


def string_type(max_len: int | None = None, encoding: str | None = None) -> DataType:
    """Create a string type of at most max_len characters (default 255)."""
    params = StringParams(encoding=encoding) if max_len is None else StringParams(max_len, encoding)
    return DataType(Family.STRING, params=params)


def object_type() -> DataType:
    return DataType(Family.OBJECT)


def date_type(date: bool = True, time: bool = True) -> DataType:
    """Create a date type; the flags describe which components are meaningful."""
    return DataType(Family.DATE, params=DateParams(date, time))
