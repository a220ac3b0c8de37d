"""Number parsing and formatting helpers.

All numbers share one representation (``int`` or ``float``). Text is parsed
by its longest leading numeric prefix, and numbers are rendered without a
trailing ``.0`` so that ``"10"`` survives a parse/format round trip while
``"10.0"`` or ``"2a"`` do not.
"""

from __future__ import annotations

import math
import re
from typing import Any

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def is_number(value: Any) -> bool:
    """Return True for ``int`` and ``float`` values, excluding ``bool``."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integral(value: Any) -> bool:
    """Return True if value is a finite number equal to its truncation toward zero."""
    if not is_number(value):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value) and value == math.trunc(value)


def parse_float(value: Any) -> int | float:
    """Parse the leading numeric prefix of value.

    Numbers are returned unchanged. Text without a numeric prefix, and any
    other kind of value, yields NaN.
    """
    if is_number(value):
        return value
    if not isinstance(value, str):
        return math.nan
    match = _FLOAT_PREFIX.match(value)
    if match is None:
        return math.nan
    return float(match.group(1))


def parse_int(value: Any) -> int | float:
    """Parse value as an integer, truncating toward zero.

    Returns NaN when no integer can be read (non-numeric text, NaN, infinity).
    """
    if is_number(value):
        if isinstance(value, int):
            return value
        if not math.isfinite(value):
            return math.nan
        return math.trunc(value)
    if not isinstance(value, str):
        return math.nan
    match = _INT_PREFIX.match(value)
    if match is None:
        return math.nan
    return int(match.group(1))


def format_number(value: int | float) -> str:
    """Render a number as text.

    Integral floats print without a fractional part, infinities print as
    ``Infinity``/``-Infinity``. Magnitudes in ``[1e-6, 1e21)`` print
    positionally (``0.00001``); others use an exponent without zero padding
    (``1e-7`` rather than ``1e-07``).
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    mantissa, sep, exponent = text.partition("e")
    if not sep:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return _positional(mantissa, int(exponent))
    return f"{mantissa}e{int(exponent):+d}"


def _positional(mantissa: str, exponent: int) -> str:
    # Shift the decimal point of the shortest round-trip digits by exponent.
    sign = "-" if mantissa.startswith("-") else ""
    whole, _, fraction = mantissa.lstrip("-").partition(".")
    digits = whole + fraction
    point = len(whole) + exponent
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{sign}{digits}{'0' * (point - len(digits))}"
    return f"{sign}{digits[:point]}.{digits[point:]}"
