"""Error types raised by failed value checks.

Every family has its own error class so callers can tell which kind of type
rejected a value; all of them derive from DataTypeError and carry only a
message.
"""

from __future__ import annotations


class DataTypeError(Exception):
    """Raised when a value does not satisfy a data type."""


class BooleanTypeError(DataTypeError):
    """Raised when a value is not a valid boolean."""


class NumberTypeError(DataTypeError):
    """Raised for non-numbers, out-of-range numbers and non-integral integers."""


class StringTypeError(DataTypeError):
    """Raised for non-strings and strings longer than the type allows."""


class ObjectTypeError(DataTypeError):
    """Raised for values or text that are not structured (JSON) data."""


class DateTypeError(DataTypeError):
    """Raised for values or text that are not date-time instants."""
