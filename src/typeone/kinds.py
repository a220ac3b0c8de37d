"""Discriminants and parameter records shared by every data type.

A data type is identified by its family (which primitive it is built on and
which behavior applies) and, for numbers, a refinement. Shape-defining
parameters live in small immutable records, one kind per family.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Family(str, Enum):
    """Type families; the value is the type tag used in serialized form."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    DATE = "date"


class Refinement(str, Enum):
    """Sub-family of a number type."""

    NONE = "none"
    FLOAT = "float"
    INTEGER = "integer"


@dataclass(frozen=True)
class NumberParams:
    """Range of a number type.

    Attributes:
        min: Lowest accepted value (default: unbounded).
        max: Highest accepted value (default: unbounded).
        mul: Step value. Stored only; no operation enforces it.
    """

    min: float = -math.inf
    max: float = math.inf
    mul: float = 1

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")


@dataclass(frozen=True)
class StringParams:
    """Length and encoding of a string type.

    Attributes:
        max_len: Maximum length in characters.
        encoding: Encoding tag; None means the default text encoding. The tag
            is informational and does not change validation.
    """

    max_len: int = 255
    encoding: str | None = None

    def __post_init__(self) -> None:
        if self.max_len < 0:
            raise ValueError(f"max_len must be non-negative, got {self.max_len}")


@dataclass(frozen=True)
class DateParams:
    """Which components a date type describes.

    The flags are descriptive; values are always full instants.

    Attributes:
        date: The calendar date is meaningful.
        time: The time of day is meaningful.
    """

    date: bool = True
    time: bool = True


TypeParams = NumberParams | StringParams | DateParams | None
