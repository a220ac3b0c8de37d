"""Family behaviors for data types.

Each family (boolean, number, string, object, date) has one stateless
behavior object holding its validation and conversion rules.
"""

from __future__ import annotations

from typeone.families.base import FamilyBehavior
from typeone.families.boolean import BooleanBehavior
from typeone.families.date import DateBehavior
from typeone.families.number import NumberBehavior
from typeone.families.object import ObjectBehavior
from typeone.families.registry import FamilyRegistry, get_global_registry
from typeone.families.string import StringBehavior

__all__ = [
    # Base types
    "FamilyBehavior",
    "FamilyRegistry",
    "get_global_registry",
    # Behaviors
    "BooleanBehavior",
    "DateBehavior",
    "NumberBehavior",
    "ObjectBehavior",
    "StringBehavior",
]
