"""Behavioral properties attached to every data type.

The flags describe how a host application may use values of a type; they do
not change validation:

- enumerable: values come from a limited set (e.g., color names)
- comparable: values sit on a linear scale (numbers, dates)
- searchable: values may be folded into a free-text description of an item
- fragmentable: values support operators such as "begins with" or "contains"
- absent_value: a scope-specific value meaning "no value" (e.g., "white" for a
  color); None means no absent value is defined
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any


@dataclass(frozen=True)
class TypeProperties:
    """Behavioral flags of a data type.

    Attributes:
        enumerable: Values come from a limited set.
        comparable: Values can be ordered.
        searchable: Values are part of an item's searchable description.
        fragmentable: Values support substring operators.
        absent_value: Value that marks a field as absent, or None.
    """

    enumerable: bool = False
    comparable: bool = False
    searchable: bool = False
    fragmentable: bool = False
    absent_value: Any = None

    def with_overrides(self, overrides: Mapping[str, Any]) -> TypeProperties:
        """Return a copy with the named fields replaced.

        Fields not present in overrides keep their current value. Values are
        not checked.

        Args:
            overrides: Mapping of field name to new value.

        Returns:
            A new TypeProperties instance.

        Raises:
            ValueError: If overrides names a field that does not exist.
        """
        unknown = sorted(set(overrides) - property_names())
        if unknown:
            raise ValueError(f"Unknown type properties: {', '.join(unknown)}")
        return replace(self, **overrides)


def property_names() -> set[str]:
    """Get the set of valid property field names."""
    return {f.name for f in fields(TypeProperties)}
