"""The DataType contract.

A DataType describes the values of one field: it validates them, produces a
default, converts them to and from text and repairs invalid ones. Types are
plain records (family, refinement, optional variant name, parameters,
behavioral properties); the rules are supplied by the behavior registered
for the family, so there is no subclass per variant.

Serialized form::

    <ClassName>/<VariantName or undefined>/<type tag>[ <JSON parameters>]

e.g. ``INTEGER/INTEGER/number {"min":-10,"max":10,"mul":1}``. The class
name is the variant name for named variants and the family class name
(``NumberType``, ``IntegerType``, ...) otherwise.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from typing import Any

from typeone.families.registry import get_global_registry
from typeone.kinds import DateParams, Family, NumberParams, Refinement, StringParams, TypeParams
from typeone.numeric import is_number
from typeone.primitive import Primitive
from typeone.properties import TypeProperties


class DataType:
    """Description of a semantic data type.

    Instances are immutable apart from their properties, which a consumer
    may adapt to its own scope with apply_properties before sharing the
    type.

    Attributes:
        family: Type family, or None for a type bound to no primitive.
        refinement: Number refinement (float/integer); NONE elsewhere.
        name: Variant name (e.g., "INTEGER"), None for family-level types.
        params: Family parameter record (range, length or date flags).
        primitive: Primitive the type validates against, or None.
        properties: Behavioral flags.
    """

    def __init__(
        self,
        family: Family | None = None,
        refinement: Refinement = Refinement.NONE,
        *,
        name: str | None = None,
        params: TypeParams = None,
        default_factory: Callable[[], Any] | None = None,
    ) -> None:
        """Create a data type.

        Args:
            family: Family whose rules apply.
            refinement: Number refinement; must be NONE for other families.
            name: Variant name used in serialized form.
            params: Parameter record; the family default when omitted.
            default_factory: Producer of default values, replacing the
                family default (used by UUID).

        Raises:
            ValueError: If refinement or params do not fit the family.
        """
        behavior = get_global_registry().get_behavior(family)
        if params is None:
            params = behavior.default_params()
        behavior.check_shape(refinement, params)

        self._behavior = behavior
        self._default_factory = default_factory
        self.family = family
        self.refinement = refinement
        self.name = name
        self.params = params
        self.primitive: Primitive | None = behavior.primitive()
        self.properties: TypeProperties = behavior.default_properties

    def __repr__(self) -> str:
        return f"<DataType {self.serialize()}>"

    @property
    def type(self) -> str | None:
        """Type tag ("boolean", "number", ...), None when no family is bound."""
        return self.family.value if self.family is not None else None

    # -------------------------------------------------------------------------
    # Behavioral properties
    # -------------------------------------------------------------------------

    def apply_properties(
        self, properties: Mapping[str, Any] | None = None, **overrides: Any
    ) -> None:
        """Overwrite the named properties, leaving the others untouched.

        Args:
            properties: Mapping of property name to value.
            **overrides: Further property values, applied after the mapping.

        Raises:
            ValueError: If a name is not a property field.
        """
        merged = {**(properties or {}), **overrides}
        self.properties = self.properties.with_overrides(merged)

    def is_enumerable(self) -> bool:
        return self.properties.enumerable

    def is_comparable(self) -> bool:
        return self.properties.comparable

    def is_searchable(self) -> bool:
        return self.properties.searchable

    def is_fragmentable(self) -> bool:
        return self.properties.fragmentable

    def has_absent_value(self) -> bool:
        return self.properties.absent_value is not None

    def is_absent(self, value: Any) -> bool:
        """Check that value equals the absent value, if one is defined."""
        absent = self.properties.absent_value
        if absent is None:
            return False
        if is_number(absent) and is_number(value):
            return absent == value
        return type(absent) is type(value) and absent == value

    # -------------------------------------------------------------------------
    # Parameters
    # -------------------------------------------------------------------------

    def get_primitive(self) -> Primitive | None:
        return self.primitive

    @property
    def min(self) -> float:
        return self._params_of(NumberParams).min

    @property
    def max(self) -> float:
        return self._params_of(NumberParams).max

    @property
    def mul(self) -> float:
        return self._params_of(NumberParams).mul

    @property
    def max_len(self) -> int:
        return self._params_of(StringParams).max_len

    @property
    def encoding(self) -> str | None:
        return self._params_of(StringParams).encoding

    def has_date(self) -> bool:
        return self._params_of(DateParams).date

    def has_time(self) -> bool:
        return self._params_of(DateParams).time

    def _params_of(self, params_class: type) -> Any:
        if not isinstance(self.params, params_class):
            raise AttributeError(f"{self.serialize()} has no {params_class.__name__}")
        return self.params

    # -------------------------------------------------------------------------
    # Value contract
    # -------------------------------------------------------------------------

    def get_default(self) -> Any:
        """Return the default value for this type."""
        if self._default_factory is not None:
            return self._default_factory()
        return self._behavior.get_default(self)

    def is_valid(self, value: Any) -> bool:
        """Check that value is valid for this type. Never raises."""
        return self._behavior.is_valid(self, value)

    def assert_valid(self, value: Any) -> None:
        """Raise the family's DataTypeError if value is not valid."""
        self._behavior.assert_valid(self, value)

    def is_valid_string(self, text: str) -> bool | None:
        """Check that text represents a valid value.

        Returns None for a type bound to no family.
        """
        return self._behavior.is_valid_string(self, text)

    def make_valid(self, value: Any) -> Any:
        """Return a best-effort valid value derived from value.

        Numbers are clamped into range and strings truncated; None is
        returned where no sensible repair exists (objects, dates).
        """
        return self._behavior.make_valid(self, value)

    def from_string(self, text: str, coerce: bool = False) -> Any:
        """Convert text to a value of this type.

        Args:
            text: Textual representation, e.g. "100".
            coerce: Return the make_valid result instead of raising when the
                text or the value it holds is invalid.

        Raises:
            DataTypeError: If the text is invalid and coerce is False.
        """
        return self._behavior.from_string(self, text, coerce)

    def to_string(self, value: Any) -> str | None:
        """Convert a valid value to text, e.g. 100 -> "100".

        Raises:
            DataTypeError: If the value is not valid.
        """
        return self._behavior.to_string(self, value)

    def serialize(self) -> str:
        """Return the declarative descriptor of this type."""
        class_name = self.name or self._behavior.class_name(self)
        name = self.name or "undefined"
        tag = self.type or "null"
        descriptor = f"{class_name}/{name}/{tag}"
        extra = self._behavior.params_json(self)
        if extra is not None:
            descriptor += " " + json.dumps(extra, separators=(",", ":"))
        return descriptor
