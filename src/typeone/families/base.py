"""Base behavior shared by every type family.

A FamilyBehavior is a stateless object holding the validation and conversion
rules of one family. DataType instances carry their own configuration and
delegate every contract method to the behavior registered for their family.
The base class implements the bare contract used by types bound to no family.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from typeone.errors import DataTypeError
from typeone.kinds import Family, Refinement
from typeone.primitive import Primitive, PrimitiveKind, get_primitive
from typeone.properties import TypeProperties

if TYPE_CHECKING:
    from typeone.data_type import DataType

logger = logging.getLogger(__name__)


class FamilyBehavior:
    """Validation and conversion rules of a type family.

    Subclasses set the class attributes and override the contract methods
    they refine, calling through to this class for the primitive check.

    Attributes:
        family: Family handled by this behavior (None for the bare contract).
        primitive_kind: Primitive the family is built on.
        error_class: Error raised when a value is rejected.
        params_class: Parameter record type accepted by the family, if any.
        refinements: Refinements the family accepts.
        default_properties: Behavioral flags of a freshly created type.
    """

    family: ClassVar[Family | None] = None
    primitive_kind: ClassVar[PrimitiveKind | None] = None
    error_class: ClassVar[type[DataTypeError]] = DataTypeError
    params_class: ClassVar[type | None] = None
    refinements: ClassVar[frozenset[Refinement]] = frozenset({Refinement.NONE})
    default_properties: ClassVar[TypeProperties] = TypeProperties()

    def primitive(self) -> Primitive | None:
        """Return the primitive bound to types of this family."""
        if self.primitive_kind is None:
            return None
        return get_primitive(self.primitive_kind)

    def default_params(self) -> Any:
        """Return the parameter record used when none is supplied."""
        if self.params_class is None:
            return None
        return self.params_class()

    def check_shape(self, refinement: Refinement, params: Any) -> None:
        """Reject a refinement or parameter record foreign to this family.

        Raises:
            ValueError: If the refinement or parameters do not belong here.
        """
        if refinement not in self.refinements:
            raise ValueError(f"Refinement {refinement.value!r} is not valid for {self.family_label()}")
        if self.params_class is None:
            if params is not None:
                raise ValueError(f"{self.family_label()} takes no parameters")
        elif not isinstance(params, self.params_class):
            raise ValueError(
                f"{self.family_label()} expects {self.params_class.__name__}, "
                f"got {type(params).__name__}"
            )

    def family_label(self) -> str:
        return self.family.value if self.family is not None else "untyped"

    def class_name(self, data_type: DataType) -> str:
        """Name of the family class used in serialized form."""
        return "DataType"

    def get_default(self, data_type: DataType) -> Any:
        return None

    def is_valid(self, data_type: DataType, value: Any) -> bool:
        primitive = data_type.primitive
        if primitive is None:
            return False
        return primitive.is_valid(value)

    def assert_valid(self, data_type: DataType, value: Any) -> None:
        primitive = data_type.primitive
        if primitive is not None and not primitive.is_valid(value):
            raise self.error_class(f"{primitive.name} primitive assertion failed for value {value!r}")

    def is_valid_string(self, data_type: DataType, text: str) -> bool | None:
        return None

    def make_valid(self, data_type: DataType, value: Any) -> Any:
        return None

    def from_string(self, data_type: DataType, text: str, coerce: bool) -> Any:
        return None

    def to_string(self, data_type: DataType, value: Any) -> str | None:
        return None

    def params_json(self, data_type: DataType) -> dict[str, Any] | None:
        """Extra parameters appended to the serialized form, if any."""
        return None

    def _checked(self, data_type: DataType, value: Any, coerce: bool) -> Any:
        """Return value if it passes assert_valid, otherwise repair or re-raise.

        With coerce the make_valid result is returned instead of raising.
        """
        try:
            self.assert_valid(data_type, value)
        except DataTypeError as e:
            if not coerce:
                logger.debug("Rejected %r for %s: %s", value, data_type.serialize(), e)
                raise
            repaired = self.make_valid(data_type, value)
            logger.debug("Coerced %r to %r for %s", value, repaired, data_type.serialize())
            return repaired
        return value
