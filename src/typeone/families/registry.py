"""Behavior registry mapping families to their behaviors.

The registry provides a central lookup for the behavior that implements a
family's rules. Behaviors register themselves by their family; the bare
contract is always available under ``None``.
"""

from __future__ import annotations

from typeone.families.base import FamilyBehavior
from typeone.kinds import Family


class FamilyRegistry:
    """Registry that maps families to behavior instances.

    Example:
        >>> registry = FamilyRegistry()
        >>> registry.register(NumberBehavior)
        >>> behavior = registry.get_behavior(Family.NUMBER)
    """

    def __init__(self) -> None:
        """Initialize a registry holding only the bare contract."""
        self._behaviors: dict[Family | None, FamilyBehavior] = {None: FamilyBehavior()}

    def register(self, behavior_class: type[FamilyBehavior]) -> None:
        """Register a behavior class by its family.

        Args:
            behavior_class: A FamilyBehavior subclass to register.

        Raises:
            ValueError: If the behavior has no family or if a behavior for
                the same family is already registered.
        """
        family = behavior_class.family
        if family is None:
            raise ValueError(f"Behavior class {behavior_class.__name__} has no family defined")
        if family in self._behaviors:
            raise ValueError(
                f"Behavior for family '{family.value}' already registered: "
                f"{type(self._behaviors[family]).__name__}"
            )
        self._behaviors[family] = behavior_class()

    def get_behavior(self, family: Family | None) -> FamilyBehavior:
        """Get the behavior for a family.

        Args:
            family: The family to look up, or None for the bare contract.

        Returns:
            The registered behavior.

        Raises:
            KeyError: If no behavior is registered for the family.
        """
        try:
            return self._behaviors[family]
        except KeyError:
            raise KeyError(f"No behavior registered for family: {family}") from None

    def has_behavior(self, family: Family | None) -> bool:
        return family in self._behaviors

    def list_families(self) -> list[Family]:
        """List all registered families, in declaration order."""
        return [f for f in Family if f in self._behaviors]


# Global registry instance - populated on first use
_global_registry: FamilyRegistry | None = None


def get_global_registry() -> FamilyRegistry:
    """Get the global behavior registry.

    Returns a singleton registry populated with the five built-in families.
    """
    global _global_registry
    if _global_registry is None:
        _global_registry = _create_default_registry()
    return _global_registry


def _create_default_registry() -> FamilyRegistry:
    """Create and populate the default registry with built-in behaviors."""
    from typeone.families.boolean import BooleanBehavior
    from typeone.families.date import DateBehavior
    from typeone.families.number import NumberBehavior
    from typeone.families.object import ObjectBehavior
    from typeone.families.string import StringBehavior

    registry = FamilyRegistry()
    registry.register(BooleanBehavior)
    registry.register(NumberBehavior)
    registry.register(StringBehavior)
    registry.register(ObjectBehavior)
    registry.register(DateBehavior)
    return registry
