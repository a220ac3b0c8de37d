"""Scope profiles: per-application property overrides.

The behavioral flags of a type depend on the application using it; a
product code may be a string that is not searchable, a color may use
"white" as its absent value. A scope profile is a YAML mapping from variant
name to the properties to override::

    STRING:
      searchable: false
    INTEGER:
      absent_value: -1
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from typeone.data_type import DataType
from typeone.properties import property_names
from typeone.variants import find_variant

logger = logging.getLogger(__name__)

ScopeProfile = dict[str, dict[str, Any]]


def parse_scope(data: Any) -> ScopeProfile:
    """Validate raw profile data and normalize variant names.

    Args:
        data: Parsed YAML content.

    Returns:
        Mapping of variant name to property overrides.

    Raises:
        ValueError: If the data is not a mapping of known variants to
            mappings of known properties.
    """
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError("Scope profile must be a mapping of type names to properties")

    valid = property_names()
    profile: ScopeProfile = {}
    for name, overrides in data.items():
        variant = find_variant(str(name))
        if not isinstance(overrides, Mapping):
            raise ValueError(f"Properties for {variant.value} must be a mapping")
        unknown = sorted(set(overrides) - valid)
        if unknown:
            raise ValueError(f"Unknown properties for {variant.value}: {', '.join(unknown)}")
        profile[variant.value] = dict(overrides)
    return profile


def load_scope(path: Path) -> ScopeProfile:
    """Load a scope profile from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not valid YAML or not a valid profile.
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in scope profile {path}: {e}") from e
    profile = parse_scope(data)
    logger.debug("Loaded scope profile %s for %d types", path, len(profile))
    return profile


def apply_scope(data_type: DataType, profile: ScopeProfile) -> DataType:
    """Apply the profile's overrides for the type's variant, if any.

    Returns:
        The same DataType, for chaining.
    """
    if data_type.name is not None and data_type.name in profile:
        data_type.apply_properties(profile[data_type.name])
    return data_type
