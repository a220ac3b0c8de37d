"""Configuration management for the typeone CLI tool.

Handles configuration loading from multiple sources with precedence:
CLI args > environment variables > .typeonerc > pyproject.toml > defaults
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from typeone.primitive import BOOLEAN

# tomllib is only available in Python 3.11+
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found]


@dataclass
class TypeoneConfig:
    """Configuration for the typeone CLI tool.

    Attributes:
        coerce: Repair invalid input instead of rejecting it (default: False)
        json_output: Print results as JSON (default: False)
        scope_file: Path to a YAML scope profile with property overrides
            (default: None)
    """

    coerce: bool = False
    json_output: bool = False
    scope_file: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If any configuration value is invalid.
        """
        if not isinstance(self.coerce, bool):
            raise ValueError("coerce must be a boolean")

        if not isinstance(self.json_output, bool):
            raise ValueError("json_output must be a boolean")

        if self.scope_file is not None:
            if not self.scope_file or not isinstance(self.scope_file, str):
                raise ValueError("scope_file must be a non-empty string")
            if not self.scope_file.endswith((".yaml", ".yml")):
                raise ValueError("scope_file must end with .yaml or .yml")

    def get_scope_path(self, base_path: Path | None = None) -> Path | None:
        """Get the full path to the scope profile, if one is configured.

        Args:
            base_path: Base path to resolve from. Defaults to current directory.

        Returns:
            Path to the scope profile, or None.
        """
        if self.scope_file is None:
            return None
        base = base_path or Path.cwd()
        return base / self.scope_file


def _get_config_field_names() -> set[str]:
    """Get the set of valid configuration field names."""
    return {f.name for f in fields(TypeoneConfig)}


def find_config_file(filename: str = ".typeonerc", start_dir: Path | None = None) -> Path | None:
    """Find a configuration file by traversing up the directory tree.

    Args:
        filename: Name of the config file to find.
        start_dir: Directory to start searching from. Defaults to current directory.

    Returns:
        Path to the config file if found, None otherwise.
    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        config_path = current / filename
        if config_path.is_file():
            return config_path

        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    with open(path, "rb") as f:
        result: dict[str, Any] = tomllib.load(f)
        return result


def _load_from_typeonerc(start_dir: Path | None = None) -> dict[str, Any]:
    """Load configuration from a .typeonerc file, or an empty dict if there is none."""
    config_path = find_config_file(".typeonerc", start_dir)
    if config_path is None:
        return {}

    try:
        data = _load_toml_file(config_path)
        valid_fields = _get_config_field_names()
        return {k: v for k, v in data.items() if k in valid_fields}
    except (tomllib.TOMLDecodeError, OSError):
        return {}


def _load_from_pyproject(start_dir: Path | None = None) -> dict[str, Any]:
    """Load configuration from the pyproject.toml [tool.typeone] section."""
    config_path = find_config_file("pyproject.toml", start_dir)
    if config_path is None:
        return {}

    try:
        data = _load_toml_file(config_path)
        section = data.get("tool", {}).get("typeone", {})
        valid_fields = _get_config_field_names()
        return {k: v for k, v in section.items() if k in valid_fields}
    except (tomllib.TOMLDecodeError, OSError):
        return {}


def _parse_flag(env_var: str, value: str) -> bool:
    """Read a boolean environment value using the boolean text tokens.

    Raises:
        ValueError: If the value is not a recognized boolean token.
    """
    if not BOOLEAN.is_valid_string(value):
        raise ValueError(f"{env_var} must be a boolean (1/0, true/false, yes/no), got {value!r}")
    return bool(BOOLEAN.from_string(value))


def _load_from_env() -> dict[str, Any]:
    """Load configuration from environment variables.

    Recognized variables: TYPEONE_COERCE, TYPEONE_JSON, TYPEONE_SCOPE_FILE.

    Raises:
        ValueError: If a boolean variable holds an unrecognized value.
    """
    result: dict[str, Any] = {}

    for env_var, config_key in (("TYPEONE_COERCE", "coerce"), ("TYPEONE_JSON", "json_output")):
        value = os.environ.get(env_var)
        if value is not None:
            result[config_key] = _parse_flag(env_var, value)

    scope_file = os.environ.get("TYPEONE_SCOPE_FILE")
    if scope_file is not None:
        result["scope_file"] = scope_file

    return result


def _merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
    """Merge configuration dictionaries; later ones take precedence."""
    result: dict[str, Any] = {}
    for config in configs:
        for key, value in config.items():
            if value is not None:
                result[key] = value
    return result


def load_config(
    cli_overrides: dict[str, Any] | None = None,
    start_dir: Path | None = None,
) -> TypeoneConfig:
    """Load configuration with full precedence chain.

    Precedence (highest to lowest):
    1. CLI arguments (cli_overrides)
    2. Environment variables (TYPEONE_*)
    3. .typeonerc file
    4. pyproject.toml [tool.typeone] section
    5. Default values

    Args:
        cli_overrides: Configuration overrides from CLI arguments.
        start_dir: Directory to start searching for config files.

    Returns:
        Fully resolved TypeoneConfig instance.

    Raises:
        ValueError: If the resulting configuration is invalid.
    """
    pyproject_config = _load_from_pyproject(start_dir)
    typeonerc_config = _load_from_typeonerc(start_dir)
    env_config = _load_from_env()

    valid_fields = _get_config_field_names()
    cli_config = {
        k: v for k, v in (cli_overrides or {}).items() if k in valid_fields and v is not None
    }

    merged = _merge_configs(
        pyproject_config,
        typeonerc_config,
        env_config,
        cli_config,
    )

    return TypeoneConfig(**merged)
