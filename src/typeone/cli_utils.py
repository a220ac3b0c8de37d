"""CLI utility functions for typeone.

Provides helper functions for:
- Config wiring: Extracting Typer CLI options and passing to load_config
- Type building: Creating a named variant with scope overrides applied
- Error formatting: Consistent user-friendly error messages with exit codes
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, NoReturn

import typer

from typeone.config import TypeoneConfig, load_config
from typeone.data_type import DataType
from typeone.factories import create
from typeone.scope import ScopeProfile, apply_scope, load_scope

# Exit code conventions
EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1  # User error (bad input, invalid value, etc.)
EXIT_SYSTEM_ERROR = 2  # System error (permissions, I/O, etc.)


# -----------------------------------------------------------------------------
# Error Formatting Helpers
# -----------------------------------------------------------------------------


def error(msg: str, *, exit_code: int = EXIT_USER_ERROR) -> NoReturn:
    """Print an error message and exit with the given exit code.

    Args:
        msg: The error message to display.
        exit_code: Exit code to use (default: EXIT_USER_ERROR=1).

    Raises:
        typer.Exit: Always raises to exit the program.
    """
    styled_prefix = typer.style("Error:", fg=typer.colors.RED, bold=True)
    typer.echo(f"{styled_prefix} {msg}", err=True)
    raise typer.Exit(code=exit_code)


def warning(msg: str) -> None:
    """Print a warning message to stderr."""
    styled_prefix = typer.style("Warning:", fg=typer.colors.YELLOW, bold=True)
    typer.echo(f"{styled_prefix} {msg}", err=True)


# -----------------------------------------------------------------------------
# Config Wiring Helper
# -----------------------------------------------------------------------------


def wire_config(
    coerce: bool | None = None,
    json_output: bool | None = None,
    scope_file: str | None = None,
    start_dir: Path | None = None,
) -> TypeoneConfig:
    """Wire CLI options to load_config with appropriate overrides.

    Options left at None fall through to the environment, config files and
    defaults.

    Raises:
        typer.Exit: If configuration is invalid.
    """
    cli_overrides: dict[str, Any] = {}

    if coerce is not None:
        cli_overrides["coerce"] = coerce
    if json_output is not None:
        cli_overrides["json_output"] = json_output
    if scope_file is not None:
        cli_overrides["scope_file"] = scope_file

    try:
        return load_config(cli_overrides=cli_overrides, start_dir=start_dir)
    except ValueError as e:
        error(f"Invalid configuration: {e}", exit_code=EXIT_USER_ERROR)


def load_configured_scope(config: TypeoneConfig, base_path: Path | None = None) -> ScopeProfile:
    """Load the scope profile named by the configuration, if any.

    Raises:
        typer.Exit: If the profile is missing or invalid.
    """
    scope_path = config.get_scope_path(base_path)
    if scope_path is None:
        return {}
    try:
        return load_scope(scope_path)
    except FileNotFoundError:
        error(f"Scope profile does not exist: {scope_path}")
    except OSError as e:
        error(f"Cannot read scope profile {scope_path}: {e}", exit_code=EXIT_SYSTEM_ERROR)
    except ValueError as e:
        error(str(e))


def build_type(
    variant: str,
    profile: ScopeProfile,
    max_value: float | None = None,
    max_len: int | None = None,
) -> DataType:
    """Create a named variant and apply the scope overrides for it.

    Raises:
        typer.Exit: If the variant is unknown or the parameters don't fit it.
    """
    try:
        data_type = create(variant, max_value=max_value, max_len=max_len)
    except ValueError as e:
        error(str(e))
    return apply_scope(data_type, profile)


# -----------------------------------------------------------------------------
# Typer Option Factory Functions
# -----------------------------------------------------------------------------
# Typer consumes Option objects when decorating commands, so each command
# needs a fresh instance.


def json_option() -> Any:
    """Create a Typer Option for --json/--text."""
    return typer.Option(
        None,
        "--json/--text",
        help="Output as JSON.",
    )


def scope_file_option() -> Any:
    """Create a Typer Option for --scope-file."""
    return typer.Option(
        None,
        "--scope-file",
        help="YAML scope profile with property overrides per type.",
    )


def max_value_option() -> Any:
    """Create a Typer Option for --max-value."""
    return typer.Option(
        None,
        "--max-value",
        help="Symmetric bound for number types: range becomes [-N, N].",
    )


def max_len_option() -> Any:
    """Create a Typer Option for --max-len."""
    return typer.Option(
        None,
        "--max-len",
        min=0,
        help="Maximum length for STRING and BINARY types.",
    )
