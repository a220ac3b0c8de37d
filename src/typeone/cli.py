"""typeone CLI Tool - Main entry point."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from typeone import __version__
from typeone.cli_utils import (
    EXIT_USER_ERROR,
    build_type,
    error,
    json_option,
    load_configured_scope,
    max_len_option,
    max_value_option,
    scope_file_option,
    warning,
    wire_config,
)
from typeone.data_type import DataType
from typeone.errors import DataTypeError
from typeone.factories import create
from typeone.variants import Variant

app = typer.Typer(
    name="typeone",
    help="typeone CLI Tool - Validate and convert values of semantic data types.",
    add_completion=False,
)

# Rich console for output
console = Console()


# -----------------------------------------------------------------------------
# Output Helpers
# -----------------------------------------------------------------------------


def _flags(data_type: DataType) -> dict[str, Any]:
    """Behavioral flags of a type as a JSON-friendly dict."""
    return {
        "enumerable": data_type.is_enumerable(),
        "comparable": data_type.is_comparable(),
        "searchable": data_type.is_searchable(),
        "fragmentable": data_type.is_fragmentable(),
        "absent_value": data_type.properties.absent_value,
    }


def _render(data_type: DataType, value: Any, repaired: bool) -> str | None:
    """Text form of a value, or None when no valid value was obtained.

    A repair that yields None means the family has no repair for the input,
    even where None itself is a valid value.
    """
    if repaired and value is None:
        return None
    if not data_type.is_valid(value):
        return None
    try:
        return data_type.to_string(value)
    except DataTypeError:
        return None


# -----------------------------------------------------------------------------
# Version and Main Callbacks
# -----------------------------------------------------------------------------


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"typeone version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log coercions and rejections to stderr.",
    ),
) -> None:
    """typeone CLI Tool - Validate and convert values of semantic data types."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


# -----------------------------------------------------------------------------
# Types Command
# -----------------------------------------------------------------------------


@app.command("types")
def list_types(
    json_output: bool | None = json_option(),
) -> None:
    """List the named type variants and their defaults."""
    config = wire_config(json_output=json_output)

    rows = []
    for variant in Variant:
        data_type = create(variant)
        rows.append(
            {
                "name": variant.value,
                "family": data_type.type,
                "refinement": data_type.refinement.value,
                "serialized": data_type.serialize(),
                "description": variant.spec.description,
                "properties": _flags(data_type),
            }
        )

    if config.json_output:
        console.print_json(json.dumps({"types": rows}))
        return

    table = Table(title="Type Variants")
    table.add_column("Name", style="cyan")
    table.add_column("Family", style="green")
    table.add_column("Refinement")
    table.add_column("Description")

    for row in rows:
        refinement = row["refinement"]
        table.add_row(
            row["name"],
            row["family"],
            refinement if refinement != "none" else "-",
            row["description"] or "-",
        )

    console.print(table)


# -----------------------------------------------------------------------------
# Check Command
# -----------------------------------------------------------------------------


@app.command()
def check(
    variant: str = typer.Argument(..., help="Type variant name (e.g., INTEGER, UUID)."),
    text: str = typer.Argument(..., help="Textual value to check."),
    coerce: bool | None = typer.Option(
        None,
        "--coerce/--strict",
        help="Repair invalid input instead of rejecting it.",
    ),
    max_value: float | None = max_value_option(),
    max_len: int | None = max_len_option(),
    scope_file: str | None = scope_file_option(),
    json_output: bool | None = json_option(),
) -> None:
    """Parse a textual value with a type and report the result.

    Exits with status 1 when the value is rejected.
    """
    config = wire_config(coerce=coerce, json_output=json_output, scope_file=scope_file)
    profile = load_configured_scope(config)
    data_type = build_type(variant, profile, max_value=max_value, max_len=max_len)

    result: dict[str, Any] = {
        "type": data_type.serialize(),
        "input": text,
        "valid_string": data_type.is_valid_string(text),
        "coerce": config.coerce,
    }

    try:
        value = data_type.from_string(text, config.coerce)
    except DataTypeError as e:
        result["valid"] = False
        result["error"] = str(e)
        if config.json_output:
            console.print_json(json.dumps(result))
            raise typer.Exit(code=EXIT_USER_ERROR) from None
        error(str(e))

    repaired = config.coerce and not result["valid_string"]
    rendered = _render(data_type, value, repaired)
    result["valid"] = rendered is not None
    result["value"] = rendered
    result["absent"] = data_type.is_absent(value)

    if config.json_output:
        console.print_json(json.dumps(result))
        if rendered is None:
            raise typer.Exit(code=EXIT_USER_ERROR)
        return

    if repaired:
        warning(f"Input {text!r} is not a valid {variant.upper()} representation; coerced")
    if rendered is None:
        error(f"No valid {variant.upper()} value could be derived from {text!r}")
    console.print(rendered, markup=False, highlight=False)


# -----------------------------------------------------------------------------
# Serialize / Default / Properties Commands
# -----------------------------------------------------------------------------


@app.command()
def serialize(
    variant: str = typer.Argument(..., help="Type variant name."),
    max_value: float | None = max_value_option(),
    max_len: int | None = max_len_option(),
) -> None:
    """Print the serialized descriptor of a type."""
    data_type = build_type(variant, {}, max_value=max_value, max_len=max_len)
    console.print(data_type.serialize(), markup=False, highlight=False)


@app.command()
def default(
    variant: str = typer.Argument(..., help="Type variant name."),
    max_value: float | None = max_value_option(),
    max_len: int | None = max_len_option(),
) -> None:
    """Print the default value of a type in its textual form."""
    data_type = build_type(variant, {}, max_value=max_value, max_len=max_len)
    console.print(data_type.to_string(data_type.get_default()), markup=False, highlight=False)


@app.command()
def properties(
    variant: str = typer.Argument(..., help="Type variant name."),
    scope_file: str | None = scope_file_option(),
    json_output: bool | None = json_option(),
) -> None:
    """Show the behavioral properties of a type, with scope overrides applied."""
    config = wire_config(json_output=json_output, scope_file=scope_file)
    profile = load_configured_scope(config)
    data_type = build_type(variant, profile)
    flags = _flags(data_type)

    if config.json_output:
        console.print_json(json.dumps({"type": data_type.serialize(), "properties": flags}))
        return

    table = Table(title=f"{data_type.name} properties")
    table.add_column("Property", style="cyan")
    table.add_column("Value")
    for key, value in flags.items():
        table.add_row(key, "-" if value is None else str(value))
    console.print(table)


if __name__ == "__main__":
    app()
