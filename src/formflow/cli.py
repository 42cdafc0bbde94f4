"""
formflow CLI.

Commands:
- bundles: Derive per-state bundles from a behavior matrix
- matrix: Rebuild a behavior matrix from bundles
- enrich: Enrich a form schema for one state
- fields: List a form schema's field keys
- show: Print a behavior matrix as a table
- seed: Start a behavior matrix from a form schema
- build: Run the formflow.toml pipeline
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from formflow._version import get_version
from formflow.core.behaviors import (
    bundles_from_matrix,
    get_cell,
    matrix_from_bundles,
    seed_matrix,
    states_from_matrix,
)
from formflow.core.enrich import enrich_form_schema_for_state
from formflow.core.errors import FormflowError
from formflow.core.ir import CellMode
from formflow.core.loader import (
    dump_bundles,
    dump_matrix,
    load_bundles,
    load_matrix,
    load_schema,
    to_json,
    write_json,
)
from formflow.core.manifest import MANIFEST_NAME, load_manifest
from formflow.core.pipeline import build_project
from formflow.core.schema import extract_field_keys

app = typer.Typer(
    help="Workflow-state behavior for form-js schemas",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

_MODE_STYLES = {
    CellMode.HIDDEN: "dim",
    CellMode.READONLY: "yellow",
    CellMode.EDITABLE: "green",
}


def _fail(error: FormflowError) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {error}", highlight=False)
    return typer.Exit(code=1)


def _emit(data: Any, output: Path | None) -> None:
    if output is None:
        typer.echo(to_json(data), nl=False)
    else:
        write_json(output, data)
        console.print(f"[green]✓[/green] Wrote {output}")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"formflow {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    log_level = "DEBUG" if verbose else os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command(name="bundles")
def bundles_command(
    matrix_path: Path = typer.Argument(..., help="Behavior matrix JSON file"),
    states: list[str] | None = typer.Option(
        None,
        "--state",
        "-s",
        help="State to derive (repeatable, default: every state in the matrix)",
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
) -> None:
    """Derive one behavior bundle per state from a matrix."""
    try:
        matrix = load_matrix(matrix_path)
    except FormflowError as e:
        raise _fail(e)

    bundles = bundles_from_matrix(matrix, states or states_from_matrix(matrix))
    _emit(dump_bundles(bundles), output)


@app.command(name="matrix")
def matrix_command(
    bundles_path: Path = typer.Argument(..., help="Behavior bundles JSON file"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
) -> None:
    """Rebuild a behavior matrix from bundles."""
    try:
        bundles = load_bundles(bundles_path)
    except FormflowError as e:
        raise _fail(e)

    _emit(dump_matrix(matrix_from_bundles(bundles)), output)


@app.command(name="enrich")
def enrich_command(
    schema_path: Path = typer.Argument(..., help="Form-js schema JSON file"),
    bundles_path: Path = typer.Argument(..., help="Behavior bundles JSON file"),
    state: str = typer.Option(..., "--state", "-s", help="State to render"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
) -> None:
    """Enrich a form schema with visibility/required rules for one state."""
    try:
        schema = load_schema(schema_path)
        bundles = load_bundles(bundles_path)
    except FormflowError as e:
        raise _fail(e)

    bundle = next((b for b in bundles if b.state == state), None)
    if bundle is None:
        known = ", ".join(b.state for b in bundles) or "none"
        err_console.print(f"[red]Error:[/red] No bundle for state '{state}' (known: {known})")
        raise typer.Exit(code=1)

    _emit(enrich_form_schema_for_state(schema, bundle), output)


@app.command(name="fields")
def fields_command(
    schema_path: Path = typer.Argument(..., help="Form-js schema JSON file"),
) -> None:
    """List the input field keys of a form schema."""
    try:
        schema = load_schema(schema_path)
    except FormflowError as e:
        raise _fail(e)

    for key in extract_field_keys(schema.get("components")):
        typer.echo(key)


@app.command(name="show")
def show_command(
    matrix_path: Path = typer.Argument(..., help="Behavior matrix JSON file"),
    states: list[str] | None = typer.Option(
        None, "--state", "-s", help="State column (repeatable, default: all)"
    ),
) -> None:
    """Print a behavior matrix as a field x state table."""
    try:
        matrix = load_matrix(matrix_path)
    except FormflowError as e:
        raise _fail(e)

    columns = states or states_from_matrix(matrix)
    bundles = bundles_from_matrix(matrix, columns)

    table = Table(title=f"Behavior Matrix ({matrix_path.name})")
    table.add_column("Field", style="cyan")
    for bundle in bundles:
        table.add_column(f"{bundle.state}\n[dim]{bundle.action.value}[/dim]")

    for field_name in matrix:
        cells = []
        for state in columns:
            cell = get_cell(matrix, field_name, state)
            style = _MODE_STYLES[cell.mode]
            marker = " *" if cell.required else ""
            cells.append(f"[{style}]{cell.mode.value}{marker}[/{style}]")
        table.add_row(field_name, *cells)

    console.print(table)
    console.print("[dim]* required[/dim]")


@app.command(name="seed")
def seed_command(
    schema_path: Path = typer.Argument(..., help="Form-js schema JSON file"),
    states: list[str] = typer.Option(..., "--state", "-s", help="Workflow state (repeatable)"),
    mode: CellMode = typer.Option(CellMode.HIDDEN, "--mode", "-m", help="Initial cell mode"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
) -> None:
    """Start a behavior matrix from a form schema's field keys."""
    try:
        schema = load_schema(schema_path)
    except FormflowError as e:
        raise _fail(e)

    matrix = seed_matrix(extract_field_keys(schema.get("components")), states, mode=mode)
    _emit(dump_matrix(matrix), output)


@app.command(name="build")
def build_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory (default: current directory)",
    ),
) -> None:
    """Build bundles and per-state forms from formflow.toml."""
    try:
        manifest = load_manifest(project_dir / MANIFEST_NAME)
        written = build_project(manifest)
    except FormflowError as e:
        raise _fail(e)

    for path in written:
        console.print(f"[green]✓[/green] {path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
