"""lexenv CLI - lexical environment engine.

This module provides the command-line interface for lexenv, enabling demo
scenarios to be listed, run and exported, and snapshot files to be validated.
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console

from lexenv.core.config import get_config

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="lexenv",
    help="Lexical environment engine: scopes, shadowing and closures",
    no_args_is_help=True,
)

# Rich console for formatted output
console = Console()
err_console = Console(stderr=True)

# Global verbose flag
_verbose: bool = False


def set_verbose(verbose: bool) -> None:
    """Set global verbose mode."""
    global _verbose
    _verbose = verbose


def print_exception(e: Exception) -> None:
    """Print exception details in verbose mode."""
    if _verbose:
        err_console.print("\n[dim]--- Traceback (verbose mode) ---[/dim]")
        err_console.print(f"[dim]{traceback.format_exc()}[/dim]")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging and full tracebacks"),
    ] = False,
) -> None:
    """lexenv CLI - lexical environment engine."""
    set_verbose(verbose)
    level = logging.DEBUG if verbose else get_config().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def load_demo_result(name: str):
    """Run a demo, exiting with code 1 if it does not exist."""
    from lexenv.demos import DemoNotFoundError, run_demo

    try:
        return run_demo(name)
    except DemoNotFoundError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        err_console.print("[yellow]Hint:[/yellow] Use 'lexenv demos' to list available demos")
        print_exception(e)
        raise typer.Exit(1)


@app.command()
def demos() -> None:
    """List built-in demo scenarios.

    Example:
        lexenv demos
    """
    from lexenv.cli._tables import build_demos_table
    from lexenv.demos import get_default_demos

    console.print(build_demos_table(get_default_demos()))


@app.command()
def run(
    name: Annotated[str, typer.Argument(help="Demo name")],
    show_chain: Annotated[
        bool,
        typer.Option("--show-chain", "-c", help="Print the final environment chain"),
    ] = False,
) -> None:
    """Run a demo scenario and print its output.

    Example:
        lexenv run shadowing
        lexenv run counter --show-chain
    """
    from lexenv.cli._tables import build_chain_table

    result = load_demo_result(name)

    console.print(f"[blue]{result.name}[/blue]: {result.description}")
    for line in result.outputs:
        console.print(f"  {line}", markup=False, highlight=False)

    if show_chain:
        console.print(build_chain_table(result.snapshot))


@app.command()
def export(
    name: Annotated[str, typer.Argument(help="Demo name")],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output file path"),
    ] = Path("snapshot.json"),
) -> None:
    """Export a demo's final environment chain to a JSON file.

    Example:
        lexenv export greeter -o greeter.json
    """
    from lexenv.core.serializer import SerializationError, serialize

    result = load_demo_result(name)

    try:
        json_str = serialize(result.snapshot)
    except SerializationError as e:
        err_console.print(f"[red]Error:[/red] {e.message}: {e.details}")
        print_exception(e)
        raise typer.Exit(1)
    try:
        output.write_text(json_str, encoding="utf-8")
    except OSError as e:
        err_console.print(f"[red]Error:[/red] Failed to write {output}")
        err_console.print(f"  {e}", markup=False)
        print_exception(e)
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Exported to: {output}")
    console.print(f"  Scopes: {len(result.snapshot.scopes)}")
    console.print(f"  Visible bindings: {len(result.snapshot.visible())}")


@app.command()
def validate(
    snapshot_file: Annotated[
        Path,
        typer.Argument(
            help="Snapshot JSON file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
) -> None:
    """Validate a snapshot JSON file.

    Example:
        lexenv validate greeter.json
    """
    from lexenv.core.serializer import SerializationError, deserialize
    from lexenv.core.validator import validate_snapshot

    try:
        text = snapshot_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error:[/red] Failed to read {snapshot_file}")
        err_console.print(f"  {e}", markup=False)
        print_exception(e)
        raise typer.Exit(1)

    try:
        snapshot = deserialize(text)
    except SerializationError as e:
        err_console.print(f"[red]Error:[/red] {e.message}")
        if e.details:
            err_console.print(f"  {e.details}", markup=False)
        print_exception(e)
        raise typer.Exit(1)

    result = validate_snapshot(snapshot)
    if not result.is_valid:
        err_console.print(f"[red]✗[/red] Snapshot is invalid ({len(result.errors)} errors)")
        for error in result.errors:
            err_console.print(f"  {error.error_type.value}: {error.message}", markup=False)
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Snapshot is valid")
    console.print(f"  Scopes: {len(snapshot.scopes)}")


@app.command()
def config() -> None:
    """Show the effective configuration.

    Example:
        LEXENV_MAX_SCOPE_DEPTH=50 lexenv config
    """
    from lexenv.cli._tables import build_config_table

    console.print(build_config_table(get_config()))


if __name__ == "__main__":
    app()
