"""Rich table builders used by the CLI.

Kept separate to reduce duplication and keep the command module smaller.
"""

from __future__ import annotations

from rich.table import Table


def build_demos_table(demos) -> Table:
    """Build the (Name, Description) table for `demos`."""
    table = Table(show_header=True, title="Available Demos")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for demo in demos:
        table.add_row(demo.name, demo.description)
    return table


def build_chain_table(snapshot) -> Table:
    """Build the chain table, innermost scope first."""
    table = Table(show_header=True, title="Environment Chain")
    table.add_column("Depth")
    table.add_column("Scope")
    table.add_column("Kind")
    table.add_column("Bindings")
    for scope in snapshot.ordered():
        bindings = ", ".join(f"{b.name}={b.value_repr}" for b in scope.bindings)
        table.add_row(
            str(scope.depth),
            scope.label or scope.id,
            scope.kind.value,
            bindings or "[dim]-[/dim]",
        )
    return table


def build_config_table(config) -> Table:
    """Build the (Setting, Value) table for `config`."""
    table = Table(show_header=True, title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in config.model_dump().items():
        table.add_row(key, str(value))
    return table
