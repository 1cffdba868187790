"""``suiteplug inspect SPEC...`` — show what required modules contribute.

Requires every spec into a fresh registry, finalizes it and prints one row
per plugin kind.  Kinds nobody contributed to are shown as absent.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from suiteplug.config import config
from suiteplug.models.plugins import RESULT_KEYS, PluginKind
from suiteplug.plugins.loader import RequireError, RequireLoader
from suiteplug.plugins.registry import PluginRegistry
from suiteplug.plugins.validators import ShapeValidationError

console = Console()


def inspect_cmd(
    specs: Optional[list[str]] = typer.Argument(
        None,
        help="Files or module names to require, in load order.",
    ),
    base_dir: Path = typer.Option(
        None,
        "--base-dir",
        "-b",
        help="Directory relative file specs are resolved against.",
    ),
) -> None:
    """Require modules, finalize the registry and summarize the result.

    With no SPECS, the specs configured in SUITEPLUG_REQUIRE are used.
    """
    specs = list(specs or config.require)
    if not specs:
        console.print("[dim]Nothing to require.[/dim]")
        raise typer.Exit(code=0)

    registry = PluginRegistry.create()
    loader = RequireLoader(registry, base_dir=base_dir or config.base_dir)

    try:
        loader.require_all(specs)
        finalized = registry.finalize_sync()
    except ShapeValidationError as exc:
        console.print(f"[bold red]Unsupported plugin:[/bold red] {exc}")
        raise typer.Exit(code=1)
    except RequireError as exc:
        console.print(f"[bold red]Require failed:[/bold red] {exc}")
        raise typer.Exit(code=1)

    table = Table(title=f"Plugins from {len(loader.loaded)} module(s)")
    table.add_column("Kind", style="cyan")
    table.add_column("Result key")
    table.add_column("Contributions", justify="right")
    table.add_column("Callables", justify="right")

    for kind in PluginKind:
        key = RESULT_KEYS[kind]
        if key not in finalized:
            table.add_row(kind.value, key, "0", "[dim]absent[/dim]")
            continue
        value = finalized[key]
        if kind is PluginKind.ROOT_HOOKS:
            callables = sum(len(hooks) for hooks in value.values())
        else:
            callables = sum(
                len(item) if isinstance(item, list) else 1 for item in value
            )
        table.add_row(
            kind.value,
            key,
            str(registry.count(kind)),
            f"[green]{callables}[/green]",
        )

    console.print(table)
