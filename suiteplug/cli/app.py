"""Main Typer application — imports and registers all CLI commands.

Entry point: ``suiteplug`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from suiteplug.cli.commands.inspect_cmd import inspect_cmd
from suiteplug.config import config

app = typer.Typer(
    name="suiteplug",
    help="Suiteplug: plugin registration for test-running hosts.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(name="inspect", help="Show what required modules contribute.")(inspect_cmd)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to SUITEPLUG_LOG_LEVEL, or DEBUG with SUITEPLUG_DEBUG).",
    ),
) -> None:
    """Configure logging for every subcommand."""
    logging.basicConfig(
        level=(log_level.upper() if log_level else config.effective_log_level),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command(name="kinds", help="List the supported plugin kinds.")
def kinds_cmd() -> None:
    """List the plugin kinds a module may export."""
    from rich.table import Table

    from suiteplug.models.plugins import RESULT_KEYS, PluginKind

    console = Console()
    table = Table(title="Plugin Kinds")
    table.add_column("Export name", style="cyan")
    table.add_column("Result key", style="green")
    table.add_column("Accepted shape")

    shapes = {
        PluginKind.ROOT_HOOKS: "mapping of hooks, or a (async) function returning one",
        PluginKind.GLOBAL_SETUP: "function, or list of functions",
        PluginKind.GLOBAL_TEARDOWN: "function, or list of functions",
    }
    for kind in PluginKind:
        table.add_row(kind.value, RESULT_KEYS[kind], shapes[kind])

    console.print(table)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
