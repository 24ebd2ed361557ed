"""Main Typer application — imports and registers all CLI commands.

Entry point: ``rehash`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from rehash.cli.commands.digest_cmd import digest_cmd
from rehash.cli.commands.reconcile_cmd import reconcile_cmd
from rehash.config import RehashSettings

app = typer.Typer(
    name="rehash",
    help="Rehash: recompute content hashes of finished build artifacts.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        None, "--log-level", help="Logging level (defaults to REHASH_LOG_LEVEL)."
    ),
) -> None:
    """Configure logging for every subcommand."""
    level = (log_level or RehashSettings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=False, show_path=False)],
        force=True,
    )


# Register subcommands
app.command(name="reconcile", help="Rehash the chunks of a build snapshot.")(reconcile_cmd)
app.command(name="digest", help="Print the content hash of a file.")(digest_cmd)


@app.command(name="show-config", help="Show the effective hash settings.")
def show_config_cmd() -> None:
    """Print settings after .env and REHASH_* overrides are applied."""
    console = Console()
    settings = RehashSettings()

    table = Table(title="Rehash Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for field, value in settings.model_dump(mode="json").items():
        table.add_row(field, "" if value is None else str(value))

    console.print(table)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
