"""``rehash digest`` — hash one file with the configured digest settings."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from rehash.config import RehashSettings
from rehash.core.hasher import HashConfigError, hash_source

console = Console()


def digest_cmd(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="File to hash."),
    length: int = typer.Option(
        None, "--length", "-l", min=1, help="Override the short hash length."
    ),
) -> None:
    """Print the full and short digest of PATH."""
    settings = RehashSettings()
    if length is not None:
        settings = settings.model_copy(update={"hash_digest_length": length})

    try:
        digest = hash_source(settings.hash_config(), path.read_bytes())
    except HashConfigError as exc:
        console.print(f"[red]Hash configuration error:[/red] {exc}")
        raise typer.Exit(code=1)

    console.print(f"[bold]Full:[/bold]  {digest.full_hash}")
    console.print(f"[bold]Short:[/bold] {digest.short_hash}")
