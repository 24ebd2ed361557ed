"""``rehash reconcile`` — rehash every chunk of a JSON build snapshot.

The snapshot is the JSON form of :class:`rehash.models.BuildSnapshot`.
The reconciled snapshot can be written back out with ``--output``.
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from rehash.config import RehashSettings
from rehash.core.asset_content import UnsupportedArtifactKind
from rehash.core.hasher import HashConfigError
from rehash.core.identifiers import MissingIdentifierTable
from rehash.core.reconciler import MissingAssetError, Reconciler
from rehash.models.chunks import AssetRenameError, BuildSnapshot
from rehash.models.config import HashStrategy

console = Console()


def reconcile_cmd(
    snapshot_path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Build snapshot JSON file."
    ),
    hash_type: HashStrategy = typer.Option(
        None,
        "--hash-type",
        "-t",
        help="Embedded identifier kind (defaults to REHASH_HASH_TYPE).",
    ),
    output: Path = typer.Option(
        None, "--output", "-o", help="Write the reconciled snapshot JSON here."
    ),
) -> None:
    """Recompute content hashes and propagate them through the snapshot."""
    settings = RehashSettings()

    try:
        snapshot = BuildSnapshot.model_validate_json(snapshot_path.read_text("utf-8"))
    except ValidationError as exc:
        console.print(f"[red]Invalid snapshot:[/red] {exc}")
        raise typer.Exit(code=1)

    reconciler = Reconciler(settings.hash_config(), hash_type or settings.hash_type)
    try:
        result = reconciler.run(snapshot)
    except (
        AssetRenameError,
        UnsupportedArtifactKind,
        MissingIdentifierTable,
        MissingAssetError,
        HashConfigError,
    ) as exc:
        console.print(f"[red]Reconciliation failed:[/red] {exc}")
        raise typer.Exit(code=1)

    if not result.renames:
        console.print("[dim]No files renamed.[/dim]")
    else:
        table = Table(title=f"Renamed files ({reconciler.hash_type.value})")
        table.add_column("Chunk", style="cyan")
        table.add_column("Old name")
        table.add_column("New name", style="green")
        for rename in result.renames:
            table.add_row(str(rename.chunk_id), rename.old_name, rename.new_name)
        console.print(table)

    if output is not None:
        output.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
        console.print(f"[dim]Wrote reconciled snapshot to {output}[/dim]")
