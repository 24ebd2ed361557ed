"""Output units (chunks) and the build snapshot the host hands over."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from rehash.models.assets import Asset

logger = logging.getLogger(__name__)


class AssetRenameError(ValueError):
    """Raised when an output slot cannot be renamed: the source name is
    unknown or the target name is already taken."""


class Chunk(BaseModel):
    """A group of files produced together from one entry or split point.

    ``name`` is None for chunks created dynamically (on-demand imports);
    those chunks never get their main files rehashed.
    """

    id: int | str
    name: str | None = None
    has_runtime: bool = False
    content_hash: dict[str, str] = Field(default_factory=dict)
    rendered_hash: str = ""
    files: list[str] = Field(default_factory=list)

    @property
    def is_named(self) -> bool:
        return bool(self.name)


class BuildSnapshot(BaseModel):
    """Chunks plus the name -> artifact mapping for every emitted file.

    The snapshot is the host's output slot table: ``rename_asset`` moves an
    artifact to a new name and updates every chunk that lists it.
    """

    chunks: list[Chunk] = Field(default_factory=list)
    assets: dict[str, Asset] = Field(default_factory=dict)

    def get_asset(self, name: str) -> Asset | None:
        return self.assets.get(name)

    def rename_asset(self, old_name: str, new_name: str) -> None:
        """Rename an output slot, keeping chunk file lists in step."""
        if old_name == new_name:
            return
        if old_name not in self.assets:
            raise AssetRenameError(f"No asset named {old_name!r} to rename")
        if new_name in self.assets:
            raise AssetRenameError(
                f"Cannot rename {old_name!r}: {new_name!r} already exists"
            )
        # Rebuild the dict so the renamed slot keeps its position.
        self.assets = {
            (new_name if name == old_name else name): asset
            for name, asset in self.assets.items()
        }
        for chunk in self.chunks:
            chunk.files = [new_name if f == old_name else f for f in chunk.files]
        logger.debug("Renamed asset %s -> %s", old_name, new_name)
