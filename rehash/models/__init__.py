"""Rehash data models — Pydantic v2; configuration and records are frozen."""

from rehash.models.assets import (
    ASSET_TYPES,
    Asset,
    CachedRendering,
    Composite,
    PlainText,
    PositionalMapped,
    RawValue,
    WrappedSource,
)
from rehash.models.chunks import AssetRenameError, BuildSnapshot, Chunk
from rehash.models.config import HashConfig, HashStrategy
from rehash.models.substitutions import (
    SPECIAL_SEPARATOR,
    Rename,
    RenameSet,
    Substitution,
    SubstitutionKey,
)

__all__ = [
    # assets
    "Asset",
    "ASSET_TYPES",
    "PlainText",
    "WrappedSource",
    "CachedRendering",
    "RawValue",
    "PositionalMapped",
    "Composite",
    # chunks
    "AssetRenameError",
    "Chunk",
    "BuildSnapshot",
    # config
    "HashConfig",
    "HashStrategy",
    # substitutions
    "SPECIAL_SEPARATOR",
    "SubstitutionKey",
    "Substitution",
    "Rename",
    "RenameSet",
]
