"""Core reconciliation engine: digests, content access, ordering, driver."""

from rehash.core.asset_content import (
    UnsupportedArtifactKind,
    read_text,
    replace_token,
    substitute_all,
)
from rehash.core.hasher import DigestResult, HashConfigError, hash_source
from rehash.core.identifiers import MissingIdentifierTable, resolve_old_hash
from rehash.core.ordering import sort_chunks
from rehash.core.reconciler import MissingAssetError, Reconciler, reconcile
from rehash.core.substitution_map import SubstitutionMap

__all__ = [
    "DigestResult",
    "HashConfigError",
    "MissingAssetError",
    "MissingIdentifierTable",
    "Reconciler",
    "SubstitutionMap",
    "UnsupportedArtifactKind",
    "hash_source",
    "read_text",
    "reconcile",
    "replace_token",
    "resolve_old_hash",
    "sort_chunks",
    "substitute_all",
]
