"""Reconciliation driver — recompute identifiers and propagate the changes.

Run once per build, after every artifact has its final bytes. For each
chunk, in the order given by :func:`rehash.core.ordering.sort_chunks`:

1. Replay: apply every substitution recorded so far to all chunk files,
   so a chunk that embeds other chunks' names sees their new identifiers
   before it is hashed.
2. Recompute: hash each main file, and if its name embeds the old
   identifier, rename it and record the old -> new substitution.
3. Secondary rewrite: apply every substitution, including the ones just
   recorded, to the chunk's non-main files (source maps and the like).

Any error aborts the whole run; there is no partial success.
"""

from __future__ import annotations

import logging
from typing import Any

from rehash.core.asset_content import replace_token, read_text, substitute_all
from rehash.core.hasher import hash_source
from rehash.core.identifiers import is_main_file, resolve_old_hash, substitution_key
from rehash.core.ordering import sort_chunks
from rehash.core.substitution_map import SubstitutionMap
from rehash.models.chunks import BuildSnapshot, Chunk
from rehash.models.config import HashConfig, HashStrategy
from rehash.models.substitutions import Rename, RenameSet

logger = logging.getLogger(__name__)


class MissingAssetError(LookupError):
    """Raised when a chunk lists a file the snapshot has no artifact for."""


class Reconciler:
    """Recomputes content hashes for one build snapshot.

    Parameters
    ----------
    hash_config:
        Digest parameters. Defaults to ``HashConfig()``.
    hash_type:
        Which embedded identifier main files carry. Defaults to chunkhash.
    """

    def __init__(
        self,
        hash_config: HashConfig | None = None,
        hash_type: HashStrategy | str = HashStrategy.CHUNKHASH,
    ) -> None:
        self.hash_config = hash_config or HashConfig()
        self.hash_type = HashStrategy(hash_type)

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def run(self, snapshot: BuildSnapshot) -> RenameSet:
        """Reconcile *snapshot* in place and return the renames performed."""
        substitutions = SubstitutionMap()
        renames: list[Rename] = []

        for chunk in sort_chunks(snapshot.chunks):
            self._replay(chunk, snapshot, substitutions)
            renames.extend(self._rehash_chunk(chunk, snapshot, substitutions))

        logger.info(
            "Reconciled %d chunks: %d renamed files, %d substitutions",
            len(snapshot.chunks), len(renames), len(substitutions),
        )
        return RenameSet(renames=renames, substitutions=substitutions.to_substitutions())

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def _replay(
        self, chunk: Chunk, snapshot: BuildSnapshot, substitutions: SubstitutionMap
    ) -> None:
        for filename in list(chunk.files):
            self._apply_all(filename, snapshot, substitutions)

    def _rehash_chunk(
        self, chunk: Chunk, snapshot: BuildSnapshot, substitutions: SubstitutionMap
    ) -> list[Rename]:
        files = list(chunk.files)
        renames: list[Rename] = []

        for filename in files:
            if not is_main_file(filename, chunk):
                continue
            asset = _require_asset(snapshot, filename)
            digest = hash_source(self.hash_config, read_text(asset))
            old_hash = resolve_old_hash(self.hash_type, filename, chunk)

            if not old_hash or old_hash not in filename:
                logger.debug(
                    "Skipping %s: old hash %r not in file name", filename, old_hash
                )
                continue

            key = substitution_key(self.hash_type, old_hash, filename)
            substitutions.record(key, digest.short_hash)
            new_name = replace_token(filename, old_hash, digest.short_hash)
            snapshot.rename_asset(filename, new_name)
            renames.append(
                Rename(
                    old_name=filename,
                    new_name=new_name,
                    chunk_id=chunk.id,
                    full_hash=digest.full_hash,
                )
            )
            logger.info("Rehashed %s -> %s", filename, new_name)

        for filename in files:
            if not is_main_file(filename, chunk):
                self._apply_all(filename, snapshot, substitutions)

        return renames

    @staticmethod
    def _apply_all(
        filename: str, snapshot: BuildSnapshot, substitutions: SubstitutionMap
    ) -> None:
        asset = _require_asset(snapshot, filename)
        for key, new_token in substitutions.items():
            substitute_all(
                asset, key.needle, key.replacement(new_token), bounded=key.bounded
            )


def _require_asset(snapshot: BuildSnapshot, filename: str) -> Any:
    asset = snapshot.get_asset(filename)
    if asset is None:
        raise MissingAssetError(f"Chunk file {filename!r} has no asset in the snapshot")
    return asset


def reconcile(
    snapshot: BuildSnapshot,
    hash_config: HashConfig | None = None,
    hash_type: HashStrategy | str = HashStrategy.CHUNKHASH,
) -> RenameSet:
    """Reconcile *snapshot* with a fresh substitution map.

    Convenience wrapper around :class:`Reconciler`.
    """
    return Reconciler(hash_config, hash_type).run(snapshot)
