"""Processing order for chunks.

Runtime chunks embed a manifest of every other chunk's file names, so they
are finalized last, after every identifier they reference has been
recomputed.
"""

from __future__ import annotations

from collections.abc import Iterable

from rehash.models.chunks import Chunk


def chunk_sort_key(chunk: Chunk) -> tuple[bool, bool, int | str]:
    # Integer ids sort ahead of string ids; comparison stays within one type.
    return (chunk.has_runtime, isinstance(chunk.id, str), chunk.id)


def sort_chunks(chunks: Iterable[Chunk]) -> list[Chunk]:
    """Non-runtime chunks first, then runtime chunks; ties by id ascending."""
    return sorted(chunks, key=chunk_sort_key)
