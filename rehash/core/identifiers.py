"""Work out which embedded identifier a main file's new hash replaces."""

from __future__ import annotations

import posixpath

from rehash.models.chunks import Chunk
from rehash.models.config import HashStrategy
from rehash.models.substitutions import SubstitutionKey

# File extension -> key into Chunk.content_hash.
CONTENT_TYPE_BY_EXTENSION: dict[str, str] = {
    ".js": "javascript",
    ".css": "css/mini-extract",
}

MAIN_FILE_EXTENSIONS: tuple[str, ...] = tuple(CONTENT_TYPE_BY_EXTENSION)


class MissingIdentifierTable(KeyError):
    """Raised when a chunk has no content hash for a main file's type.

    Under the ``contenthash`` strategy this means the naming strategy and
    the build output disagree.
    """

    def __init__(self, chunk_id: int | str, content_type: str | None, filename: str) -> None:
        self.chunk_id = chunk_id
        self.content_type = content_type
        self.filename = filename
        super().__init__(
            f"Chunk {chunk_id!r} has no content hash for {content_type or 'unknown type'}"
            f" (file {filename!r})"
        )

    def __str__(self) -> str:
        return str(self.args[0])


def file_extension(filename: str) -> str:
    return posixpath.splitext(filename)[1]


def is_main_file(filename: str, chunk: Chunk) -> bool:
    """Main files are the scripts and stylesheets of named chunks."""
    return chunk.is_named and filename.endswith(MAIN_FILE_EXTENSIONS)


def resolve_old_hash(strategy: HashStrategy, filename: str, chunk: Chunk) -> str:
    """Return the identifier currently embedded in *filename*'s name."""
    strategy = HashStrategy(strategy)
    if strategy is HashStrategy.CHUNKHASH:
        return chunk.rendered_hash
    content_type = CONTENT_TYPE_BY_EXTENSION.get(file_extension(filename))
    try:
        return chunk.content_hash[content_type]
    except KeyError:
        raise MissingIdentifierTable(chunk.id, content_type, filename) from None


def file_reference(filename: str, token: str) -> str:
    """Tail of *filename* from the path segment that carries *token*.

    ``static/js/app.a1b2c3.js`` -> ``app.a1b2c3.js``;
    ``a1b2c3/app.js`` -> ``a1b2c3/app.js``.
    """
    segments = filename.split("/")
    for index, segment in enumerate(segments):
        if token in segment:
            return "/".join(segments[index:])
    return filename


def substitution_key(strategy: HashStrategy, old_hash: str, filename: str) -> SubstitutionKey:
    """Key under which the new identifier is recorded.

    A chunk hash is shared by every file of the chunk, and each file gets
    its own new hash, so the key is the file's own reference rather than
    the bare token.
    """
    if HashStrategy(strategy) is HashStrategy.CHUNKHASH:
        return SubstitutionKey(token=old_hash, reference=file_reference(filename, old_hash))
    return SubstitutionKey(token=old_hash)
