"""Hash configuration models — the parameters that shape every identifier."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HashStrategy(str, Enum):
    """Which embedded identifier a main file's new hash replaces."""

    CONTENTHASH = "contenthash"  # one identifier per content type
    CHUNKHASH = "chunkhash"  # one identifier shared by the whole chunk


class HashConfig(BaseModel):
    """Digest parameters, mirroring a bundler's output hash options.

    ``hash_salt`` is folded into the digest after the content when it is
    non-empty.
    """

    model_config = ConfigDict(frozen=True)

    hash_function: str = "md5"
    hash_digest: str = "hex"
    hash_digest_length: int = Field(default=20, ge=1)
    hash_salt: str | None = None
