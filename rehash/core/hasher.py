"""Digest engine — content hashes for finished artifacts.

``hash_source`` is a pure function: identical config and content always
produce the identical ``(full_hash, short_hash)`` pair.
"""

from __future__ import annotations

import base64
import hashlib
from typing import Any, NamedTuple

from rehash.models.config import HashConfig

SUPPORTED_DIGESTS = ("hex", "base64", "base64url", "latin1", "binary")


class HashConfigError(ValueError):
    """Raised when a hash configuration cannot produce a digest."""


class DigestResult(NamedTuple):
    full_hash: str
    short_hash: str


def _new_hash(hash_function: str) -> Any:
    if hash_function.lower().startswith("shake_"):
        raise HashConfigError(
            f"Variable-length hash function {hash_function!r} is not supported"
        )
    try:
        return hashlib.new(hash_function)
    except (ValueError, TypeError) as exc:
        raise HashConfigError(f"Unknown hash function {hash_function!r}") from exc


def encode_digest(raw: bytes, hash_digest: str) -> str:
    """Encode raw digest bytes the way Node's ``Hash.digest(encoding)`` does."""
    if hash_digest == "hex":
        return raw.hex()
    if hash_digest == "base64":
        return base64.b64encode(raw).decode("ascii")
    if hash_digest == "base64url":
        return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")
    if hash_digest in ("latin1", "binary"):
        return raw.decode("latin-1")
    raise HashConfigError(
        f"Unknown hash digest {hash_digest!r}; expected one of {', '.join(SUPPORTED_DIGESTS)}"
    )


def _as_bytes(data: str | bytes) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else data


def hash_source(config: HashConfig, source: str | bytes) -> DigestResult:
    """Hash *source* with *config* and return the full and truncated digest.

    The salt, when non-empty, is fed to the hash after the content.
    """
    hasher = _new_hash(config.hash_function)
    hasher.update(_as_bytes(source))
    if config.hash_salt:
        hasher.update(_as_bytes(config.hash_salt))
    full_hash = encode_digest(hasher.digest(), config.hash_digest)
    return DigestResult(
        full_hash=full_hash,
        short_hash=full_hash[: config.hash_digest_length],
    )
