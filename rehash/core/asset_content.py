"""Read and rewrite artifact text regardless of its representation.

Substitution is always a global, literal replacement of a fixed token:
tokens are never interpreted as patterns.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from rehash.models.assets import (
    CachedRendering,
    Composite,
    PlainText,
    PositionalMapped,
    RawValue,
    WrappedSource,
)

logger = logging.getLogger(__name__)


class UnsupportedArtifactKind(TypeError):
    """Raised for an artifact whose representation is not one we know.

    There is no safe partial rewrite of an unknown representation, so this
    aborts the whole reconciliation.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(
            f"Unknown asset type ({kind}). This type of asset is not supported."
        )


def _kind_name(asset: Any) -> str:
    return getattr(asset, "kind", None) or type(asset).__name__


# A bounded reference may not continue an adjacent file name: no name
# character before it, and no name character or ".ext" after it.
_NAME_BEFORE = r"(?<![\w.~\-])"
_NAME_AFTER = r"(?![\w~\-]|\.\w)"


def replace_token(text: str, old: str, new: str, *, bounded: bool = False) -> str:
    """Replace every non-overlapping occurrence of *old* in *text*.

    *old* is always literal. With ``bounded=True`` it only matches where it
    is a whole file reference, so ``app.1.js`` leaves ``app.1.json`` and
    ``app.1.js.map`` alone.
    """
    if not old:
        return text
    if not bounded:
        return text.replace(old, new)
    pattern = re.compile(_NAME_BEFORE + re.escape(old) + _NAME_AFTER)
    return pattern.sub(lambda _match: new, text)


def read_text(asset: Any) -> str:
    """Return the current textual content of *asset*."""
    if isinstance(asset, PlainText):
        return asset.text
    if isinstance(asset, WrappedSource):
        return read_text(asset.inner)
    if isinstance(asset, CachedRendering):
        if asset.cached is not None:
            return asset.cached
        return read_text(asset.source)
    if isinstance(asset, RawValue):
        return asset.value
    if isinstance(asset, PositionalMapped):
        return asset.source
    if isinstance(asset, Composite):
        return "".join(read_text(child) for child in asset.children)
    raise UnsupportedArtifactKind(_kind_name(asset))


def substitute_all(asset: Any, old: str, new: str, *, bounded: bool = False) -> Any:
    """Replace *old* with *new* throughout *asset*, in place.

    Returns the same artifact handle so calls can be chained.
    """
    if isinstance(asset, PlainText):
        asset.text = replace_token(asset.text, old, new, bounded=bounded)
    elif isinstance(asset, WrappedSource):
        asset.inner = substitute_all(asset.inner, old, new, bounded=bounded)
    elif isinstance(asset, CachedRendering):
        asset.cached = replace_token(read_text(asset), old, new, bounded=bounded)
    elif isinstance(asset, RawValue):
        asset.value = replace_token(asset.value, old, new, bounded=bounded)
    elif isinstance(asset, PositionalMapped):
        asset.source = replace_token(asset.source, old, new, bounded=bounded)
    elif isinstance(asset, Composite):
        asset.children = [
            substitute_all(c, old, new, bounded=bounded) for c in asset.children
        ]
    else:
        raise UnsupportedArtifactKind(_kind_name(asset))
    return asset


def count_token(asset: Any, token: str) -> int:
    """Count non-overlapping occurrences of *token* in the artifact's text."""
    if not token:
        return 0
    return read_text(asset).count(token)
