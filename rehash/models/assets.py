"""Artifact representation variants.

Every artifact the host hands over is one of the variants below. The union
is closed: ``rehash.core.asset_content`` handles each variant explicitly and
rejects anything else with ``UnsupportedArtifactKind``.

Artifacts are mutable: identifier substitution rewrites them
in place so the host keeps reading the same handle.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class PlainText(BaseModel):
    """Terminal text content."""

    kind: Literal["plain_text"] = "plain_text"
    text: str = ""


class WrappedSource(BaseModel):
    """A source that delegates its content to an inner artifact."""

    kind: Literal["wrapped_source"] = "wrapped_source"
    inner: Asset


class CachedRendering(BaseModel):
    """A source with a materialized rendering kept apart from the source.

    When ``cached`` is set it is the content; otherwise the source is read.
    """

    kind: Literal["cached_rendering"] = "cached_rendering"
    source: Asset
    cached: str | None = None


class RawValue(BaseModel):
    """Content held directly as a value.

    ``value`` is the single stored copy. The other accessors some readers
    expect are derived from it, so they cannot drift apart.
    """

    kind: Literal["raw_value"] = "raw_value"
    value: str = ""

    @property
    def value_as_string(self) -> str:
        return self.value

    def buffer(self, encoding: str = "utf-8") -> bytes:
        return self.value.encode(encoding)


class PositionalMapped(BaseModel):
    """Generated code paired with its debug (source) map."""

    kind: Literal["positional_mapped"] = "positional_mapped"
    source: str = ""
    source_map: dict[str, Any] | None = None
    name: str = ""


class Composite(BaseModel):
    """Ordered children whose concatenation is the content."""

    kind: Literal["composite"] = "composite"
    children: list[Asset] = Field(default_factory=list)

    @classmethod
    def of(cls, *parts: str | Asset) -> Composite:
        """Build a composite from artifacts and bare strings."""
        return cls(
            children=[PlainText(text=p) if isinstance(p, str) else p for p in parts]
        )


Asset = Annotated[
    Union[PlainText, WrappedSource, CachedRendering, RawValue, PositionalMapped, Composite],
    Field(discriminator="kind"),
]

ASSET_TYPES: tuple[type[BaseModel], ...] = (
    PlainText,
    WrappedSource,
    CachedRendering,
    RawValue,
    PositionalMapped,
    Composite,
)

for _model in ASSET_TYPES:
    _model.model_rebuild()
