"""Substitution keys and the rename records returned to the host."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Separator between a shared chunk hash and the file reference it belongs
# to in the display form of a key, e.g. ``a1b2c3___app.a1b2c3.js``.
SPECIAL_SEPARATOR = "___"


class SubstitutionKey(BaseModel):
    """The old identifier a substitution replaces.

    ``reference`` is set when one token is shared by several files of a
    chunk. It holds the tail of the old file name, starting at the path
    segment that carries the token (``app.a1b2c3.js``, ``a1b2c3/app.js``).
    Such a key only matches that whole reference, bounded by non-filename
    characters, so every file sharing the token is rewritten independently.
    """

    model_config = ConfigDict(frozen=True)

    token: str
    reference: str | None = None

    @property
    def needle(self) -> str:
        """Literal text searched for in content."""
        return self.reference if self.reference is not None else self.token

    @property
    def bounded(self) -> bool:
        """Whether :attr:`needle` must match as a whole file reference."""
        return self.reference is not None

    def replacement(self, new_token: str) -> str:
        """Literal text that replaces :attr:`needle`."""
        if self.reference is None:
            return new_token
        return self.reference.replace(self.token, new_token)

    def __str__(self) -> str:
        if self.reference is None:
            return self.token
        return f"{self.token}{SPECIAL_SEPARATOR}{self.reference}"


class Substitution(BaseModel):
    """One recorded old -> new identifier pair."""

    model_config = ConfigDict(frozen=True)

    key: SubstitutionKey
    new_token: str


class Rename(BaseModel):
    """A main file renamed after its identifier was recomputed."""

    model_config = ConfigDict(frozen=True)

    old_name: str
    new_name: str
    chunk_id: int | str
    full_hash: str = ""


class RenameSet(BaseModel):
    """Everything one reconciliation produced for the host to apply."""

    model_config = ConfigDict(frozen=True)

    renames: list[Rename] = Field(default_factory=list)
    substitutions: list[Substitution] = Field(default_factory=list)

    def as_mapping(self) -> dict[str, str]:
        """Return ``{old_name: new_name}`` for every rename."""
        return {r.old_name: r.new_name for r in self.renames}

