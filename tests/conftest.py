"""Shared test fixtures for Rehash."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from rehash.models.assets import PlainText, RawValue
from rehash.models.chunks import BuildSnapshot, Chunk
from rehash.models.config import HashConfig


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep RehashSettings away from any .env or REHASH_* in the caller's shell."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("REHASH_"):
            monkeypatch.delenv(name)


@pytest.fixture
def hash_config() -> HashConfig:
    """Provide a short, deterministic digest configuration."""
    return HashConfig(hash_function="md5", hash_digest="hex", hash_digest_length=8)


# ---------------------------------------------------------------------------
# Chunk and snapshot factories — shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_chunk() -> Callable[..., Chunk]:
    """Factory fixture: build a Chunk with sensible defaults."""

    def _factory(
        chunk_id: int | str = 0,
        name: str | None = "app",
        files: list[str] | None = None,
        **overrides: Any,
    ) -> Chunk:
        defaults: dict[str, Any] = {
            "id": chunk_id,
            "name": name,
            "files": files or [],
            "rendered_hash": "a1b2c3",
        }
        defaults.update(overrides)
        return Chunk(**defaults)

    return _factory


@pytest.fixture
def make_snapshot() -> Callable[..., BuildSnapshot]:
    """Factory fixture: build a snapshot from chunks and name -> text pairs.

    Text values become PlainText assets; artifacts are used as given.
    """

    def _factory(chunks: list[Chunk], assets: dict[str, Any]) -> BuildSnapshot:
        return BuildSnapshot(
            chunks=chunks,
            assets={
                name: PlainText(text=a) if isinstance(a, str) else a
                for name, a in assets.items()
            },
        )

    return _factory


@pytest.fixture
def app_runtime_snapshot(
    make_chunk: Callable[..., Chunk],
    make_snapshot: Callable[..., BuildSnapshot],
) -> BuildSnapshot:
    """An ``app`` chunk with a script and a stylesheet sharing one chunk
    hash, plus a runtime chunk whose manifest names both files."""
    runtime = make_chunk(
        "runtime",
        name="runtime",
        has_runtime=True,
        rendered_hash="z9z9z9",
        files=["runtime.z9z9z9.js"],
    )
    app = make_chunk(
        "app",
        name="app",
        rendered_hash="a1b2c3",
        files=["app.a1b2c3.js", "app.a1b2c3.css", "app.a1b2c3.js.map"],
    )
    return make_snapshot(
        # Runtime listed first: processing order must not depend on input order.
        [runtime, app],
        {
            "runtime.z9z9z9.js": (
                'var manifest = ["app.a1b2c3.js", "app.a1b2c3.css"];\n'
                'load("app.a1b2c3.js");\n'
            ),
            "app.a1b2c3.js": (
                'console.log("app");\n//# sourceMappingURL=app.a1b2c3.js.map\n'
            ),
            "app.a1b2c3.css": "body { color: red; }\n",
            "app.a1b2c3.js.map": RawValue(
                value='{"version":3,"file":"app.a1b2c3.js","mappings":"AAAA"}'
            ),
        },
    )
