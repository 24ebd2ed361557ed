"""Tests for identifier resolution and substitution keys."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from rehash.core.identifiers import (
    MissingIdentifierTable,
    file_extension,
    file_reference,
    is_main_file,
    resolve_old_hash,
    substitution_key,
)
from rehash.models.chunks import Chunk
from rehash.models.config import HashStrategy
from rehash.models.substitutions import SubstitutionKey


class TestMainFiles:
    def test_scripts_and_styles_of_named_chunk(self, make_chunk: Callable[..., Chunk]):
        chunk = make_chunk(name="app")
        assert is_main_file("app.a1b2c3.js", chunk)
        assert is_main_file("app.a1b2c3.css", chunk)

    def test_maps_and_manifests_are_secondary(self, make_chunk: Callable[..., Chunk]):
        chunk = make_chunk(name="app")
        assert not is_main_file("app.a1b2c3.js.map", chunk)
        assert not is_main_file("manifest.json", chunk)

    @pytest.mark.parametrize("name", [None, ""])
    def test_unnamed_chunk_has_no_main_files(
        self, make_chunk: Callable[..., Chunk], name: str | None
    ):
        chunk = make_chunk(chunk_id=42, name=name)
        assert not is_main_file("42.a1b2c3.js", chunk)

    def test_file_extension(self):
        assert file_extension("static/js/app.a1b2c3.js") == ".js"
        assert file_extension("app.a1b2c3.js.map") == ".map"


class TestResolveOldHash:
    def test_chunkhash_uses_rendered_hash(self, make_chunk: Callable[..., Chunk]):
        chunk = make_chunk(rendered_hash="shared1")
        assert resolve_old_hash(HashStrategy.CHUNKHASH, "app.shared1.js", chunk) == "shared1"
        assert resolve_old_hash("chunkhash", "app.shared1.css", chunk) == "shared1"

    def test_contenthash_per_content_type(self, make_chunk: Callable[..., Chunk]):
        chunk = make_chunk(
            content_hash={"javascript": "js0001", "css/mini-extract": "css001"}
        )
        assert resolve_old_hash(HashStrategy.CONTENTHASH, "app.js0001.js", chunk) == "js0001"
        assert resolve_old_hash(HashStrategy.CONTENTHASH, "app.css001.css", chunk) == "css001"

    def test_contenthash_missing_entry(self, make_chunk: Callable[..., Chunk]):
        chunk = make_chunk(chunk_id="app", content_hash={"javascript": "js0001"})
        with pytest.raises(MissingIdentifierTable) as exc_info:
            resolve_old_hash(HashStrategy.CONTENTHASH, "app.x.css", chunk)
        assert exc_info.value.chunk_id == "app"
        assert exc_info.value.content_type == "css/mini-extract"
        assert "css/mini-extract" in str(exc_info.value)

    def test_unknown_strategy(self, make_chunk: Callable[..., Chunk]):
        with pytest.raises(ValueError):
            resolve_old_hash("fullhash", "app.x.js", make_chunk())


class TestSubstitutionKey:
    def test_chunkhash_keys_by_file_reference(self):
        js = substitution_key(HashStrategy.CHUNKHASH, "a1b2c3", "app.a1b2c3.js")
        css = substitution_key(HashStrategy.CHUNKHASH, "a1b2c3", "app.a1b2c3.css")
        assert js != css
        assert js == SubstitutionKey(token="a1b2c3", reference="app.a1b2c3.js")
        assert str(css) == "a1b2c3___app.a1b2c3.css"

    def test_same_extension_files_get_distinct_keys(self):
        app = substitution_key(HashStrategy.CHUNKHASH, "a1b2c3", "app.a1b2c3.js")
        polyfills = substitution_key(
            HashStrategy.CHUNKHASH, "a1b2c3", "polyfills.a1b2c3.js"
        )
        assert app != polyfills

    def test_contenthash_uses_bare_token(self):
        key = substitution_key(HashStrategy.CONTENTHASH, "js0001", "app.js0001.js")
        assert key.reference is None
        assert not key.bounded
        assert key.needle == "js0001"
        assert str(key) == "js0001"

    def test_reference_needle_and_replacement(self):
        key = SubstitutionKey(token="a1b2c3", reference="app.a1b2c3.bundle.js")
        assert key.bounded
        assert key.needle == "app.a1b2c3.bundle.js"
        assert key.replacement("ffff") == "app.ffff.bundle.js"


class TestFileReference:
    def test_drops_leading_directories(self):
        assert file_reference("static/js/app.a1b2c3.js", "a1b2c3") == "app.a1b2c3.js"

    def test_keeps_hash_directory(self):
        assert file_reference("a1b2c3/app.js", "a1b2c3") == "a1b2c3/app.js"
        assert file_reference("js/a1b2c3/app.js", "a1b2c3") == "a1b2c3/app.js"

    def test_infix_suffix(self):
        assert (
            file_reference("app.a1b2c3.bundle.js", "a1b2c3") == "app.a1b2c3.bundle.js"
        )
