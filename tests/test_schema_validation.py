from __future__ import annotations

import json

import pytest

from memorymatch.engine.deck import DEFAULT_CATALOG
from memorymatch.paths import get_paths
from memorymatch.services.content import ContentError, ContentService


def test_content_schemas_validate() -> None:
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    content.validate_all()


def test_symbol_catalog_matches_builtin_default() -> None:
    paths = get_paths()
    catalog = ContentService(paths.data_dir, paths.schema_dir).load_symbol_catalog()
    assert catalog.size == 6
    assert list(catalog.keys()) == list(DEFAULT_CATALOG.keys())
    assert [s.accent for s in catalog.symbols] == [s.accent for s in DEFAULT_CATALOG.symbols]


def test_invalid_catalog_is_rejected(tmp_path) -> None:
    paths = get_paths()
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    # duplicate key passes the schema but not the catalog invariant
    (data_dir / "symbols.json").write_text(
        json.dumps({"version": 1, "symbols": [{"key": "sun", "accent": "a"}, {"key": "sun", "accent": "b"}]}),
        encoding="utf-8",
    )
    content = ContentService(data_dir, paths.schema_dir)
    with pytest.raises(ContentError):
        content.load_symbol_catalog()

    (data_dir / "symbols.json").write_text(json.dumps({"version": 1, "symbols": []}), encoding="utf-8")
    with pytest.raises(ContentError, match="Schema validation failed"):
        content.load_symbol_catalog()


def test_missing_catalog_file(tmp_path) -> None:
    paths = get_paths()
    content = ContentService(tmp_path, paths.schema_dir)
    with pytest.raises(ContentError, match="Missing content file"):
        content.load_symbol_catalog()
