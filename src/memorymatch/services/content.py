from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from memorymatch.engine.types import Symbol, SymbolCatalog


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.path])
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"  at /{loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_str(obj: Mapping[str, object], key: str) -> str:
    v = obj.get(key)
    if not isinstance(v, str):
        raise ContentError(f"Expected string for {key}")
    return v


class ContentService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def load_schema(self, name: str) -> object:
        return _load_json(self._schema_dir / f"{name}.schema.json")

    def load_symbol_catalog(self) -> SymbolCatalog:
        path = self._data_dir / "symbols.json"
        raw = _load_json(path)
        validate_json(raw, self.load_schema("symbols"), context=str(path))
        if not isinstance(raw, dict):
            raise ContentError("symbols.json must be an object")
        raw_symbols = raw.get("symbols")
        if not isinstance(raw_symbols, list):
            raise ContentError("symbols.json.symbols must be a list")

        symbols: list[Symbol] = []
        for item in raw_symbols:
            if not isinstance(item, dict):
                continue
            symbols.append(Symbol(key=_require_str(item, "key"), accent=_require_str(item, "accent")))
        try:
            return SymbolCatalog(symbols=tuple(symbols))
        except ValueError as e:
            raise ContentError(f"Invalid symbol catalog in {path}: {e}") from e

    def validate_all(self) -> None:
        # Load is validation (schema + parse)
        _ = self.load_symbol_catalog()
        _ = self.load_schema("best_times")
