from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from memorymatch.engine.types import BestTimeStore, Difficulty, best_time_key
from memorymatch.services.content import ContentError, validate_json

logger = logging.getLogger(__name__)

__all__ = [
    "BestTimeStore",
    "BestTimeStoreError",
    "InMemoryBestTimeStore",
    "JsonFileBestTimeStore",
]


class BestTimeStoreError(RuntimeError):
    pass


@dataclass
class InMemoryBestTimeStore:
    records: dict[str, int] = field(default_factory=dict)

    def load(self, difficulty: Difficulty) -> int | None:
        return self.records.get(best_time_key(difficulty))

    def save(self, difficulty: Difficulty, seconds: int) -> None:
        self.records[best_time_key(difficulty)] = seconds


class JsonFileBestTimeStore:
    """Best times kept in one small JSON object keyed ``bestTime-<difficulty>``.

    A missing file means no records. A corrupt or unwritable file raises
    ``BestTimeStoreError``; deciding whether that matters is up to the caller.
    """

    def __init__(self, path: Path, schema: object | None = None) -> None:
        self._path = path
        self._schema = schema

    def _read(self) -> dict[str, int]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise BestTimeStoreError(f"Cannot read best times from {self._path}: {e}") from e
        if self._schema is not None:
            try:
                validate_json(raw, self._schema, context=str(self._path))
            except ContentError as e:
                raise BestTimeStoreError(str(e)) from e
        if not isinstance(raw, dict):
            raise BestTimeStoreError(f"{self._path} must hold a JSON object")
        return {k: v for k, v in raw.items() if isinstance(k, str) and isinstance(v, int)}

    def load(self, difficulty: Difficulty) -> int | None:
        return self._read().get(best_time_key(difficulty))

    def save(self, difficulty: Difficulty, seconds: int) -> None:
        records = self._read()
        records[best_time_key(difficulty)] = int(seconds)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(records, indent=2, sort_keys=True), encoding="utf-8")
            tmp.replace(self._path)
        except OSError as e:
            raise BestTimeStoreError(f"Cannot write best times to {self._path}: {e}") from e
        logger.info("saved best time %ds for %s", seconds, difficulty)
