from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal, Protocol

Difficulty = Literal["easy", "medium", "hard"]
DIFFICULTIES: tuple[Difficulty, ...] = ("easy", "medium", "hard")

TileState = Literal["hidden", "face_up", "matched"]


def check_difficulty(difficulty: str) -> Difficulty:
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty: {difficulty!r}")
    return difficulty  # type: ignore[return-value]


@dataclass(frozen=True, eq=False)
class Symbol:
    """One catalog entry. Compared by identity, never by value."""

    key: str
    accent: str


@dataclass(frozen=True)
class SymbolCatalog:
    """Immutable, ordered symbol catalog used by the engine."""

    symbols: tuple[Symbol, ...]

    def __post_init__(self) -> None:
        if not self.symbols:
            raise ValueError("Symbol catalog must not be empty.")
        keys = [s.key for s in self.symbols]
        if len(set(keys)) != len(keys):
            raise ValueError("Symbol keys must be unique.")

    @property
    def size(self) -> int:
        return len(self.symbols)

    def get(self, key: str) -> Symbol:
        for s in self.symbols:
            if s.key == key:
                return s
        raise KeyError(key)

    def keys(self) -> Sequence[str]:
        return [s.key for s in self.symbols]


@dataclass
class Tile:
    id: int
    symbol: Symbol
    is_matched: bool = False

    def matches(self, other: "Tile") -> bool:
        return self.symbol is other.symbol


def best_time_key(difficulty: str) -> str:
    return f"bestTime-{difficulty}"


class BestTimeStore(Protocol):
    def load(self, difficulty: Difficulty) -> int | None: ...

    def save(self, difficulty: Difficulty, seconds: int) -> None: ...
