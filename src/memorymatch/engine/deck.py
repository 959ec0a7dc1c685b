from __future__ import annotations

import random

from .types import Difficulty, Symbol, SymbolCatalog, Tile, check_difficulty

DEFAULT_CATALOG = SymbolCatalog(
    symbols=(
        Symbol(key="heart", accent="rose"),
        Symbol(key="star", accent="amber"),
        Symbol(key="sun", accent="yellow"),
        Symbol(key="moon", accent="purple"),
        Symbol(key="cloud", accent="sky"),
        Symbol(key="flower", accent="emerald"),
    )
)


def _shuffle(rng: random.Random, items: list[Tile]) -> None:
    # Random.shuffle is a Fisher-Yates swap shuffle.
    rng.shuffle(items)


def build_deck(
    difficulty: Difficulty,
    catalog: SymbolCatalog = DEFAULT_CATALOG,
    rng: random.Random | None = None,
) -> list[Tile]:
    """Return a shuffled deck holding two tiles per catalog symbol.

    Difficulty is validated but does not change the deck: every difficulty
    uses the whole catalog.
    """
    check_difficulty(difficulty)
    tiles: list[Tile] = []
    for k, sym in enumerate(catalog.symbols):
        tiles.append(Tile(id=2 * k, symbol=sym))
        tiles.append(Tile(id=2 * k + 1, symbol=sym))
    _shuffle(rng or random.Random(), tiles)
    return tiles
