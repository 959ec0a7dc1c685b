from __future__ import annotations

import random
from collections import Counter

import pytest

from memorymatch.engine.deck import DEFAULT_CATALOG, build_deck
from memorymatch.engine.types import DIFFICULTIES, Symbol, SymbolCatalog


def test_deck_validity_for_every_difficulty() -> None:
    for difficulty in DIFFICULTIES:
        deck = build_deck(difficulty, rng=random.Random(11))
        # difficulty does not size the deck
        assert len(deck) == 2 * DEFAULT_CATALOG.size == 12
        counts = Counter(id(t.symbol) for t in deck)
        assert set(counts.values()) == {2}
        assert len({t.id for t in deck}) == len(deck)
        assert not any(t.is_matched for t in deck)


def test_pair_ids_follow_catalog_index() -> None:
    deck = build_deck("easy", rng=random.Random(3))
    by_id = {t.id: t for t in deck}
    for k, sym in enumerate(DEFAULT_CATALOG.symbols):
        assert by_id[2 * k].symbol is sym
        assert by_id[2 * k + 1].symbol is sym


def test_shuffle_is_seeded_permutation() -> None:
    a = [t.id for t in build_deck("medium", rng=random.Random(424242))]
    b = [t.id for t in build_deck("medium", rng=random.Random(424242))]
    assert a == b
    assert sorted(a) == list(range(12))


def test_shuffle_has_no_fixed_position_bias() -> None:
    rng = random.Random(2024)
    builds = 2400
    at_home = Counter()
    seen_positions: dict[int, set[int]] = {i: set() for i in range(12)}
    for _ in range(builds):
        for pos, tile in enumerate(build_deck("easy", rng=rng)):
            seen_positions[tile.id].add(pos)
            if pos == tile.id:
                at_home[tile.id] += 1
    # expected ~200 per id for a uniform shuffle
    for tile_id in range(12):
        assert len(seen_positions[tile_id]) == 12
        assert 100 < at_home[tile_id] < 320


def test_unknown_difficulty_raises() -> None:
    with pytest.raises(ValueError):
        build_deck("impossible")  # type: ignore[arg-type]


def test_symbols_match_by_identity_not_value() -> None:
    a = Symbol(key="x", accent="rose")
    twin = Symbol(key="x", accent="rose")
    catalog = SymbolCatalog(symbols=(a, Symbol(key="y", accent="sky")))
    deck = build_deck("easy", catalog=catalog, rng=random.Random(1))
    first = next(t for t in deck if t.symbol is a)
    assert first.symbol is not twin
    assert first.matches(next(t for t in deck if t.symbol is a and t.id != first.id))


def test_catalog_rejects_empty_or_duplicate() -> None:
    with pytest.raises(ValueError):
        SymbolCatalog(symbols=())
    with pytest.raises(ValueError):
        SymbolCatalog(symbols=(Symbol("a", "rose"), Symbol("a", "sky")))
