from __future__ import annotations

import asyncio

import pytest

from memorymatch.engine.game import GameConfig, MemoryGame
from memorymatch.engine.scheduler import AsyncioScheduler, ManualScheduler
from memorymatch.engine.types import Symbol, SymbolCatalog
from memorymatch.services.best_times import InMemoryBestTimeStore


def test_manual_scheduler_fires_in_deadline_order() -> None:
    sched = ManualScheduler()
    fired: list[str] = []
    sched.call_later(1.0, lambda: fired.append("late"))
    sched.call_later(0.5, lambda: fired.append("early"))
    sched.call_later(1.0, lambda: fired.append("late-2"))

    assert sched.advance(0.4) == 0
    assert sched.advance(0.6) == 3
    assert fired == ["early", "late", "late-2"]
    assert sched.now == pytest.approx(1.0)


def test_manual_scheduler_cancel_and_chaining() -> None:
    sched = ManualScheduler()
    fired: list[float] = []

    def again() -> None:
        fired.append(sched.now)
        if len(fired) < 3:
            sched.call_later(1.0, again)

    sched.call_later(1.0, again)
    dropped = sched.call_later(0.5, lambda: fired.append(-1.0))
    dropped.cancel()
    assert sched.pending() == 1

    sched.advance(10.0)
    assert fired == [1.0, 2.0, 3.0]
    assert sched.pending() == 0

    with pytest.raises(ValueError):
        sched.advance(-1.0)


def test_asyncio_scheduler_drives_resolution() -> None:
    catalog = SymbolCatalog(symbols=(Symbol("a", "rose"), Symbol("b", "sky")))

    async def scenario() -> MemoryGame:
        game = MemoryGame(
            store=InMemoryBestTimeStore(),
            scheduler=AsyncioScheduler(),
            catalog=catalog,
            config=GameConfig(match_delay=0.01, mismatch_delay=0.01, tick_interval=5.0),
        )
        session = game.start()
        first = 0
        second = next(
            i for i, t in enumerate(session.tiles) if i != first and t.matches(session.tiles[first])
        )
        assert game.activate(first)
        assert game.activate(second)
        assert session.is_resolving
        await asyncio.sleep(0.05)
        return game

    game = asyncio.run(scenario())
    assert game.session is not None
    assert game.session.match_count == 1
    assert not game.session.is_resolving
