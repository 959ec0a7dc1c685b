from __future__ import annotations

import json
import random

from memorymatch.engine.game import MemoryGame
from memorymatch.engine.scheduler import ManualScheduler
from memorymatch.engine.serialize import format_time, snapshot
from memorymatch.services.best_times import InMemoryBestTimeStore
from memorymatch.services.telemetry import TelemetryService


def test_format_time() -> None:
    assert format_time(0) == "0:00"
    assert format_time(7) == "0:07"
    assert format_time(65) == "1:05"
    assert format_time(600) == "10:00"


def test_snapshot_before_start() -> None:
    game = MemoryGame(store=InMemoryBestTimeStore(records={"bestTime-easy": 75}), scheduler=ManualScheduler())
    view = snapshot(game)
    assert view["started"] is False
    assert view["tiles"] == []
    assert view["catalog_size"] == 6


def test_snapshot_hides_unrevealed_symbols() -> None:
    sched = ManualScheduler()
    game = MemoryGame(store=InMemoryBestTimeStore(records={"bestTime-easy": 75}), scheduler=sched, rng=random.Random(8))
    game.start()
    game.activate(0)
    view = snapshot(game)
    json.dumps(view)

    tiles = view["tiles"]
    assert isinstance(tiles, list)
    assert tiles[0]["state"] == "face_up"
    assert tiles[0]["symbol"] is not None
    assert all(t["state"] == "hidden" and t["symbol"] is None for t in tiles[1:])
    assert view["best"] == "1:15"
    assert view["elapsed"] == "0:00"
    assert view["is_timer_running"] is True

    sched.advance(2.0)
    assert snapshot(game)["elapsed"] == "0:02"


def test_telemetry_records_completion(tmp_path) -> None:
    telemetry = TelemetryService(tmp_path / "telemetry.jsonl")
    telemetry.on_game_event({"type": "TILE_REVEALED", "index": 0})
    telemetry.on_game_event({"type": "GAME_COMPLETED", "elapsed_seconds": 9, "new_record": True})
    lines = (tmp_path / "telemetry.jsonl").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    rec = json.loads(lines[0])
    assert rec["type"] == "game_completed"
    assert rec["payload"] == {"elapsed_seconds": 9, "new_record": True}
