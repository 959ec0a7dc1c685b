from __future__ import annotations

from .game import GameSession, MemoryGame


def format_time(seconds: int) -> str:
    mins, secs = divmod(max(0, seconds), 60)
    return f"{mins}:{secs:02d}"


def _tile_to_dict(session: GameSession, index: int) -> dict[str, object]:
    tile = session.tiles[index]
    state = session.tile_state(index)
    shown = state != "hidden"
    return {
        "id": tile.id,
        "state": state,
        "symbol": tile.symbol.key if shown else None,
        "accent": tile.symbol.accent if shown else None,
    }


def snapshot(game: MemoryGame) -> dict[str, object]:
    """Return a JSON-serializable view of what the board should show right now."""
    s = game.session
    best = game.best_time if s is None else s.best_time
    if s is None:
        return {
            "started": False,
            "difficulty": game.difficulty,
            "tiles": [],
            "selection": [],
            "match_count": 0,
            "catalog_size": game.catalog.size,
            "elapsed_seconds": 0,
            "elapsed": format_time(0),
            "best_time": best,
            "best": format_time(best) if best is not None else None,
            "is_resolving": False,
            "is_timer_running": False,
            "is_complete": False,
        }
    return {
        "started": True,
        "difficulty": s.difficulty,
        "tiles": [_tile_to_dict(s, i) for i in range(len(s.tiles))],
        "selection": list(s.selection),
        "match_count": s.match_count,
        "catalog_size": s.catalog_size,
        "elapsed_seconds": s.elapsed_seconds,
        "elapsed": format_time(s.elapsed_seconds),
        "best_time": best,
        "best": format_time(best) if best is not None else None,
        "is_resolving": s.is_resolving,
        "is_timer_running": s.is_timer_running,
        "is_complete": s.is_complete,
    }
