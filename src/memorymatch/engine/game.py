from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable

from .deck import DEFAULT_CATALOG, build_deck
from .scheduler import Handle, Scheduler
from .types import (
    BestTimeStore,
    Difficulty,
    SymbolCatalog,
    Tile,
    TileState,
    check_difficulty,
)

logger = logging.getLogger(__name__)

Event = dict[str, object]
Listener = Callable[[Event], None]


@dataclass(frozen=True)
class GameConfig:
    match_delay: float = 0.5
    mismatch_delay: float = 1.0
    tick_interval: float = 1.0
    default_difficulty: Difficulty = "easy"


@dataclass
class GameSession:
    difficulty: Difficulty
    tiles: list[Tile]
    catalog_size: int
    generation: int
    best_time: int | None = None
    selection: list[int] = field(default_factory=list)
    match_count: int = 0
    is_resolving: bool = False
    elapsed_seconds: int = 0
    is_timer_running: bool = False
    event_log: list[Event] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return self.match_count == self.catalog_size

    def tile_state(self, index: int) -> TileState:
        if self.tiles[index].is_matched:
            return "matched"
        if index in self.selection:
            return "face_up"
        return "hidden"


class MemoryGame:
    """Owns the current session and drives the reveal/resolve cycle.

    All mutation happens from ``activate``, ``start``/``reset`` or from
    callbacks run by the injected scheduler, which must run them on the same
    thread that calls ``activate``. Callbacks belonging to a replaced session
    are cancelled, and ignored if they fire anyway.
    """

    def __init__(
        self,
        store: BestTimeStore,
        scheduler: Scheduler,
        catalog: SymbolCatalog = DEFAULT_CATALOG,
        rng: random.Random | None = None,
        config: GameConfig | None = None,
    ) -> None:
        self.store = store
        self.scheduler = scheduler
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.config = config or GameConfig()
        self.session: GameSession | None = None

        self._difficulty: Difficulty = check_difficulty(self.config.default_difficulty)
        self._best_times: dict[str, int] = {}
        self._generation = 0
        self._resolution: Handle | None = None
        self._tick: Handle | None = None
        self._listeners: list[Listener] = []

    # -------- Lifecycle --------
    @property
    def has_started(self) -> bool:
        return self.session is not None

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    def start(self, difficulty: Difficulty | None = None) -> GameSession:
        if self.session is not None:
            return self.session
        if difficulty is not None:
            self._difficulty = check_difficulty(difficulty)
        self._refresh_best_time(self._difficulty)
        return self._new_session()

    def reset(self, difficulty: Difficulty | None = None) -> GameSession:
        if difficulty is not None:
            check_difficulty(difficulty)
        self._cancel_pending()
        if difficulty is not None and difficulty != self._difficulty:
            self._difficulty = difficulty
            self._refresh_best_time(self._difficulty)
        elif self.session is None:
            self._refresh_best_time(self._difficulty)
        return self._new_session()

    def select_difficulty(self, difficulty: Difficulty) -> GameSession:
        return self.reset(difficulty)

    def _new_session(self) -> GameSession:
        self._generation += 1
        tiles = build_deck(self._difficulty, self.catalog, self.rng)
        self.session = GameSession(
            difficulty=self._difficulty,
            tiles=tiles,
            catalog_size=self.catalog.size,
            generation=self._generation,
            best_time=self._best_times.get(self._difficulty),
        )
        logger.debug("session %d started (%s)", self._generation, self._difficulty)
        self._emit(
            self.session,
            {"type": "SESSION_STARTED", "difficulty": self._difficulty, "generation": self._generation},
        )
        return self.session

    def _cancel_pending(self) -> None:
        for handle in (self._resolution, self._tick):
            if handle is not None:
                handle.cancel()
        self._resolution = None
        self._tick = None

    def _is_current(self, generation: int) -> bool:
        return self.session is not None and self.session.generation == generation

    # -------- Best time --------
    def _refresh_best_time(self, difficulty: Difficulty) -> None:
        try:
            loaded = self.store.load(difficulty)
        except Exception:
            logger.warning("could not load best time for %s", difficulty, exc_info=True)
            loaded = None
        candidates = [t for t in (loaded, self._best_times.get(difficulty)) if t is not None]
        if candidates:
            self._best_times[difficulty] = min(candidates)
        else:
            self._best_times.pop(difficulty, None)

    def _record_best_time(self, session: GameSession) -> bool:
        if session.best_time is not None and session.elapsed_seconds >= session.best_time:
            return False
        session.best_time = session.elapsed_seconds
        self._best_times[session.difficulty] = session.elapsed_seconds
        try:
            self.store.save(session.difficulty, session.elapsed_seconds)
        except Exception:
            logger.warning("could not save best time for %s", session.difficulty, exc_info=True)
        self._emit(
            session,
            {"type": "NEW_BEST_TIME", "difficulty": session.difficulty, "seconds": session.elapsed_seconds},
        )
        return True

    @property
    def best_time(self) -> int | None:
        return self._best_times.get(self._difficulty)

    # -------- Events --------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, session: GameSession, event: Event) -> None:
        session.event_log.append(event)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("listener failed on %s", event.get("type"))

    # -------- Reveal / resolve --------
    def tile_state(self, index: int) -> TileState:
        if self.session is None:
            return "hidden"
        return self.session.tile_state(index)

    @property
    def is_complete(self) -> bool:
        return self.session is not None and self.session.is_complete

    def activate(self, index: int) -> bool:
        """Reveal the tile at ``index``. Returns False when the activation is ignored."""
        s = self.session
        if s is None:
            return False
        if index < 0 or index >= len(s.tiles):
            return False
        if s.is_resolving or s.tiles[index].is_matched:
            return False
        if index in s.selection or len(s.selection) >= 2:
            return False

        if not s.is_timer_running and not s.is_complete:
            self._start_timer(s)

        s.selection.append(index)
        self._emit(s, {"type": "TILE_REVEALED", "index": index, "tile_id": s.tiles[index].id})

        if len(s.selection) == 2:
            s.is_resolving = True
            first, second = (s.tiles[i] for i in s.selection)
            if first.matches(second):
                self._resolution = self._schedule(s, self.config.match_delay, self._settle_match)
            else:
                self._resolution = self._schedule(s, self.config.mismatch_delay, self._revert_mismatch)
        return True

    def _schedule(
        self, session: GameSession, delay: float, effect: Callable[[GameSession], None]
    ) -> Handle:
        generation = session.generation

        def run() -> None:
            if not self._is_current(generation):
                return
            assert self.session is not None
            effect(self.session)

        return self.scheduler.call_later(delay, run)

    def _settle_match(self, s: GameSession) -> None:
        self._resolution = None
        a, b = s.selection
        s.tiles[a].is_matched = True
        s.tiles[b].is_matched = True
        s.selection.clear()
        s.match_count += 1
        s.is_resolving = False
        self._emit(s, {"type": "PAIR_MATCHED", "indexes": [a, b], "match_count": s.match_count})
        if s.is_complete:
            self._complete(s)

    def _revert_mismatch(self, s: GameSession) -> None:
        self._resolution = None
        indexes = list(s.selection)
        s.selection.clear()
        s.is_resolving = False
        self._emit(s, {"type": "PAIR_MISMATCHED", "indexes": indexes})

    def _complete(self, s: GameSession) -> None:
        if self._tick is not None:
            self._tick.cancel()
            self._tick = None
        s.is_timer_running = False
        new_record = self._record_best_time(s)
        logger.debug("session %d complete in %ds", s.generation, s.elapsed_seconds)
        self._emit(
            s,
            {
                "type": "GAME_COMPLETED",
                "difficulty": s.difficulty,
                "elapsed_seconds": s.elapsed_seconds,
                "best_time": s.best_time,
                "new_record": new_record,
            },
        )

    # -------- Timer --------
    def _start_timer(self, s: GameSession) -> None:
        s.is_timer_running = True
        self._emit(s, {"type": "TIMER_STARTED"})
        self._tick = self._schedule(s, self.config.tick_interval, self._on_tick)

    def _on_tick(self, s: GameSession) -> None:
        if s.is_complete or not s.is_timer_running:
            self._tick = None
            return
        s.elapsed_seconds += 1
        self._emit(s, {"type": "TIMER_TICK", "elapsed_seconds": s.elapsed_seconds})
        self._tick = self._schedule(s, self.config.tick_interval, self._on_tick)
