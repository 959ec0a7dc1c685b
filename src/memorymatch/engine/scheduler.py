"""Callback scheduling for the engine's delayed resolutions and timer tick.

The engine never sleeps or spawns threads. It asks a scheduler to run a
callback later and keeps the returned handle so the callback can be
cancelled when the session it belongs to is replaced.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, Protocol

Callback = Callable[[], None]


class Handle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callback) -> Handle: ...


@dataclass
class ManualHandle:
    deadline: float
    callback: Callback
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualScheduler:
    """Virtual-clock scheduler advanced explicitly by the caller.

    A frame loop calls ``advance(dt)`` once per frame; tests call it to jump
    straight past a delay.
    """

    now: float = 0.0
    _queue: list[tuple[float, int, ManualHandle]] = field(default_factory=list)
    _seq: itertools.count = field(default_factory=itertools.count)

    def call_later(self, delay: float, callback: Callback) -> ManualHandle:
        handle = ManualHandle(deadline=self.now + max(0.0, delay), callback=callback)
        heapq.heappush(self._queue, (handle.deadline, next(self._seq), handle))
        return handle

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing every due callback in order.

        Callbacks scheduled while advancing fire too if their deadline falls
        inside the window. Returns the number of callbacks fired.
        """
        if seconds < 0:
            raise ValueError("Cannot advance a clock backwards.")
        target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            deadline, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now = deadline
            handle.callback()
            fired += 1
        self.now = target
        return fired

    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop's ``call_later``."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callback) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)
