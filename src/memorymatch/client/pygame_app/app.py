from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import pygame  # type: ignore[import-not-found]

from memorymatch.engine.game import MemoryGame
from memorymatch.engine.scheduler import ManualScheduler
from memorymatch.paths import Paths
from memorymatch.services.content import ContentService
from memorymatch.services.telemetry import TelemetryService


@dataclass
class SceneTransition:
    next_scene: "Scene"


class Scene(Protocol):
    def handle_event(self, event: pygame.event.Event) -> None: ...
    def update(self, dt: float) -> SceneTransition | None: ...
    def render(self, screen: pygame.Surface) -> None: ...


@dataclass
class Fonts:
    ui: pygame.font.Font
    small: pygame.font.Font
    big: pygame.font.Font

    @staticmethod
    def load() -> "Fonts":
        pygame.font.init()
        return Fonts(
            ui=pygame.font.SysFont(None, 28),
            small=pygame.font.SysFont(None, 20),
            big=pygame.font.SysFont(None, 44),
        )


@dataclass
class GameContext:
    screen: pygame.Surface
    clock: pygame.time.Clock
    paths: Paths
    fonts: Fonts
    content: ContentService
    telemetry: TelemetryService
    scheduler: ManualScheduler
    game: MemoryGame


class App:
    def __init__(self, ctx: GameContext, initial_scene: Scene) -> None:
        self.ctx = ctx
        self.scene: Scene = initial_scene
        self.running = True

    def run(self) -> int:
        while self.running:
            dt = self.ctx.clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    break
                self.scene.handle_event(event)

            # Engine delays and the timer tick fire from here, on this thread.
            self.ctx.scheduler.advance(dt)

            tr = self.scene.update(dt)
            if tr is not None:
                self.scene = tr.next_scene

            self.scene.render(self.ctx.screen)
            pygame.display.flip()

        return 0
