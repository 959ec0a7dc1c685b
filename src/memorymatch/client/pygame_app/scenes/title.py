from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from ..app import GameContext, SceneTransition
from ..ui import BACKGROUND, Button, draw_centered


class TitleScene:
    def __init__(self, ctx: GameContext) -> None:
        self.ctx = ctx
        self._next: SceneTransition | None = None
        w = ctx.screen.get_width()
        self.btn_start = Button(
            rect=pygame.Rect(w // 2 - 120, 320, 240, 56),
            text="Start Game",
            on_click=self._on_start,
        )

    def _on_start(self) -> None:
        from .board import BoardScene

        self.ctx.game.start()
        self._next = SceneTransition(BoardScene(self.ctx))

    def handle_event(self, event: pygame.event.Event) -> None:
        self.btn_start.handle_event(event)
        if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
            self._on_start()

    def update(self, dt: float) -> SceneTransition | None:
        return self._next

    def render(self, screen: pygame.Surface) -> None:
        screen.fill(BACKGROUND)
        fonts = self.ctx.fonts
        cx = screen.get_width() // 2
        draw_centered(screen, fonts.big, "Memory Match Game", (cx, 160))
        draw_centered(screen, fonts.small, "Match all the pairs as quickly as possible.", (cx, 220))
        draw_centered(
            screen,
            fonts.small,
            "Click two tiles to reveal them. Matches stay up, the rest flip back.",
            (cx, 246),
        )
        self.btn_start.draw(screen, fonts.ui)
