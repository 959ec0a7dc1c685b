from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from memorymatch.engine.serialize import snapshot
from memorymatch.engine.types import DIFFICULTIES

from ..app import GameContext, SceneTransition
from ..ui import BACKGROUND, Button, draw_centered, draw_text, draw_tile

COLUMNS = 4
TILE_SIZE = 104
GAP = 12
BOARD_TOP = 170


class BoardScene:
    def __init__(self, ctx: GameContext) -> None:
        self.ctx = ctx
        w = ctx.screen.get_width()
        h = ctx.screen.get_height()
        self.btn_new = Button(
            rect=pygame.Rect(w // 2 - 120, h - 80, 240, 50),
            text="Start New Game",
            on_click=lambda: self.ctx.game.reset(),
        )
        self.difficulty_buttons: list[Button] = []
        for i, diff in enumerate(DIFFICULTIES):
            self.difficulty_buttons.append(
                Button(
                    rect=pygame.Rect(20 + i * 110, 20, 100, 36),
                    text=diff.capitalize(),
                    on_click=lambda d=diff: self.ctx.game.select_difficulty(d),
                )
            )

    def _tile_rects(self, count: int) -> list[pygame.Rect]:
        cols = min(COLUMNS, count) or 1
        width = cols * TILE_SIZE + (cols - 1) * GAP
        left = (self.ctx.screen.get_width() - width) // 2
        rects: list[pygame.Rect] = []
        for i in range(count):
            row, col = divmod(i, cols)
            rects.append(
                pygame.Rect(left + col * (TILE_SIZE + GAP), BOARD_TOP + row * (TILE_SIZE + GAP), TILE_SIZE, TILE_SIZE)
            )
        return rects

    def _hit_test_tile(self, pos: tuple[int, int]) -> int | None:
        session = self.ctx.game.session
        if session is None:
            return None
        for i, r in enumerate(self._tile_rects(len(session.tiles))):
            if r.collidepoint(pos):
                return i
        return None

    def handle_event(self, event: pygame.event.Event) -> None:
        self.btn_new.handle_event(event)
        for b in self.difficulty_buttons:
            b.handle_event(event)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            index = self._hit_test_tile(event.pos)
            if index is not None:
                self.ctx.game.activate(index)
        if event.type == pygame.KEYDOWN and event.key == pygame.K_r:
            self.ctx.game.reset()

    def update(self, dt: float) -> SceneTransition | None:
        for b in self.difficulty_buttons:
            b.selected = b.text.lower() == self.ctx.game.difficulty
        return None

    def render(self, screen: pygame.Surface) -> None:
        screen.fill(BACKGROUND)
        fonts = self.ctx.fonts
        view = snapshot(self.ctx.game)
        cx = screen.get_width() // 2

        for b in self.difficulty_buttons:
            b.draw(screen, fonts.small)
        draw_text(screen, fonts.big, str(view["elapsed"]), (screen.get_width() - 110, 18))
        draw_centered(screen, fonts.big, "Memory Match Game", (cx, 80))
        draw_centered(
            screen,
            fonts.ui,
            f"Matches found: {view['match_count']} of {view['catalog_size']}",
            (cx, 118),
        )
        draw_centered(screen, fonts.ui, f"Best Time: {view['best'] or '-:--'}", (cx, 144))

        tiles = view["tiles"]
        assert isinstance(tiles, list)
        for rect, tile in zip(self._tile_rects(len(tiles)), tiles):
            draw_tile(screen, fonts.small, rect, tile["state"], tile["symbol"], tile["accent"])

        if view["is_complete"]:
            draw_centered(
                screen,
                fonts.ui,
                "Congratulations! You've found all the matches!",
                (cx, screen.get_height() - 110),
                color=(74, 222, 128),
            )
        self.btn_new.draw(screen, fonts.ui)
