from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pygame  # type: ignore[import-not-found]


Color = tuple[int, int, int]

BACKGROUND: Color = (18, 14, 40)
TEXT: Color = (199, 210, 254)

ACCENT_COLORS: dict[str, Color] = {
    "rose": (251, 113, 133),
    "amber": (251, 191, 36),
    "yellow": (250, 204, 21),
    "purple": (192, 132, 252),
    "sky": (56, 189, 248),
    "emerald": (52, 211, 153),
}

TILE_COLORS: dict[str, Color] = {
    "hidden": (30, 27, 75),
    "face_up": (55, 48, 120),
    "matched": (49, 46, 129),
}


def draw_text(
    screen: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: tuple[int, int],
    color: Color = TEXT,
) -> None:
    img = font.render(text, True, color)
    screen.blit(img, pos)


def draw_centered(
    screen: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    center: tuple[int, int],
    color: Color = TEXT,
) -> None:
    img = font.render(text, True, color)
    screen.blit(img, img.get_rect(center=center).topleft)


@dataclass
class Button:
    rect: pygame.Rect
    text: str
    on_click: Callable[[], None]
    enabled: bool = True
    selected: bool = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not self.enabled:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.on_click()
                return True
        return False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        if not self.enabled:
            bg: Color = (25, 23, 50)
        elif self.selected:
            bg = (34, 197, 94)
        else:
            bg = (30, 27, 75)
        pygame.draw.rect(screen, bg, self.rect, border_radius=8)
        pygame.draw.rect(screen, (67, 56, 202), self.rect, width=2, border_radius=8)
        draw_centered(screen, font, self.text, self.rect.center)


def draw_tile(
    screen: pygame.Surface,
    font: pygame.font.Font,
    rect: pygame.Rect,
    state: str,
    symbol: str | None,
    accent: str | None,
) -> None:
    pygame.draw.rect(screen, TILE_COLORS.get(state, TILE_COLORS["hidden"]), rect, border_radius=10)
    border = (129, 140, 248) if state == "matched" else (55, 48, 163)
    pygame.draw.rect(screen, border, rect, width=2, border_radius=10)
    if symbol is None:
        return
    color = ACCENT_COLORS.get(accent or "", TEXT)
    pygame.draw.circle(screen, color, rect.center, rect.width // 4)
    draw_centered(screen, font, symbol, (rect.centerx, rect.bottom - 14), color)
