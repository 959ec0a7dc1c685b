"""Headless game-state engine for memorymatch.

IMPORTANT: This package must never import pygame.
"""

from .deck import DEFAULT_CATALOG, build_deck
from .game import GameConfig, GameSession, MemoryGame
from .scheduler import AsyncioScheduler, ManualScheduler, Scheduler
from .types import DIFFICULTIES, BestTimeStore, Difficulty, Symbol, SymbolCatalog, Tile, TileState

__all__ = [
    "AsyncioScheduler",
    "BestTimeStore",
    "DEFAULT_CATALOG",
    "DIFFICULTIES",
    "Difficulty",
    "GameConfig",
    "GameSession",
    "ManualScheduler",
    "MemoryGame",
    "Scheduler",
    "Symbol",
    "SymbolCatalog",
    "Tile",
    "TileState",
    "build_deck",
]
