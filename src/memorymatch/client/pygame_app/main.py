from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pygame  # type: ignore[import-not-found]

from memorymatch.engine.game import GameConfig, MemoryGame
from memorymatch.engine.scheduler import ManualScheduler
from memorymatch.engine.types import DIFFICULTIES
from memorymatch.paths import get_paths
from memorymatch.services.best_times import JsonFileBestTimeStore
from memorymatch.services.content import ContentError, ContentService
from memorymatch.services.telemetry import TelemetryService

from .app import App, Fonts, GameContext
from .scenes.title import TitleScene

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(prog="memorymatch")
    parser.add_argument("--width", type=int, default=720)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--difficulty", choices=DIFFICULTIES, default="easy")
    parser.add_argument("--userdata", type=Path, default=None, help="directory for best times and telemetry")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    paths = get_paths(args.userdata)
    content = ContentService(data_dir=paths.data_dir, schema_dir=paths.schema_dir)
    telemetry = TelemetryService(paths.userdata_dir / "telemetry.jsonl")
    try:
        content.validate_all()
        catalog = content.load_symbol_catalog()
    except ContentError as e:
        logger.error("content failed to load: %s", e)
        telemetry.log("boot", {"ok": False, "error": str(e)})
        return 1
    telemetry.log("boot", {"ok": True})

    store = JsonFileBestTimeStore(paths.userdata_dir / "best_times.json", schema=content.load_schema("best_times"))
    scheduler = ManualScheduler()
    game = MemoryGame(
        store=store,
        scheduler=scheduler,
        catalog=catalog,
        config=GameConfig(default_difficulty=args.difficulty),
    )
    game.subscribe(telemetry.on_game_event)

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Memory Match")

    ctx = GameContext(
        screen=screen,
        clock=pygame.time.Clock(),
        paths=paths,
        fonts=Fonts.load(),
        content=content,
        telemetry=telemetry,
        scheduler=scheduler,
        game=game,
    )

    app = App(ctx, TitleScene(ctx))
    try:
        return app.run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())
