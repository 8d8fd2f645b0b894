"""Executable entrypoint for the scrolling game."""

from __future__ import annotations

from pathlib import Path
import logging
import os
import pygame

from .controls import KeyboardInput
from .display import PygameDisplay, load_background
from .game import SideScroller, play
from .settings import SettingsManager

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main() -> int:
    """Launch the game and return the process exit status."""
    setup_logging(os.getenv("SCROLLGAME_DEBUG", "false").lower() == "true")

    root = Path(__file__).resolve().parents[2]
    settings = SettingsManager().settings
    display = PygameDisplay(settings.rows, settings.cols, settings.display, root=root)
    try:
        game = SideScroller(settings, display=display)
        if settings.display.background_image:
            try:
                load_background(game.grid, root / settings.display.background_image)
            except (pygame.error, OSError, ValueError) as exc:
                logger.warning("Could not load background %s: %s", settings.display.background_image, exc)

        clock = pygame.time.Clock()
        score = play(
            game,
            KeyboardInput(),
            pace=lambda: clock.tick(1000 / settings.tick_ms),
            refresh=display.refresh,
        )
    finally:
        display.close()

    logger.info("Final score: %d", score)
    print(f"Final score: {score}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
