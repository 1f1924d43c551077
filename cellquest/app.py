"""Command entry point: window setup and the main loop."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable
from pathlib import Path

import pygame

from cellquest.drawing import Renderer
from cellquest.game_logic import new_game, update_game
from cellquest.input import Key, handle_held_keys, handle_key_down
from cellquest.models import (
    DEFAULT_FONT_PATH,
    FONT_SIZE_NORMAL,
    FONT_SIZE_TITLE,
    FPS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Game,
    Level,
)

logger = logging.getLogger(__name__)

_KEY_MAP: dict[int, Key] = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_m: Key.M,
    pygame.K_n: Key.N,
    pygame.K_r: Key.R,
}


def _translate_key(pygame_key: int) -> Key | None:
    return _KEY_MAP.get(pygame_key)


def _process_events(game: Game, events: Iterable[pygame.event.Event]) -> None:
    for event in events:
        if event.type == pygame.QUIT:
            game.running = False
        elif event.type == pygame.KEYDOWN:
            key = _translate_key(event.key)
            if key is not None:
                handle_key_down(game, key)


def _held_keys() -> list[Key]:
    pressed = pygame.key.get_pressed()
    return [key for code, key in _KEY_MAP.items() if pressed[code]]


def _load_font(path: str, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(path, size)
    except (OSError, pygame.error):
        logger.warning("Failed to load font %s; using the default font", path)
        return pygame.font.Font(None, size)


def _load_backgrounds(levels: list[Level], directory: Path) -> None:
    for number, level in enumerate(levels, start=1):
        path = directory / f"background_{number}.png"
        try:
            level.background = pygame.image.load(str(path))
        except (OSError, pygame.error):
            logger.warning("Failed to load background: %s", path)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cellquest", description="Cancer Cell Adventure")
    parser.add_argument("--font", default=DEFAULT_FONT_PATH, help="TrueType font to use")
    parser.add_argument(
        "--sprites",
        type=Path,
        default=Path("resources/sprites"),
        help="directory holding background_<n>.png images",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until the player quits."""
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Cancer Cell Adventure")
        renderer = Renderer(
            screen,
            _load_font(args.font, FONT_SIZE_NORMAL),
            _load_font(args.font, FONT_SIZE_TITLE),
        )
        game = new_game()
        _load_backgrounds(game.levels, args.sprites)
        clock = pygame.time.Clock()

        while game.running:
            _process_events(game, pygame.event.get())
            if not game.running:
                break
            handle_held_keys(game, _held_keys())
            update_game(game)
            renderer.draw(game, pygame.time.get_ticks() / 1000.0)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())