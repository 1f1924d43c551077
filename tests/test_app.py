import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from unittest.mock import patch

import pygame
import pytest

from cellquest.app import _load_backgrounds, _process_events, _translate_key, main
from cellquest.game_logic import new_game
from cellquest.input import Key
from cellquest.models import GameState


@pytest.mark.parametrize(
    ("code", "key"),
    [
        (pygame.K_RETURN, Key.ENTER),
        (pygame.K_ESCAPE, Key.ESCAPE),
        (pygame.K_SPACE, Key.SPACE),
        (pygame.K_a, Key.A),
        (pygame.K_d, Key.D),
    ],
)
def test_translate_known_keys(code, key):
    assert _translate_key(code) is key


def test_translate_unknown_key():
    assert _translate_key(pygame.K_F12) is None


def test_quit_event_stops_game():
    game = new_game()
    _process_events(game, [pygame.event.Event(pygame.QUIT)])
    assert game.running is False


def test_enter_on_welcome_opens_main_menu():
    game = new_game()
    _process_events(game, [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN)])
    assert game.state is GameState.MAIN_MENU
    assert game.running is True


def test_unmapped_key_changes_nothing():
    game = new_game()
    _process_events(game, [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_F12)])
    assert game.state is GameState.WELCOME_SCREEN


def test_load_backgrounds_keeps_missing_as_none(tmp_path):
    pygame.image.save(pygame.Surface((4, 4)), str(tmp_path / "background_1.png"))
    game = new_game()
    _load_backgrounds(game.levels, tmp_path)
    assert game.levels[0].background.get_size() == (4, 4)
    assert game.levels[1].background is None
    assert game.levels[2].background is None


def test_main_exits_on_quit(tmp_path):
    with patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        result = main(["--font", str(tmp_path / "missing.ttf"), "--sprites", str(tmp_path)])
    assert result == 0