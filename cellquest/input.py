"""Keyboard handling for menus and gameplay."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto

from cellquest.game_logic import reset_player_and_level
from cellquest.models import (
    DIFFICULTY_EASY,
    DIFFICULTY_NORMAL,
    INITIAL_LEVEL,
    MOVE_SPEED,
    Game,
    GameState,
    Menu,
)


class Key(Enum):
    """Keys the game reacts to."""

    UP = auto()
    DOWN = auto()
    ENTER = auto()
    ESCAPE = auto()
    W = auto()
    A = auto()
    D = auto()
    SPACE = auto()
    M = auto()
    N = auto()
    R = auto()


_MENU_STATES = frozenset(
    {
        GameState.WELCOME_SCREEN,
        GameState.MAIN_MENU,
        GameState.LEVEL_SELECT,
        GameState.SETTINGS,
        GameState.VICTORY,
    }
)

_JUMP_KEYS = frozenset({Key.W, Key.SPACE})


def _difficulty_name(difficulty: int) -> str:
    if difficulty == DIFFICULTY_EASY:
        return "Easy"
    if difficulty == DIFFICULTY_NORMAL:
        return "Normal"
    return "Hard"


def _current_menu(game: Game) -> Menu | None:
    return {
        GameState.MAIN_MENU: game.main_menu,
        GameState.LEVEL_SELECT: game.level_menu,
        GameState.SETTINGS: game.settings_menu,
    }.get(game.state)


def _activate_main_menu(game: Game, menu: Menu) -> None:
    choice = menu.selected_index
    if choice == 0:
        reset_player_and_level(game, INITIAL_LEVEL - 1)
        game.score = 0
        game.state = GameState.PLAYING
    elif choice == 1:
        game.state = GameState.LEVEL_SELECT
    elif choice == 2:
        game.state = GameState.SETTINGS
    elif choice == 3:
        game.running = False


def _activate_level_select(game: Game, menu: Menu) -> None:
    if not menu.items:
        return
    if menu.selected_index == len(menu.items) - 1:
        game.state = GameState.MAIN_MENU
    elif menu.items[menu.selected_index].enabled:
        reset_player_and_level(game, menu.selected_index)
        game.state = GameState.PLAYING


def _activate_settings(game: Game, menu: Menu) -> None:
    settings = game.settings
    choice = menu.selected_index
    if choice == 0:
        settings.difficulty = settings.difficulty % 3 + 1
        menu.items[0].text = f"Difficulty: {_difficulty_name(settings.difficulty)}"
    elif choice == 1:
        settings.sound_enabled = not settings.sound_enabled
        menu.items[1].text = "Sound: " + ("On" if settings.sound_enabled else "Off")
    elif choice == 2:
        settings.music_enabled = not settings.music_enabled
        menu.items[2].text = "Music: " + ("On" if settings.music_enabled else "Off")
    elif choice == 3:
        game.state = GameState.MAIN_MENU


def handle_menu_input(game: Game, key: Key) -> None:
    """React to a key press on the welcome, menu and victory screens."""
    if game.state in (GameState.WELCOME_SCREEN, GameState.VICTORY):
        if key is Key.ENTER:
            game.state = GameState.MAIN_MENU
        return

    menu = _current_menu(game)
    if menu is None:
        return

    if key is Key.UP:
        if menu.items:
            menu.select_previous()
    elif key is Key.DOWN:
        if menu.items:
            menu.select_next()
    elif key is Key.ENTER:
        if game.state is GameState.MAIN_MENU:
            _activate_main_menu(game, menu)
        elif game.state is GameState.LEVEL_SELECT:
            _activate_level_select(game, menu)
        elif game.state is GameState.SETTINGS:
            _activate_settings(game, menu)
    elif key is Key.ESCAPE:
        if game.state is not GameState.MAIN_MENU:
            game.state = GameState.MAIN_MENU


def handle_key_down(game: Game, key: Key) -> None:
    """React to a single key press in any game state."""
    if game.state in _MENU_STATES:
        handle_menu_input(game, key)
        return

    state = game.state
    if key in _JUMP_KEYS:
        if state is GameState.PLAYING:
            game.player.jump_requested = True
    elif key is Key.ESCAPE:
        if state is GameState.PLAYING:
            game.state = GameState.PAUSED
        elif state is GameState.PAUSED:
            game.state = GameState.PLAYING
    elif key is Key.M:
        if state in (GameState.PAUSED, GameState.LEVEL_COMPLETE):
            game.state = GameState.MAIN_MENU
    elif key is Key.N:
        if state is GameState.LEVEL_COMPLETE:
            if game.current_level < game.num_levels - 1:
                reset_player_and_level(game, game.current_level + 1)
                game.state = GameState.PLAYING
            else:
                game.state = GameState.VICTORY
    elif key is Key.ENTER:
        if state is GameState.GAME_OVER:
            game.state = GameState.MAIN_MENU
    elif key is Key.R:
        if state is GameState.GAME_OVER:
            reset_player_and_level(game, game.current_level - 1)
            game.state = GameState.PLAYING


def handle_held_keys(game: Game, held_keys: Iterable[Key]) -> None:
    """Apply continuously held movement and jump keys once per frame."""
    if game.state is not GameState.PLAYING:
        return
    held = frozenset(held_keys)
    player = game.player

    player.dx = 0.0
    if Key.A in held:
        player.dx = -MOVE_SPEED
    if Key.D in held:
        player.dx = MOVE_SPEED

    if held & _JUMP_KEYS and player.is_on_ground:
        player.jump_requested = True