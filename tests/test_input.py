import pytest

from cellquest.game_logic import new_game
from cellquest.input import Key, handle_held_keys, handle_key_down, handle_menu_input
from cellquest.models import MOVE_SPEED, GameState


@pytest.fixture
def game():
    return new_game()


def test_welcome_enter_goes_to_main_menu(game):
    handle_key_down(game, Key.ENTER)
    assert game.state is GameState.MAIN_MENU


def test_welcome_ignores_other_keys(game):
    handle_key_down(game, Key.ESCAPE)
    handle_key_down(game, Key.DOWN)
    assert game.state is GameState.WELCOME_SCREEN


def test_menu_navigation_wraps(game):
    game.state = GameState.MAIN_MENU
    handle_menu_input(game, Key.UP)
    assert game.main_menu.selected_index == len(game.main_menu.items) - 1
    handle_menu_input(game, Key.DOWN)
    assert game.main_menu.selected_index == 0
    handle_menu_input(game, Key.DOWN)
    assert game.main_menu.selected_index == 1


def test_start_game_resets_score_and_plays(game):
    game.state = GameState.MAIN_MENU
    game.score = 5000
    handle_key_down(game, Key.ENTER)
    assert game.state is GameState.PLAYING
    assert game.score == 0
    assert game.current_level == 0
    assert game.current_level_data is game.levels[0]


def test_main_menu_entries_change_state(game):
    game.state = GameState.MAIN_MENU
    game.main_menu.selected_index = 1
    handle_key_down(game, Key.ENTER)
    assert game.state is GameState.LEVEL_SELECT

    game.state = GameState.MAIN_MENU
    game.main_menu.selected_index = 2
    handle_key_down(game, Key.ENTER)
    assert game.state is GameState.SETTINGS


def test_exit_stops_running(game):
    game.state = GameState.MAIN_MENU
    game.main_menu.selected_index = 3
    handle_key_down(game, Key.ENTER)
    assert game.running is False


def test_level_select_starts_chosen_level(game):
    game.state = GameState.LEVEL_SELECT
    game.level_menu.selected_index = 2
    handle_key_down(game, Key.ENTER)
    assert game.state is GameState.PLAYING
    assert game.current_level == 2
    assert game.current_level_data is game.levels[2]


def test_level_select_back(game):
    game.state = GameState.LEVEL_SELECT
    game.level_menu.selected_index = len(game.level_menu.items) - 1
    handle_key_down(game, Key.ENTER)
    assert game.state is GameState.MAIN_MENU


def test_difficulty_cycles_and_updates_text(game):
    game.state = GameState.SETTINGS
    game.settings_menu.selected_index = 0
    handle_key_down(game, Key.ENTER)
    assert game.settings.difficulty == 3
    assert game.settings_menu.items[0].text == "Difficulty: Hard"
    handle_key_down(game, Key.ENTER)
    assert game.settings.difficulty == 1
    assert game.settings_menu.items[0].text == "Difficulty: Easy"
    handle_key_down(game, Key.ENTER)
    assert game.settings_menu.items[0].text == "Difficulty: Normal"


def test_sound_and_music_toggle(game):
    game.state = GameState.SETTINGS
    game.settings_menu.selected_index = 1
    handle_key_down(game, Key.ENTER)
    assert game.settings.sound_enabled is False
    assert game.settings_menu.items[1].text == "Sound: Off"
    game.settings_menu.selected_index = 2
    handle_key_down(game, Key.ENTER)
    assert game.settings.music_enabled is False
    assert game.settings_menu.items[2].text == "Music: Off"
    handle_key_down(game, Key.ENTER)
    assert game.settings_menu.items[2].text == "Music: On"


def test_escape_returns_to_main_menu_from_submenus(game):
    game.state = GameState.SETTINGS
    handle_key_down(game, Key.ESCAPE)
    assert game.state is GameState.MAIN_MENU
    handle_key_down(game, Key.ESCAPE)
    assert game.state is GameState.MAIN_MENU


def test_jump_key_requests_jump_when_playing(game):
    game.state = GameState.PLAYING
    handle_key_down(game, Key.SPACE)
    assert game.player.jump_requested is True


def test_escape_toggles_pause(game):
    game.state = GameState.PLAYING
    handle_key_down(game, Key.ESCAPE)
    assert game.state is GameState.PAUSED
    handle_key_down(game, Key.ESCAPE)
    assert game.state is GameState.PLAYING


def test_m_from_pause_goes_to_main_menu(game):
    game.state = GameState.PAUSED
    handle_key_down(game, Key.M)
    assert game.state is GameState.MAIN_MENU


def test_next_level_after_completion(game):
    game.state = GameState.LEVEL_COMPLETE
    handle_key_down(game, Key.N)
    assert game.state is GameState.PLAYING
    assert game.current_level == 1
    assert game.current_level_data is game.levels[1]


def test_last_level_completion_gives_victory(game):
    game.current_level = game.num_levels - 1
    game.state = GameState.LEVEL_COMPLETE
    handle_key_down(game, Key.N)
    assert game.state is GameState.VICTORY
    handle_key_down(game, Key.ENTER)
    assert game.state is GameState.MAIN_MENU


def test_game_over_enter_and_retry(game):
    game.state = GameState.GAME_OVER
    handle_key_down(game, Key.ENTER)
    assert game.state is GameState.MAIN_MENU

    game.state = GameState.GAME_OVER
    game.current_level = 1
    game.player.health = 0
    handle_key_down(game, Key.R)
    assert game.state is GameState.PLAYING
    assert game.current_level == 0
    assert game.player.health == game.player.max_health


def test_held_movement_keys(game):
    game.state = GameState.PLAYING
    handle_held_keys(game, {Key.A})
    assert game.player.dx == -MOVE_SPEED
    handle_held_keys(game, {Key.A, Key.D})
    assert game.player.dx == MOVE_SPEED
    handle_held_keys(game, set())
    assert game.player.dx == 0


def test_held_jump_only_on_ground(game):
    game.state = GameState.PLAYING
    game.player.is_on_ground = False
    handle_held_keys(game, [Key.W])
    assert game.player.jump_requested is False
    game.player.is_on_ground = True
    handle_held_keys(game, [Key.W])
    assert game.player.jump_requested is True


def test_held_keys_ignored_outside_play(game):
    game.state = GameState.PAUSED
    game.player.dx = 1.5
    handle_held_keys(game, {Key.D})
    assert game.player.dx == 1.5