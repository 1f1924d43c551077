"""Game setup, level resets and the per-frame simulation step."""

from __future__ import annotations

import logging

from cellquest.entity import check_collision, handle_collisions, update_enemy
from cellquest.level import create_levels, populate_level
from cellquest.models import (
    DIFFICULTY_NORMAL,
    GLUCOSE_HEALTH_RECOVERY,
    GLUCOSE_HEIGHT,
    GLUCOSE_WIDTH,
    GRAVITY,
    INITIAL_LEVEL,
    JUMP_SPEED,
    LEVEL_COMPLETE_SCORE_BONUS,
    MAX_STEP_UP_HEIGHT,
    PLATFORM_JUMP_TOLERANCE,
    PLAYER_INITIAL_HEALTH,
    PLAYER_INITIAL_X_FACTOR,
    PLAYER_INITIAL_Y_FACTOR,
    DEADLY_PLATFORM_DAMAGE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SCROLL_X_PLAYER_OFFSET_FACTOR,
    Entity,
    Game,
    GameSettings,
    GameState,
    Menu,
    MenuItem,
    Platform,
    new_player,
)

logger = logging.getLogger(__name__)


def new_game() -> Game:
    """Return a fully initialised game sitting on the welcome screen."""
    game = Game(
        state=GameState.WELCOME_SCREEN,
        player=new_player(),
        running=True,
        score=0,
        current_level=INITIAL_LEVEL,
    )
    init_menus(game)
    game.levels = create_levels()
    game.current_level_data = game.levels[0]
    reset_player_and_level(game, game.current_level)
    return game


def _menu(*labels: str) -> Menu:
    return Menu(items=[MenuItem(label, True, True) for label in labels], selected_index=0)


def init_menus(game: Game) -> None:
    """Build the main, level-select and settings menus and reset settings."""
    game.main_menu = _menu("Start Game", "Level Select", "Settings", "Exit")
    game.level_menu = _menu(
        "Level 1: The Blood Stream",
        "Level 2: The Lymph Node",
        "Level 3: The Final Battle",
        "Back",
    )
    game.settings_menu = _menu("Difficulty: Normal", "Sound: On", "Music: On", "Back")
    game.settings = GameSettings(
        difficulty=DIFFICULTY_NORMAL, sound_enabled=True, music_enabled=True
    )


def reset_player_and_level(game: Game, level_idx: int) -> None:
    """Put the player back at the start and restore a level's content.

    An out-of-range index falls back to the first level.
    """
    player = game.player
    player.x = SCREEN_WIDTH * PLAYER_INITIAL_X_FACTOR
    player.y = SCREEN_HEIGHT * PLAYER_INITIAL_Y_FACTOR
    player.dx = 0.0
    player.dy = 0.0
    player.health = PLAYER_INITIAL_HEALTH
    player.is_on_ground = False
    player.jump_requested = False

    if not 0 <= level_idx < game.num_levels:
        logger.warning("Invalid level index for reset: %d", level_idx)
        level_idx = 0
    game.current_level = level_idx
    level = game.levels[level_idx]
    game.current_level_data = level

    level.platforms = []
    level.enemies = []
    level.glucose_items = []
    populate_level(level)
    level.scroll_x = 0.0


def _step_height(player: Entity, platform: Platform) -> float:
    return player.y + player.height - platform.y


def _resolve_platform(game: Game, platform: Platform) -> None:
    player = game.player
    if not check_collision(player, platform):
        return

    if platform.is_deadly:
        player.health -= DEADLY_PLATFORM_DAMAGE
        if player.health <= 0:
            game.state = GameState.GAME_OVER
        player.y = platform.y - player.height
        player.dy = 0.0
        player.is_on_ground = True
        return

    platform_bottom = platform.y + platform.height
    platform_right = platform.x + platform.width

    if (
        player.dy >= 0
        and player.y + player.height - player.dy <= platform.y + PLATFORM_JUMP_TOLERANCE
        and player.y + player.height > platform.y
    ):
        player.dy = 0.0
        player.y = platform.y - player.height
        player.is_on_ground = True
    elif (
        player.dy < 0
        and player.y - player.dy >= platform_bottom
        and player.y < platform_bottom
    ):
        player.y = platform_bottom
        player.dy = 0.0

    vertically_aligned = player.y < platform_bottom and player.y + player.height > platform.y
    if not vertically_aligned:
        return

    moving_right_into = (
        player.dx > 0
        and player.x + player.width - player.dx <= platform.x
        and player.x + player.width > platform.x
    )
    moving_left_into = (
        player.dx < 0
        and player.x - player.dx >= platform_right
        and player.x < platform_right
    )
    if not (moving_right_into or moving_left_into):
        return

    step = _step_height(player, platform)
    if 0 < step <= MAX_STEP_UP_HEIGHT and player.is_on_ground:
        player.y = platform.y - player.height
        player.dy = 0.0
        player.is_on_ground = True
    else:
        player.x = platform.x - player.width if moving_right_into else platform_right
        player.dx = 0.0


def _collect_glucose(game: Game) -> None:
    player = game.player
    for item in game.current_level_data.glucose_items:
        if (
            item.active
            and player.x < item.x + GLUCOSE_WIDTH
            and player.x + player.width > item.x
            and player.y < item.y + GLUCOSE_HEIGHT
            and player.y + player.height > item.y
        ):
            item.active = False
            player.health = min(player.health + GLUCOSE_HEALTH_RECOVERY, player.max_health)


def _update_scroll(game: Game) -> None:
    level = game.current_level_data
    scroll = max(game.player.x - SCREEN_WIDTH * SCROLL_X_PLAYER_OFFSET_FACTOR, 0.0)
    if level.level_width > SCREEN_WIDTH:
        scroll = min(scroll, level.level_width - SCREEN_WIDTH)
    else:
        scroll = 0.0
    level.scroll_x = scroll


def update_game(game: Game) -> None:
    """Advance the running game by one frame; does nothing unless playing."""
    if game.state is not GameState.PLAYING:
        return

    player = game.player
    level = game.current_level_data

    if player.jump_requested and player.is_on_ground:
        player.dy = JUMP_SPEED
        player.is_on_ground = False
    player.jump_requested = False

    player.x += player.dx
    player.y += player.dy
    player.dy += GRAVITY
    player.is_on_ground = False

    for platform in level.platforms:
        _resolve_platform(game, platform)

    for enemy in level.enemies:
        if enemy.active:
            update_enemy(enemy, game)

    handle_collisions(game)
    _collect_glucose(game)

    player.x = max(player.x, 0.0)
    if player.x > level.level_width - player.width:
        player.x = level.level_width - player.width

    if player.y > SCREEN_HEIGHT:
        player.health = 0
        game.state = GameState.GAME_OVER
    elif player.y < 0 and player.dy < 0:
        player.y = 0.0
        player.dy = 0.0

    _update_scroll(game)

    portal = level.portal
    if portal.is_active and check_collision(player, portal):
        game.state = GameState.LEVEL_COMPLETE
        game.score += LEVEL_COMPLETE_SCORE_BONUS