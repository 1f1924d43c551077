"""Core data types, enumerations and tuning constants for the game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

Color = tuple[int, int, int]

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FPS = 60.0
PLATFORM_JUMP_TOLERANCE = 8.0
PORTAL_WIDTH = 50
PORTAL_HEIGHT = 80

COLOR_BLACK: Color = (0, 0, 0)
COLOR_WHITE: Color = (255, 255, 255)
COLOR_YELLOW: Color = (255, 255, 0)
COLOR_RED: Color = (255, 0, 0)
COLOR_GREEN: Color = (0, 255, 0)
COLOR_BLUE: Color = (0, 0, 255)
COLOR_GRAY: Color = (128, 128, 128)
COLOR_LIGHT_GRAY: Color = (200, 200, 200)
COLOR_MEDIUM_GRAY: Color = (150, 150, 150)
COLOR_SKY_BLUE: Color = (135, 206, 235)
COLOR_PURPLE: Color = (128, 0, 128)
COLOR_PINKISH_RED: Color = (255, 100, 100)
COLOR_GLUCOSE: Color = (255, 105, 180)

MENU_TEXT_COLOR = COLOR_WHITE
MENU_SELECTED_TEXT_COLOR = COLOR_YELLOW
MENU_DISABLED_TEXT_COLOR = COLOR_GRAY
MENU_BACKGROUND_COLOR = COLOR_BLACK
TITLE_TEXT_COLOR = COLOR_WHITE

ALPHA_OVERLAY_MEDIUM = 128
ALPHA_OVERLAY_DARK = 192

MENU_TITLE_Y = 50
MENU_ITEM_START_Y = 200
MENU_ITEM_SPACING = 50

WELCOME_TITLE_Y_DIVISOR = 3
WELCOME_SUBTEXT_Y_DIVISOR = 2
WELCOME_VERSION_OFFSET_Y = 50

PAUSE_TITLE_Y_DIVISOR = 3
PAUSE_TEXT_Y_DIVISOR = 2
PAUSE_TEXT_SPACING = 40

GAMEOVER_TITLE_Y_DIVISOR = 3
GAMEOVER_TEXT_Y_DIVISOR = 2
GAMEOVER_TEXT_SPACING_1 = 50
GAMEOVER_TEXT_SPACING_2 = 90

LEVELCOMPLETE_TITLE_Y_DIVISOR = 3
LEVELCOMPLETE_TEXT_Y_DIVISOR = 2
LEVELCOMPLETE_TEXT_SPACING_1 = 50
LEVELCOMPLETE_TEXT_SPACING_2 = 90

VICTORY_TITLE_Y_DIVISOR = 3
VICTORY_TEXT_Y_DIVISOR = 2
VICTORY_TEXT_SPACING = 50

PORTAL_BORDER_THICKNESS = 2.0

ENEMY_HEALTH_BAR_OFFSET_Y = 10
ENEMY_HEALTH_BAR_HEIGHT = 5

PLAYER_HUD_HEALTH_X = 10
PLAYER_HUD_HEALTH_Y = 40
PLAYER_HUD_HEALTH_WIDTH_MAX = 200
PLAYER_HUD_HEALTH_HEIGHT = 10

HUD_TEXT_X = 10
HUD_TEXT_Y = 10

GRAVITY = 0.5
JUMP_SPEED = -10.0
MOVE_SPEED = 5.0

PLAYER_INITIAL_X_FACTOR = 1.0 / 4.0
PLAYER_INITIAL_Y_FACTOR = 1.0 / 2.0
PLAYER_WIDTH = 30
PLAYER_HEIGHT = 30
PLAYER_INITIAL_HEALTH = 100
PLAYER_INITIAL_MAX_HEALTH = 100
PLAYER_INITIAL_ATTACK_POWER = 10
PLAYER_ATTACK_SPEED = 0.5
PLAYER_INVINCIBILITY_FRAMES = 30
PLAYER_KNOCKBACK_FORCE = 10.0

GLUCOSE_WIDTH = 20
GLUCOSE_HEIGHT = 20
GLUCOSE_HEALTH_RECOVERY = 25

MAX_STEP_UP_HEIGHT = 8.0

INITIAL_LEVEL = 1
LEVEL_COMPLETE_SCORE_BONUS = 1000

DEADLY_PLATFORM_DAMAGE = 10

ENEMY_PATROL_DETECT_RANGE = 200.0
ENEMY_CHASE_SPEED = 3.0
ENEMY_CHASE_BREAK_RANGE = 300.0
ENEMY_PATROL_SPEED = 2.0

SCROLL_X_PLAYER_OFFSET_FACTOR = 1.0 / 3.0

AUDIO_RESERVE_SAMPLES = 8
FONT_SIZE_NORMAL = 24
FONT_SIZE_TITLE = 48
DEFAULT_FONT_PATH = "/System/Library/Fonts/Helvetica.ttc"

DIFFICULTY_EASY = 1
DIFFICULTY_NORMAL = 2
DIFFICULTY_HARD = 3


class GameState(Enum):
    WELCOME_SCREEN = auto()
    MAIN_MENU = auto()
    LEVEL_SELECT = auto()
    SETTINGS = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()
    LEVEL_COMPLETE = auto()
    VICTORY = auto()


class EntityType(Enum):
    CANCER_CELL = auto()
    T_CELL = auto()
    MACROPHAGE = auto()
    B_CELL = auto()
    NK_CELL = auto()


class EntityState(Enum):
    IDLE = auto()
    MOVING = auto()
    JUMPING = auto()
    ATTACKING = auto()
    DAMAGED = auto()
    DEAD = auto()


class EntityBehavior(Enum):
    NONE = auto()
    PATROL = auto()
    CHASE = auto()
    SHOOT = auto()
    BOSS = auto()


@dataclass
class Portal:
    x: float = 0.0
    y: float = 0.0
    width: float = PORTAL_WIDTH
    height: float = PORTAL_HEIGHT
    is_active: bool = False


@dataclass
class GlucoseItem:
    x: float
    y: float
    width: float = GLUCOSE_WIDTH
    height: float = GLUCOSE_HEIGHT
    active: bool = True


@dataclass
class Entity:
    """A player or enemy cell."""

    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    width: float = 0.0
    height: float = 0.0
    active: bool = True
    type: EntityType = EntityType.CANCER_CELL
    state: EntityState = EntityState.IDLE
    behavior: EntityBehavior = EntityBehavior.NONE
    health: float = 0.0
    max_health: float = 0.0
    attack_power: float = 0.0
    attack_speed: float = 0.0
    last_attack: float = 0.0
    current_frame: int = 0
    frame_timer: float = 0.0
    is_on_ground: bool = False
    jump_requested: bool = False


def new_player() -> Entity:
    """Return the player cell in its starting state."""
    return Entity(
        x=SCREEN_WIDTH * PLAYER_INITIAL_X_FACTOR,
        y=SCREEN_HEIGHT * PLAYER_INITIAL_Y_FACTOR,
        width=PLAYER_WIDTH,
        height=PLAYER_HEIGHT,
        type=EntityType.CANCER_CELL,
        state=EntityState.IDLE,
        behavior=EntityBehavior.NONE,
        health=PLAYER_INITIAL_HEALTH,
        max_health=PLAYER_INITIAL_MAX_HEALTH,
        attack_power=PLAYER_INITIAL_ATTACK_POWER,
        attack_speed=PLAYER_ATTACK_SPEED,
    )


@dataclass
class MenuItem:
    text: str
    selected: bool = True
    enabled: bool = True


@dataclass
class Menu:
    items: list[MenuItem] = field(default_factory=list)
    selected_index: int = 0

    def _step(self, delta: int) -> None:
        if not any(item.enabled for item in self.items):
            return
        count = len(self.items)
        while True:
            self.selected_index = (self.selected_index + delta) % count
            if self.items[self.selected_index].enabled:
                return

    def select_previous(self) -> None:
        """Move the selection up, wrapping and skipping disabled items."""
        self._step(-1)

    def select_next(self) -> None:
        """Move the selection down, wrapping and skipping disabled items."""
        self._step(1)


@dataclass
class Platform:
    x: float
    y: float
    width: float
    height: float
    color: Color
    is_deadly: bool = False


@dataclass
class Level:
    name: str
    description: str
    level_width: float
    id: int
    platforms: list[Platform] = field(default_factory=list)
    enemies: list[Entity] = field(default_factory=list)
    glucose_items: list[GlucoseItem] = field(default_factory=list)
    scroll_x: float = 0.0
    portal: Portal = field(default_factory=Portal)
    background: Optional[object] = None


@dataclass
class GameSettings:
    difficulty: int = DIFFICULTY_NORMAL
    sound_enabled: bool = True
    music_enabled: bool = True


@dataclass
class Game:
    state: GameState = GameState.WELCOME_SCREEN
    player: Entity = field(default_factory=new_player)
    levels: list[Level] = field(default_factory=list)
    current_level_data: Optional[Level] = None
    running: bool = True
    score: int = 0
    current_level: int = INITIAL_LEVEL
    main_menu: Menu = field(default_factory=Menu)
    level_menu: Menu = field(default_factory=Menu)
    settings_menu: Menu = field(default_factory=Menu)
    settings: GameSettings = field(default_factory=GameSettings)

    @property
    def num_levels(self) -> int:
        return len(self.levels)