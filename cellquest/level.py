"""Construction of the game's levels and their content."""

from __future__ import annotations

import math

from cellquest.models import (
    GLUCOSE_HEIGHT,
    GLUCOSE_WIDTH,
    PORTAL_HEIGHT,
    PORTAL_WIDTH,
    SCREEN_HEIGHT,
    Entity,
    EntityBehavior,
    EntityState,
    EntityType,
    GlucoseItem,
    Level,
    Platform,
    Portal,
)

_PORTAL_MARGIN = 20.0
_FLOOR_HEIGHT = 40.0


def create_level(name: str, description: str, width: float, level_id: int) -> Level:
    """Return an empty level with the given identity and width."""
    return Level(name=name, description=description, level_width=width, id=level_id)


def _floor_y(i: int) -> float:
    return SCREEN_HEIGHT - 100.0 + math.sin(i * 0.5) * 50.0


def _populate_blood_stream(level: Level) -> None:
    red = (200, 0, 0)
    floors = [Platform(i * 200.0, _floor_y(i), 200.0, 20.0, red) for i in range(8)]
    ceilings = [
        Platform(i * 200.0, 100.0 + math.sin(i * 0.5) * 50.0, 200.0, 20.0, red)
        for i in range(8)
    ]
    hazards = [
        Platform(300.0 + n * 600.0, SCREEN_HEIGHT / 2.0, 30.0, 100.0, (255, 255, 0), True)
        for n in range(2)
    ]
    level.platforms = floors + ceilings + hazards

    level.portal = Portal(
        x=level.level_width - PORTAL_WIDTH - _PORTAL_MARGIN,
        y=_floor_y(7) - PORTAL_HEIGHT,
        width=PORTAL_WIDTH,
        height=PORTAL_HEIGHT,
        is_active=True,
    )

    level.enemies = [
        Entity(
            x=400.0 + i * 300.0,
            y=SCREEN_HEIGHT / 2.0,
            width=40.0,
            height=40.0,
            dx=2.0,
            dy=0.0,
            active=True,
            type=EntityType.T_CELL,
            state=EntityState.MOVING,
            behavior=EntityBehavior.PATROL,
            health=50,
            max_health=50,
            attack_power=10,
            attack_speed=1.0,
        )
        for i in range(5)
    ]

    level.glucose_items = [
        GlucoseItem(x, y, GLUCOSE_WIDTH, GLUCOSE_HEIGHT, True)
        for x, y in (
            (250.0, SCREEN_HEIGHT - 150.0),
            (750.0, 150.0),
            (1250.0, SCREEN_HEIGHT - 150.0),
        )
    ]


def _populate_flat(level: Level, color: tuple[int, int, int]) -> None:
    floor_top = SCREEN_HEIGHT - _FLOOR_HEIGHT
    level.platforms = [Platform(0.0, floor_top, level.level_width, _FLOOR_HEIGHT, color)]
    level.enemies = []
    level.glucose_items = []
    level.portal = Portal(
        x=level.level_width - PORTAL_WIDTH - _PORTAL_MARGIN,
        y=floor_top - PORTAL_HEIGHT,
        width=PORTAL_WIDTH,
        height=PORTAL_HEIGHT,
        is_active=True,
    )


def populate_level(level: Level) -> None:
    """Fill a level with the platforms, enemies, items and portal for its id.

    Any existing content is replaced, so this also restores a level to its
    starting state. Levels with an unknown id are left as they are.
    """
    if level.id == 1:
        _populate_blood_stream(level)
    elif level.id == 2:
        _populate_flat(level, (0, 100, 0))
    elif level.id == 3:
        _populate_flat(level, (50, 50, 50))


def create_levels() -> list[Level]:
    """Return the three levels of the game, fully populated."""
    levels = [
        create_level(
            "The Blood Stream",
            "Navigate through blood vessels while avoiding patrolling T-cells",
            1600,
            1,
        ),
        create_level("The Lymph Node", "Survive the immune system's fortress", 2400, 2),
        create_level(
            "The Final Battle", "Face off against specialized killer cells", 3200, 3
        ),
    ]
    for level in levels:
        populate_level(level)
    return levels