"""Enemy behaviour and contact damage."""

from __future__ import annotations

import math
from typing import Protocol

from cellquest.models import (
    ENEMY_CHASE_BREAK_RANGE,
    ENEMY_CHASE_SPEED,
    ENEMY_PATROL_DETECT_RANGE,
    ENEMY_PATROL_SPEED,
    PLAYER_INVINCIBILITY_FRAMES,
    Entity,
    EntityBehavior,
    Game,
    GameState,
)


class _Box(Protocol):
    x: float
    y: float
    width: float
    height: float


def _distance_to_player(enemy: Entity, game: Game) -> tuple[float, float, float]:
    dx = game.player.x - enemy.x
    dy = game.player.y - enemy.y
    return dx, dy, math.hypot(dx, dy)


def update_enemy(enemy: Entity, game: Game) -> None:
    """Advance one enemy by a frame according to its behaviour."""
    if enemy.behavior is EntityBehavior.PATROL:
        enemy.x += enemy.dx
        if enemy.x <= 0 or enemy.x + enemy.width >= game.current_level_data.level_width:
            enemy.dx *= -1
        _, _, distance = _distance_to_player(enemy, game)
        if distance < ENEMY_PATROL_DETECT_RANGE:
            enemy.behavior = EntityBehavior.CHASE

    elif enemy.behavior is EntityBehavior.CHASE:
        dx, dy, distance = _distance_to_player(enemy, game)
        if distance > 0:
            enemy.dx = dx / distance * ENEMY_CHASE_SPEED
            enemy.dy = dy / distance * ENEMY_CHASE_SPEED
        enemy.x += enemy.dx
        enemy.y += enemy.dy

        _, _, distance = _distance_to_player(enemy, game)
        if distance > ENEMY_CHASE_BREAK_RANGE:
            enemy.behavior = EntityBehavior.PATROL
            enemy.dy = 0.0
            enemy.dx = ENEMY_PATROL_SPEED if enemy.dx > 0 else -ENEMY_PATROL_SPEED


def check_collision(a: _Box, b: _Box) -> bool:
    """Return True if two axis-aligned boxes overlap."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def handle_collisions(game: Game) -> None:
    """Apply contact damage from enemies and tick the player's invincibility."""
    player = game.player
    for enemy in game.current_level_data.enemies:
        if enemy.active and check_collision(player, enemy) and player.last_attack == 0:
            player.health -= enemy.attack_power
            player.last_attack = PLAYER_INVINCIBILITY_FRAMES
            if player.health <= 0:
                game.state = GameState.GAME_OVER

    if player.last_attack > 0:
        player.last_attack -= 1