"""Rendering of every game screen onto a pygame surface."""

from __future__ import annotations

import math

import pygame

from cellquest.models import (
    ALPHA_OVERLAY_DARK,
    ALPHA_OVERLAY_MEDIUM,
    COLOR_GLUCOSE,
    COLOR_LIGHT_GRAY,
    COLOR_MEDIUM_GRAY,
    COLOR_PINKISH_RED,
    COLOR_PURPLE,
    COLOR_RED,
    COLOR_SKY_BLUE,
    COLOR_WHITE,
    COLOR_YELLOW,
    ENEMY_HEALTH_BAR_HEIGHT,
    ENEMY_HEALTH_BAR_OFFSET_Y,
    GAMEOVER_TEXT_SPACING_1,
    GAMEOVER_TEXT_SPACING_2,
    GAMEOVER_TEXT_Y_DIVISOR,
    GAMEOVER_TITLE_Y_DIVISOR,
    HUD_TEXT_X,
    HUD_TEXT_Y,
    LEVELCOMPLETE_TEXT_SPACING_1,
    LEVELCOMPLETE_TEXT_SPACING_2,
    LEVELCOMPLETE_TEXT_Y_DIVISOR,
    LEVELCOMPLETE_TITLE_Y_DIVISOR,
    MENU_BACKGROUND_COLOR,
    MENU_DISABLED_TEXT_COLOR,
    MENU_ITEM_SPACING,
    MENU_ITEM_START_Y,
    MENU_SELECTED_TEXT_COLOR,
    MENU_TEXT_COLOR,
    MENU_TITLE_Y,
    PAUSE_TEXT_SPACING,
    PAUSE_TEXT_Y_DIVISOR,
    PAUSE_TITLE_Y_DIVISOR,
    PLAYER_HUD_HEALTH_HEIGHT,
    PLAYER_HUD_HEALTH_WIDTH_MAX,
    PLAYER_HUD_HEALTH_X,
    PLAYER_HUD_HEALTH_Y,
    PORTAL_BORDER_THICKNESS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TITLE_TEXT_COLOR,
    VICTORY_TEXT_SPACING,
    VICTORY_TEXT_Y_DIVISOR,
    VICTORY_TITLE_Y_DIVISOR,
    WELCOME_SUBTEXT_Y_DIVISOR,
    WELCOME_TITLE_Y_DIVISOR,
    WELCOME_VERSION_OFFSET_Y,
    Color,
    EntityType,
    Game,
    GameState,
    Menu,
)

_CENTER_X = SCREEN_WIDTH // 2

_ENEMY_COLORS: dict[EntityType, Color] = {
    EntityType.T_CELL: COLOR_YELLOW,
    EntityType.MACROPHAGE: (200, 200, 0),
    EntityType.B_CELL: (0, 200, 255),
    EntityType.NK_CELL: COLOR_RED,
}


def health_bar_color(fraction: float) -> Color:
    """Return the red-to-green colour of a health bar at the given fill."""
    fraction = min(max(fraction, 0.0), 1.0)
    return (int(255 * (1 - fraction)), int(255 * fraction), 0)


def menu_item_color(menu: Menu, index: int) -> Color:
    """Return the text colour of a menu entry."""
    if not menu.items[index].enabled:
        return MENU_DISABLED_TEXT_COLOR
    if index == menu.selected_index:
        return MENU_SELECTED_TEXT_COLOR
    return MENU_TEXT_COLOR


def welcome_title_color(now: float) -> Color:
    """Return the pulsing title colour of the welcome screen at time `now`."""
    pulse = (1 + math.sin(now * 2)) * 0.5
    return (int(150 + pulse * 105), int(pulse * 100), int(pulse * 100))


def hud_text(game: Game) -> str:
    """Return the level and score line shown while playing."""
    return f"Level: {game.current_level}  Score: {game.score}"


class Renderer:
    """Draws the game onto a surface using a normal and a title font."""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font, title_font: pygame.font.Font) -> None:
        self.surface = surface
        self.font = font
        self.title_font = title_font

    def _text(
        self,
        font: pygame.font.Font,
        color: Color,
        x: int,
        y: int,
        text: str,
        centered: bool = True,
    ) -> None:
        image = font.render(text, True, color)
        rect = image.get_rect()
        if centered:
            rect.midtop = (x, y)
        else:
            rect.topleft = (x, y)
        self.surface.blit(image, rect)

    def _fill_rect(self, color: Color, x1: float, y1: float, x2: float, y2: float) -> None:
        left, top = round(x1), round(y1)
        width, height = round(x2) - left, round(y2) - top
        if width > 0 and height > 0:
            pygame.draw.rect(self.surface, color, pygame.Rect(left, top, width, height))

    def _overlay(self, rgba: tuple[int, int, int, int]) -> None:
        layer = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        layer.fill(rgba)
        self.surface.blit(layer, (0, 0))

    def _draw_menu(self, menu: Menu, title: str) -> None:
        self.surface.fill(MENU_BACKGROUND_COLOR)
        self._text(self.title_font, TITLE_TEXT_COLOR, _CENTER_X, MENU_TITLE_Y, title)
        for index, item in enumerate(menu.items):
            y = MENU_ITEM_START_Y + index * MENU_ITEM_SPACING
            self._text(self.font, menu_item_color(menu, index), _CENTER_X, y, item.text)

    def _draw_welcome(self, now: float) -> None:
        self.surface.fill(MENU_BACKGROUND_COLOR)
        self._text(
            self.title_font,
            welcome_title_color(now),
            _CENTER_X,
            SCREEN_HEIGHT // WELCOME_TITLE_Y_DIVISOR,
            "Cancer Cell Adventure",
        )
        self._text(
            self.font,
            COLOR_LIGHT_GRAY,
            _CENTER_X,
            SCREEN_HEIGHT // WELCOME_SUBTEXT_Y_DIVISOR,
            "Press ENTER to start",
        )
        self._text(
            self.font,
            COLOR_MEDIUM_GRAY,
            _CENTER_X,
            SCREEN_HEIGHT - WELCOME_VERSION_OFFSET_Y,
            "Version 1.0",
        )

    def _draw_pause(self) -> None:
        self._overlay((0, 0, 0, ALPHA_OVERLAY_MEDIUM))
        self._text(self.title_font, COLOR_WHITE, _CENTER_X, SCREEN_HEIGHT // PAUSE_TITLE_Y_DIVISOR, "PAUSED")
        text_y = SCREEN_HEIGHT // PAUSE_TEXT_Y_DIVISOR
        self._text(self.font, COLOR_LIGHT_GRAY, _CENTER_X, text_y, "Press ESC to resume")
        self._text(
            self.font, COLOR_LIGHT_GRAY, _CENTER_X, text_y + PAUSE_TEXT_SPACING, "Press M for Main Menu"
        )

    def _draw_game_over(self, game: Game) -> None:
        self._overlay((0, 0, 0, ALPHA_OVERLAY_DARK))
        self._text(self.title_font, COLOR_RED, _CENTER_X, SCREEN_HEIGHT // GAMEOVER_TITLE_Y_DIVISOR, "GAME OVER")
        text_y = SCREEN_HEIGHT // GAMEOVER_TEXT_Y_DIVISOR
        self._text(self.font, COLOR_WHITE, _CENTER_X, text_y, f"Final Score: {game.score}")
        self._text(
            self.font,
            COLOR_LIGHT_GRAY,
            _CENTER_X,
            text_y + GAMEOVER_TEXT_SPACING_1,
            "Press ENTER to return to menu",
        )
        self._text(
            self.font, COLOR_LIGHT_GRAY, _CENTER_X, text_y + GAMEOVER_TEXT_SPACING_2, "Press R to retry level"
        )

    def _draw_level_complete(self, game: Game) -> None:
        self._overlay((0, 0, 100, ALPHA_OVERLAY_DARK))
        self._text(
            self.title_font,
            COLOR_WHITE,
            _CENTER_X,
            SCREEN_HEIGHT // LEVELCOMPLETE_TITLE_Y_DIVISOR,
            "LEVEL COMPLETE!",
        )
        text_y = SCREEN_HEIGHT // LEVELCOMPLETE_TEXT_Y_DIVISOR
        self._text(self.font, COLOR_WHITE, _CENTER_X, text_y, f"Score: {game.score}")
        prompt = (
            "Press N for Next Level"
            if game.current_level < game.num_levels
            else "Press N for Victory Screen"
        )
        self._text(self.font, COLOR_LIGHT_GRAY, _CENTER_X, text_y + LEVELCOMPLETE_TEXT_SPACING_1, prompt)
        self._text(
            self.font, COLOR_LIGHT_GRAY, _CENTER_X, text_y + LEVELCOMPLETE_TEXT_SPACING_2, "Press M for Main Menu"
        )

    def _draw_victory(self, game: Game) -> None:
        self._overlay((255, 215, 0, ALPHA_OVERLAY_DARK))
        self._text(self.title_font, COLOR_WHITE, _CENTER_X, SCREEN_HEIGHT // VICTORY_TITLE_Y_DIVISOR, "VICTORY!")
        text_y = SCREEN_HEIGHT // VICTORY_TEXT_Y_DIVISOR
        self._text(self.font, COLOR_WHITE, _CENTER_X, text_y, f"Final Score: {game.score}")
        self._text(
            self.font,
            (220, 220, 220),
            _CENTER_X,
            text_y + VICTORY_TEXT_SPACING,
            "Press ENTER to return to menu",
        )

    @staticmethod
    def _on_screen(screen_x: float, width: float) -> bool:
        return screen_x + width >= 0 and screen_x <= SCREEN_WIDTH

    def _draw_playing(self, game: Game) -> None:
        self.surface.fill(COLOR_SKY_BLUE)
        level = game.current_level_data
        if level is None:
            return
        scroll = level.scroll_x

        if isinstance(level.background, pygame.Surface):
            self.surface.blit(level.background, (round(-scroll), 0))

        for platform in level.platforms:
            sx = platform.x - scroll
            if self._on_screen(sx, platform.width):
                self._fill_rect(platform.color, sx, platform.y, sx + platform.width, platform.y + platform.height)

        portal = level.portal
        if portal.is_active:
            sx = portal.x - scroll
            if self._on_screen(sx, portal.width):
                self._fill_rect(COLOR_PURPLE, sx, portal.y, sx + portal.width, portal.y + portal.height)
                pygame.draw.rect(
                    self.surface,
                    COLOR_WHITE,
                    pygame.Rect(round(sx), round(portal.y), round(portal.width), round(portal.height)),
                    round(PORTAL_BORDER_THICKNESS),
                )

        for enemy in level.enemies:
            if not enemy.active:
                continue
            sx = enemy.x - scroll
            if not self._on_screen(sx, enemy.width):
                continue
            color = _ENEMY_COLORS.get(enemy.type, COLOR_WHITE)
            pygame.draw.circle(
                self.surface,
                color,
                (round(sx + enemy.width / 2), round(enemy.y + enemy.height / 2)),
                round(enemy.width / 2),
            )
            if enemy.health < enemy.max_health:
                fraction = max(enemy.health / enemy.max_health, 0.0)
                bar_top = enemy.y - ENEMY_HEALTH_BAR_OFFSET_Y
                self._fill_rect(
                    health_bar_color(fraction),
                    sx,
                    bar_top,
                    sx + enemy.width * fraction,
                    bar_top + ENEMY_HEALTH_BAR_HEIGHT,
                )

        for item in level.glucose_items:
            if not item.active:
                continue
            sx = item.x - scroll
            if self._on_screen(sx, item.width):
                self._fill_rect(COLOR_GLUCOSE, sx, item.y, sx + item.width, item.y + item.height)

        player = game.player
        px = player.x - scroll
        pygame.draw.circle(
            self.surface,
            COLOR_PINKISH_RED,
            (round(px + player.width / 2), round(player.y + player.height / 2)),
            round(player.width / 2),
        )

        fraction = max(player.health / player.max_health, 0.0)
        self._fill_rect(
            health_bar_color(fraction),
            PLAYER_HUD_HEALTH_X,
            PLAYER_HUD_HEALTH_Y,
            PLAYER_HUD_HEALTH_X + PLAYER_HUD_HEALTH_WIDTH_MAX * fraction,
            PLAYER_HUD_HEALTH_Y + PLAYER_HUD_HEALTH_HEIGHT,
        )
        self._text(self.font, COLOR_WHITE, HUD_TEXT_X, HUD_TEXT_Y, hud_text(game), centered=False)

    def draw(self, game: Game, now: float) -> None:
        """Draw the screen for the game's current state; `now` is in seconds."""
        state = game.state
        if state is GameState.WELCOME_SCREEN:
            self._draw_welcome(now)
        elif state is GameState.MAIN_MENU:
            self._draw_menu(game.main_menu, "Main Menu")
        elif state is GameState.LEVEL_SELECT:
            self._draw_menu(game.level_menu, "Select Level")
        elif state is GameState.SETTINGS:
            self._draw_menu(game.settings_menu, "Settings")
        elif state is GameState.PAUSED:
            self._draw_pause()
        elif state is GameState.GAME_OVER:
            self._draw_game_over(game)
        elif state is GameState.LEVEL_COMPLETE:
            self._draw_level_complete(game)
        elif state is GameState.VICTORY:
            self._draw_victory(game)
        elif state is GameState.PLAYING:
            self._draw_playing(game)