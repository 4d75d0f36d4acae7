"""
UI Manager - handles HUD, start overlay and game over screen
"""

import pygame

from frustration_maze.utils.colors import (
    COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_TEXT_DIM, COLOR_PANEL_BG,
    COLOR_MENU_OVERLAY, COLOR_GAME_OVER
)
from frustration_maze.utils.helpers import format_time


class UIManager:
    """
    Manages all UI rendering
    """
    def __init__(self):
        # Fonts
        self.font_small = None
        self.font_medium = None
        self.font_large = None
        self.font_title = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.SysFont("consolas", 14)
        self.font_medium = pygame.font.SysFont("consolas", 18)
        self.font_large = pygame.font.SysFont("consolas", 28, bold=True)
        self.font_title = pygame.font.SysFont("consolas", 48, bold=True)

    def draw_hud(self, screen, snapshot, panel_y, screen_w, panel_h):
        """
        Draw HUD (Heads-Up Display)

        Args:
            screen: Pygame screen
            snapshot: Dict from GameSession.snapshot()
            panel_y: Y position of panel
            screen_w: Screen width
            panel_h: Panel height
        """
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, panel_h))

        # Counters (left), timer (centre)
        counters = self.font_medium.render(
            f"Deaths: {snapshot['deaths']}    Level: {snapshot['level']}", True, COLOR_TEXT
        )
        screen.blit(counters, (10, panel_y + 10))

        timer = self.font_large.render(format_time(snapshot['elapsed']), True, COLOR_TEXT)
        timer_rect = timer.get_rect(center=(screen_w // 2, panel_y + 22))
        screen.blit(timer, timer_rect)

        # Level description (bottom line)
        desc = self.font_small.render(snapshot['description'], True, COLOR_TEXT_DIM)
        screen.blit(desc, (10, panel_y + panel_h - 22))

    def _draw_overlay(self, screen):
        screen_w, screen_h = screen.get_size()
        overlay = pygame.Surface((screen_w, screen_h), pygame.SRCALPHA)
        overlay.fill(COLOR_MENU_OVERLAY)
        screen.blit(overlay, (0, 0))

    def draw_start(self, screen, title):
        """Draw the start overlay shown before the first run"""
        self._draw_overlay(screen)
        screen_w, screen_h = screen.get_size()

        heading = self.font_title.render(title, True, COLOR_TEXT_HIGHLIGHT)
        screen.blit(heading, heading.get_rect(center=(screen_w // 2, screen_h // 2 - 50)))

        lines = [
            "Reach the green circle. Avoid everything red.",
            "Arrow keys or WASD to move",
            "Press SPACE or ENTER to start",
        ]
        for i, line in enumerate(lines):
            text = self.font_medium.render(line, True, COLOR_TEXT)
            screen.blit(text, text.get_rect(center=(screen_w // 2, screen_h // 2 + 10 + i * 30)))

    def draw_game_over(self, screen, deaths):
        """Draw game over screen"""
        self._draw_overlay(screen)
        screen_w, screen_h = screen.get_size()

        title = self.font_title.render("GAME OVER", True, COLOR_GAME_OVER)
        screen.blit(title, title.get_rect(center=(screen_w // 2, screen_h // 2 - 50)))

        message = self.font_large.render(f"You died {deaths} times", True, COLOR_TEXT)
        screen.blit(message, message.get_rect(center=(screen_w // 2, screen_h // 2 + 20)))

        options = [
            "Press R to retry",
            "Press ESC to quit"
        ]
        start_y = screen_h // 2 + 80
        for i, opt in enumerate(options):
            text = self.font_medium.render(opt, True, COLOR_TEXT_DIM)
            screen.blit(text, text.get_rect(center=(screen_w // 2, start_y + i * 30)))
