"""
Frustration Maze - pygame host
Window, event loop and drawing around a GameSession
"""

import logging
import sys

import pygame

from frustration_maze.config import (
    GAME_TITLE, GAME_VERSION, WINDOW_WIDTH, WINDOW_HEIGHT,
    MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT, PANEL_H, FPS
)
from frustration_maze.game.session import GameSession
from frustration_maze.game.renderer import Renderer
from frustration_maze.game.ui_manager import UIManager
from frustration_maze.utils.colors import COLOR_BG


class FrustrationMazeApp:
    """
    Main game class
    """
    def __init__(self, seed=None):
        pygame.init()

        self.screen_w = WINDOW_WIDTH
        self.screen_h = WINDOW_HEIGHT
        self.screen = None
        self._create_screen(self.screen_w, self.screen_h)

        self.session = GameSession(*self._play_area_size(), seed=seed)
        self.renderer = Renderer()
        self.ui_manager = UIManager()

        self.clock = pygame.time.Clock()
        self.running = True

    def _create_screen(self, width, height):
        """Create or resize the window"""
        self.screen_w = max(MIN_WINDOW_WIDTH, width)
        self.screen_h = max(MIN_WINDOW_HEIGHT, height)
        self.screen = pygame.display.set_mode((self.screen_w, self.screen_h), pygame.RESIZABLE)
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

    def _play_area_size(self):
        return self.screen_w, self.screen_h - PANEL_H

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.VIDEORESIZE:
                self._create_screen(event.w, event.h)
                self.session.resize(*self._play_area_size())

            elif event.type == pygame.MOUSEMOTION:
                mx, my = event.pos
                self.session.pointer_moved(mx, my)

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

            elif event.type == pygame.KEYUP:
                self.session.release(pygame.key.name(event.key))

    def _handle_keydown(self, key):
        """Handle key press based on current state"""
        if key == pygame.K_ESCAPE:
            self.running = False
            return

        game_over = self.session.game_over
        if key in (pygame.K_SPACE, pygame.K_RETURN) and not game_over:
            self.session.start()
        elif key == pygame.K_r and game_over:
            self.session.restart()
        else:
            self.session.press(pygame.key.name(key))

    def update(self, dt_ms):
        """Advance the session and report events"""
        for event in self.session.tick(dt_ms):
            if event['event'] == 'level_complete':
                print(f"Level {event['level']}!")
            elif event['event'] == 'game_over':
                print(f"Game over: {event['deaths']} deaths, reached level {event['level']}")

    def render(self):
        """Render current game state"""
        self.screen.fill(COLOR_BG)
        snapshot = self.session.snapshot()

        self.renderer.draw(self.screen, snapshot)
        play_w, play_h = self._play_area_size()
        self.ui_manager.draw_hud(self.screen, snapshot, play_h, play_w, PANEL_H)

        if snapshot['game_over']:
            self.ui_manager.draw_game_over(self.screen, snapshot['deaths'])
        elif snapshot['state'] == 'INACTIVE':
            self.ui_manager.draw_start(self.screen, GAME_TITLE)

        pygame.display.flip()

    def run(self):
        """Main game loop"""
        while self.running:
            dt_ms = self.clock.tick(FPS)

            self.handle_events()
            self.update(dt_ms)
            self.render()

        pygame.quit()
        sys.exit()


def main():
    """Entry point"""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else None
    print(f"{GAME_TITLE} v{GAME_VERSION}")
    game = FrustrationMazeApp(seed=seed)
    game.run()


if __name__ == "__main__":
    main()
