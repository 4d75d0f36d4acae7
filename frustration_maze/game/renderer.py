"""
Renderer - draws a GameSession snapshot with pygame
"""

import pygame

from frustration_maze.utils.colors import (
    COLOR_MAZE_BG, COLOR_WALL, COLOR_OBSTACLE, COLOR_PLAYER, COLOR_GOAL,
    COLOR_FAKE_CURSOR, COLOR_INVERT_BASE
)

FAKE_CURSOR_RADIUS = 8


class Renderer:
    """
    Draws the play area

    The frame is composed offscreen so that inversion and shake can be
    applied to the finished image before it reaches the screen.
    """
    def __init__(self):
        self.frame = None

    def _frame_for(self, size):
        """Reuse the offscreen frame while the play area keeps its size"""
        size = (max(1, int(size[0])), max(1, int(size[1])))
        if self.frame is None or self.frame.get_size() != size:
            self.frame = pygame.Surface(size)
        return self.frame

    def draw(self, surface, snapshot, origin=(0, 0)):
        """
        Draw one frame

        Args:
            surface: Target pygame surface
            snapshot: Dict from GameSession.snapshot()
            origin: Top-left corner of the play area on the target
        """
        frame = self._frame_for(snapshot['play_size'])
        frame.fill(COLOR_MAZE_BG)

        self._draw_goal(frame, snapshot['goal'])
        self._draw_walls(frame, snapshot['walls'])
        self._draw_obstacles(frame, snapshot['obstacles'])
        if snapshot['show_fake_cursor']:
            self._draw_fake_cursor(frame, snapshot['fake_cursor'])
        self._draw_player(frame, snapshot['player'])

        if snapshot['inverted']:
            self._invert(frame)

        shake_x, shake_y = snapshot['shake_offset']
        surface.blit(frame, (origin[0] + int(round(shake_x)), origin[1] + int(round(shake_y))))

    def _draw_goal(self, frame, goal):
        pygame.draw.circle(frame, COLOR_GOAL, (goal['x'], goal['y']), goal['size'] / 2)

    def _draw_walls(self, frame, walls):
        for x, y, w, h in walls:
            pygame.draw.rect(frame, COLOR_WALL, pygame.Rect(int(x), int(y), max(1, int(w)), max(1, int(h))))

    def _draw_obstacles(self, frame, obstacles):
        for obstacle in obstacles:
            pygame.draw.circle(frame, COLOR_OBSTACLE, (obstacle['x'], obstacle['y']), obstacle['radius'])

    def _draw_fake_cursor(self, frame, position):
        """Semi-transparent decoy, drawn through an alpha surface"""
        size = FAKE_CURSOR_RADIUS * 2
        decoy = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(decoy, COLOR_FAKE_CURSOR, (FAKE_CURSOR_RADIUS, FAKE_CURSOR_RADIUS), FAKE_CURSOR_RADIUS)
        frame.blit(decoy, (position[0] - FAKE_CURSOR_RADIUS, position[1] - FAKE_CURSOR_RADIUS))

    def _draw_player(self, frame, player):
        pygame.draw.circle(frame, COLOR_PLAYER, (player['x'], player['y']), player['size'] / 2)

    def _invert(self, frame):
        """Replace the frame with white minus itself"""
        inverted = pygame.Surface(frame.get_size())
        inverted.fill(COLOR_INVERT_BASE)
        inverted.blit(frame, (0, 0), special_flags=pygame.BLEND_RGB_SUB)
        frame.blit(inverted, (0, 0))
