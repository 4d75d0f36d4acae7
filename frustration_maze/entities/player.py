"""
Player entity - the dot steered through the maze
"""

from frustration_maze.utils.constants import (
    PLAYER_SIZE, PLAYER_INITIAL_SPEED, PLAYER_LEVEL_SPEED_INCREASE, PLAYER_SPAWN
)
from frustration_maze.utils.helpers import clamp


class Player:
    """
    Player with a position (pixels), a circular size and a movement speed
    """
    def __init__(self, x=PLAYER_SPAWN[0], y=PLAYER_SPAWN[1]):
        self.x = float(x)
        self.y = float(y)
        self.size = PLAYER_SIZE
        self.speed = PLAYER_INITIAL_SPEED

    @property
    def radius(self):
        return self.size / 2

    def move(self, dx, dy):
        """Displace the player (no collision checks)"""
        self.x += dx
        self.y += dy

    def clamp_to(self, play_w, play_h):
        """
        Keep the player inside the play area, inset by its radius

        A play area narrower than the player pins it to the inset edge.
        """
        half = self.radius
        self.x = clamp(self.x, half, max(half, play_w - half))
        self.y = clamp(self.y, half, max(half, play_h - half))

    def reset_position(self, x=PLAYER_SPAWN[0], y=PLAYER_SPAWN[1]):
        """Reset player to a spawn position"""
        self.x = float(x)
        self.y = float(y)

    def speed_up(self):
        """Per-level speed increase"""
        self.speed += PLAYER_LEVEL_SPEED_INCREASE

    def reset_speed(self):
        self.speed = PLAYER_INITIAL_SPEED

    def to_dict(self):
        return {'x': self.x, 'y': self.y, 'size': self.size, 'speed': self.speed}

    def __repr__(self):
        return f"Player(pos=({self.x:.1f},{self.y:.1f}), speed={self.speed})"
