"""
Moving obstacles
Circles that drift across the play area, bounce off its edges and, at higher
levels, occasionally lunge toward the player
"""

import math
import random

from frustration_maze.utils.constants import (
    FRAME_MS, OBSTACLE_MIN_RADIUS, OBSTACLE_RADIUS_RANGE,
    OBSTACLE_HOMING_CHANCE, OBSTACLE_HOMING_FACTOR
)
from frustration_maze.utils.helpers import circles_collide
from frustration_maze.maze.difficulty import get_difficulty_config


class Obstacle:
    """
    Single moving obstacle
    """
    def __init__(self, x, y, radius, vx, vy):
        """
        Args:
            x, y: Centre position (pixels)
            radius: Circle radius
            vx, vy: Velocity in pixels per reference frame
        """
        self.x = x
        self.y = y
        self.radius = radius
        self.vx = vx
        self.vy = vy

    def speed(self):
        return math.hypot(self.vx, self.vy)

    def integrate(self, frames):
        """Advance position by velocity scaled to the elapsed frame count"""
        self.x += self.vx * frames
        self.y += self.vy * frames

    def bounce(self, play_w, play_h):
        """Reverse velocity on each axis where the circle pokes out of the play area"""
        if self.x - self.radius < 0 or self.x + self.radius > play_w:
            self.vx *= -1
        if self.y - self.radius < 0 or self.y + self.radius > play_h:
            self.vy *= -1

    def home_toward(self, target_x, target_y, max_speed):
        """
        Nudge velocity toward a target, then cap the speed

        The cap rescales both components uniformly so direction is kept.
        """
        self.vx += (target_x - self.x) * OBSTACLE_HOMING_FACTOR
        self.vy += (target_y - self.y) * OBSTACLE_HOMING_FACTOR

        speed = self.speed()
        if speed > max_speed and speed > 0:
            self.vx = (self.vx / speed) * max_speed
            self.vy = (self.vy / speed) * max_speed

    def to_dict(self):
        return {'x': self.x, 'y': self.y, 'radius': self.radius, 'vx': self.vx, 'vy': self.vy}

    def __repr__(self):
        return f"Obstacle(pos=({self.x:.1f},{self.y:.1f}), r={self.radius:.1f}, v=({self.vx:.2f},{self.vy:.2f}))"


class ObstacleField:
    """
    Manages all obstacles in the level
    """
    def __init__(self, rng=None):
        self.obstacles = []
        self.rng = rng or random

    def add_obstacle(self, x, y, radius, vx, vy):
        """Add an obstacle to the field"""
        obstacle = Obstacle(x, y, radius, vx, vy)
        self.obstacles.append(obstacle)
        return obstacle

    def populate(self, level, play_w, play_h):
        """
        Replace the field with 2 * level random obstacles

        Positions are uniform over the play area, radius in [10, 25) and each
        velocity component in [-0.5, 0.5] scaled by the level's speed scale.
        """
        config = get_difficulty_config(level)
        rng = self.rng
        self.clear()

        for _ in range(config.obstacle_count):
            self.add_obstacle(
                rng.random() * play_w,
                rng.random() * play_h,
                OBSTACLE_MIN_RADIUS + rng.random() * OBSTACLE_RADIUS_RANGE,
                (rng.random() - 0.5) * config.obstacle_speed_scale,
                (rng.random() - 0.5) * config.obstacle_speed_scale,
            )

    def update(self, dt, level, player, play_w, play_h):
        """
        Update all obstacles

        Args:
            dt: Frame interval in milliseconds
            level: Current level number
            player: Player object (homing target)
            play_w, play_h: Play area size
        """
        frames = dt / FRAME_MS
        config = get_difficulty_config(level)

        for obstacle in self.obstacles:
            obstacle.integrate(frames)
            obstacle.bounce(play_w, play_h)

            if config.homing and self.rng.random() < OBSTACLE_HOMING_CHANCE:
                obstacle.home_toward(player.x, player.y, config.obstacle_max_speed)

    def check_collision(self, x, y, radius):
        """Return the first obstacle overlapping a circle, or None"""
        for obstacle in self.obstacles:
            if circles_collide(x, y, radius, obstacle.x, obstacle.y, obstacle.radius):
                return obstacle
        return None

    def clear(self):
        """Remove all obstacles"""
        self.obstacles.clear()

    def __len__(self):
        return len(self.obstacles)

    def __iter__(self):
        return iter(self.obstacles)

    def __repr__(self):
        return f"ObstacleField(obstacles={len(self.obstacles)})"
