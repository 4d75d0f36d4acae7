"""
Level Manager - handles maze generation, goal placement, obstacle spawning
and level progression
"""

import logging
import random

from frustration_maze.maze.generator import generate_maze
from frustration_maze.maze.difficulty import get_difficulty_config, get_first_level_config
from frustration_maze.entities.goal import Goal
from frustration_maze.entities.obstacle import ObstacleField
from frustration_maze.utils.constants import (
    MAZE_WALL_THICKNESS, GOAL_SIZE, GOAL_CANDIDATES
)
from frustration_maze.utils.helpers import distance

logger = logging.getLogger(__name__)


class Level:
    """
    Represents a single level: maze walls, goal and obstacles
    """
    def __init__(self, number, maze, goal, obstacle_field, config=None):
        self.number = number
        self.config = config or get_difficulty_config(number)
        self.maze = maze
        self.goal = goal
        self.obstacle_field = obstacle_field

    @property
    def walls(self):
        return self.maze.walls

    @property
    def obstacles(self):
        return self.obstacle_field.obstacles

    def __repr__(self):
        return f"Level(number={self.number}, maze={self.maze.cols}x{self.maze.rows}, obstacles={len(self.obstacle_field)})"


def first_level_goal_position(cell_size, cols, rows, thickness=MAZE_WALL_THICKNESS):
    """Centre of the maze's far corner cell"""
    goal_x = thickness + (cols - 1) * cell_size + cell_size / 2
    goal_y = thickness + (rows - 1) * cell_size + cell_size / 2
    return goal_x, goal_y


def pick_far_goal(rng, from_x, from_y, play_w, play_h, goal_size=GOAL_SIZE, candidates=GOAL_CANDIDATES):
    """
    Sample goal positions and keep the one farthest from a point

    Candidates are drawn inside the play area with a margin of half the goal
    size. The first strict maximum wins ties.

    Returns:
        (x, y) tuple
    """
    span_x = max(0, play_w - goal_size)
    span_y = max(0, play_h - goal_size)

    best = None
    best_dist = -1.0
    for _ in range(candidates):
        x = rng.random() * span_x + goal_size / 2
        y = rng.random() * span_y + goal_size / 2

        dist = distance(from_x, from_y, x, y)
        if dist > best_dist:
            best_dist = dist
            best = (x, y)

    return best


class LevelManager:
    """
    Manages level generation and progression
    """
    def __init__(self, rng=None):
        self.rng = rng or random
        self.current_level = None
        self.level_number = 1

    def generate_first_level(self, player, play_w, play_h):
        """
        Build the fixed opening level

        10x10 maze, player just inside the top-left corner, goal in the
        centre of the far corner cell and no obstacles.

        Returns:
            Level object
        """
        self.level_number = 1
        config = get_first_level_config()
        cols, rows = config.cols, config.rows
        maze = generate_maze(cols, rows, play_w, play_h, self.rng)

        player.reset_position(MAZE_WALL_THICKNESS * 2, MAZE_WALL_THICKNESS * 2)

        goal = Goal(*first_level_goal_position(maze.cell_size, cols, rows))
        obstacle_field = ObstacleField(self.rng)

        self.current_level = Level(1, maze, goal, obstacle_field, config)
        logger.debug("First level ready: %r, goal at (%.1f, %.1f)", self.current_level, goal.x, goal.y)
        return self.current_level

    def generate(self, level_number, player, play_w, play_h):
        """
        Build a random level

        Args:
            level_number: Level number (1+)
            player: Player object (reset to spawn)
            play_w, play_h: Play area size in pixels

        Returns:
            Level object
        """
        self.level_number = level_number
        config = get_difficulty_config(level_number)

        player.reset_position()

        maze = generate_maze(config.cols, config.rows, play_w, play_h, self.rng)

        goal = Goal()
        goal.place(*pick_far_goal(self.rng, player.x, player.y, play_w, play_h, goal.size))

        obstacle_field = ObstacleField(self.rng)
        obstacle_field.populate(level_number, play_w, play_h)

        self.current_level = Level(level_number, maze, goal, obstacle_field, config)
        logger.debug("Generated %r, goal at (%.1f, %.1f)", self.current_level, goal.x, goal.y)
        return self.current_level

    def advance(self, player, play_w, play_h):
        """
        Move on to the next level: faster player, bigger maze, more obstacles

        Returns:
            The new Level object
        """
        player.speed_up()
        level = self.generate(self.level_number + 1, player, play_w, play_h)
        logger.info("Level %d reached (player speed %.1f)", level.number, player.speed)
        return level

    def __repr__(self):
        return f"LevelManager(level={self.level_number}, current_level={self.current_level})"
