"""
Difficulty scaling for Frustration Maze
Every parameter is derived from the level number; higher levels switch on
more frustration effects
"""

from frustration_maze.utils.constants import (
    MAZE_BASE_SIZE, FIRST_LEVEL_MAZE_SIZE, OBSTACLES_PER_LEVEL,
    OBSTACLE_BASE_MAX_SPEED, OBSTACLE_MAX_SPEED_PER_LEVEL,
    INERTIA_PER_LEVEL,
    LEVEL_FAKE_CURSOR, LEVEL_INERTIA, LEVEL_INVERSION,
    LEVEL_HOMING, LEVEL_IDLE_DRIFT, LEVEL_INPUT_RESISTANCE
)


class DifficultyConfig:
    """Configuration for a single level"""
    def __init__(self, **kwargs):
        self.level = kwargs.get('level', 1)

        # Maze dimensions
        self.cols = kwargs.get('cols', MAZE_BASE_SIZE + 1)
        self.rows = kwargs.get('rows', MAZE_BASE_SIZE + 1)

        # Obstacles
        self.obstacle_count = kwargs.get('obstacle_count', 0)
        self.obstacle_speed_scale = kwargs.get('obstacle_speed_scale', 1.0)
        self.obstacle_max_speed = kwargs.get('obstacle_max_speed', OBSTACLE_BASE_MAX_SPEED)
        self.homing = kwargs.get('homing', False)

        # Movement interference
        self.inertia_factor = kwargs.get('inertia_factor', 0.0)
        self.input_resistance = kwargs.get('input_resistance', False)

        # Frustration effects
        self.fake_cursor = kwargs.get('fake_cursor', False)
        self.inversion_on_death = kwargs.get('inversion_on_death', False)
        self.idle_drift = kwargs.get('idle_drift', False)

    def active_effects(self):
        """Names of the effects switched on at this level"""
        flags = [
            ('fake_cursor', self.fake_cursor),
            ('inertia', self.inertia_factor > 0),
            ('inversion', self.inversion_on_death),
            ('homing', self.homing),
            ('idle_drift', self.idle_drift),
            ('input_resistance', self.input_resistance),
        ]
        return [name for name, on in flags if on]

    def __repr__(self):
        return (f"DifficultyConfig(level={self.level}, maze={self.cols}x{self.rows}, "
                f"obstacles={self.obstacle_count})")


def get_difficulty_config(level):
    """
    Get configuration for a level

    Args:
        level: Level number (1+)

    Returns:
        DifficultyConfig object
    """
    size = MAZE_BASE_SIZE + level
    return DifficultyConfig(
        level=level,
        cols=size,
        rows=size,
        obstacle_count=OBSTACLES_PER_LEVEL * level,
        obstacle_speed_scale=1 + level * 0.5,
        obstacle_max_speed=OBSTACLE_BASE_MAX_SPEED + level * OBSTACLE_MAX_SPEED_PER_LEVEL,
        homing=level >= LEVEL_HOMING,
        inertia_factor=INERTIA_PER_LEVEL * (level - 2) if level >= LEVEL_INERTIA else 0.0,
        input_resistance=level >= LEVEL_INPUT_RESISTANCE,
        fake_cursor=level >= LEVEL_FAKE_CURSOR,
        inversion_on_death=level >= LEVEL_INVERSION,
        idle_drift=level >= LEVEL_IDLE_DRIFT,
    )


def get_first_level_config():
    """Fixed opening level: larger maze, no obstacles, no effects"""
    config = get_difficulty_config(1)
    config.cols = config.rows = FIRST_LEVEL_MAZE_SIZE
    config.obstacle_count = 0
    return config


def get_difficulty_description(config):
    """Get short human-readable description of a level's configuration"""
    effects = config.active_effects()

    desc = f"Level {config.level}: maze {config.cols}x{config.rows}, {config.obstacle_count} obstacles"
    if effects:
        desc += " | " + ", ".join(effects)
    return desc
