"""
Global constants for Frustration Maze
"""

# Timing (all durations in milliseconds)
FRAME_MS = 16  # Reference frame interval, ~60 updates per second
INVERSION_DURATION_MS = 1000
IDLE_DRIFT_DELAY_MS = 2000
TIMER_INTERVAL_MS = 1000

# Play area
DEFAULT_PLAY_WIDTH = 800
DEFAULT_PLAY_HEIGHT = 600

# Wall bit flags (for maze carving)
TOP = 1
RIGHT = 2
BOTTOM = 4
LEFT = 8

# Direction vectors with wall bits
DIRS = [
    (0, -1, TOP, BOTTOM),    # up
    (1, 0, RIGHT, LEFT),     # right
    (0, 1, BOTTOM, TOP),     # down
    (-1, 0, LEFT, RIGHT),    # left
]

# Direction to bit mapping
DIR_TO_BITS = {
    (0, -1): (TOP, BOTTOM),
    (1, 0): (RIGHT, LEFT),
    (0, 1): (BOTTOM, TOP),
    (-1, 0): (LEFT, RIGHT),
}

# Maze settings
MAZE_WALL_THICKNESS = 5
INNER_WALL_CHANCE = 0.25
FIRST_LEVEL_MAZE_SIZE = 10
MAZE_BASE_SIZE = 5  # Random levels use (5 + level) x (5 + level)
MIN_CELL_SIZE = 1

# Player settings
PLAYER_SIZE = 15
PLAYER_INITIAL_SPEED = 3
PLAYER_LEVEL_SPEED_INCREASE = 0.5
PLAYER_SPAWN = (50, 50)

# Goal settings
GOAL_SIZE = 30
GOAL_CANDIDATES = 10

# Obstacle settings
OBSTACLES_PER_LEVEL = 2
OBSTACLE_MIN_RADIUS = 10
OBSTACLE_RADIUS_RANGE = 15
OBSTACLE_HOMING_CHANCE = 0.02
OBSTACLE_HOMING_FACTOR = 0.05
OBSTACLE_BASE_MAX_SPEED = 2
OBSTACLE_MAX_SPEED_PER_LEVEL = 0.5

# Deaths
MAX_DEATHS = 50

# Frustration effects
SHAKE_ON_DEATH = 10
SHAKE_DECAY = 0.9
SHAKE_EPSILON = 0.05
FAKE_CURSOR_SMOOTHING = 0.1
POINTER_TRAIL_LENGTH = 20
IDLE_NUDGE_AMOUNT = 0.5
INPUT_RESISTANCE_MIN = 0.5
INPUT_RESISTANCE_MAX = 1.0
INERTIA_PER_LEVEL = 0.1

# Level thresholds for each effect
LEVEL_FAKE_CURSOR = 2
LEVEL_INERTIA = 3
LEVEL_INVERSION = 3
LEVEL_HOMING = 4
LEVEL_IDLE_DRIFT = 4
LEVEL_INPUT_RESISTANCE = 5

# Movement directions, in the order input is applied
DIRECTIONS = ('up', 'down', 'left', 'right')

DIRECTION_VECTORS = {
    'up': (0, -1),
    'down': (0, 1),
    'left': (-1, 0),
    'right': (1, 0),
}

# Key name -> direction (pygame.key.name() spelling, lower-cased)
KEY_BINDINGS = {
    'up': 'up',
    'w': 'up',
    'down': 'down',
    's': 'down',
    'left': 'left',
    'a': 'left',
    'right': 'right',
    'd': 'right',
}
