import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from frustration_maze.entities.goal import Goal
from frustration_maze.entities.obstacle import ObstacleField
from frustration_maze.game.level_manager import Level
from frustration_maze.game.session import GameSession
from frustration_maze.maze.generator import boundary_walls, carve_maze, compute_cell_size
from frustration_maze.maze.maze_core import Maze


class StubRandom:
    """Random source returning scripted values (cycling), for exact branch control"""

    def __init__(self, values=(0.0,)):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value

    def uniform(self, a, b):
        return a + (b - a) * self.random()

    def choice(self, seq):
        return seq[int(self.random() * len(seq))]


@pytest.fixture
def stub_random():
    return StubRandom


def make_open_level(number, play_w=800, play_h=600, goal=(700.0, 500.0), rng=None):
    """Level with only the boundary walls and no obstacles"""
    rng = rng or random.Random(0)
    grid = carve_maze(3, 3, rng)
    maze = Maze(grid, boundary_walls(play_w, play_h), compute_cell_size(3, 3, play_w, play_h))
    return Level(number, maze, Goal(*goal), ObstacleField(rng))


def install_level(session, level):
    session.level_manager.current_level = level
    session.level_manager.level_number = level.number
    return level


@pytest.fixture
def open_session():
    """Started session on an open level, player in the middle of the field"""

    def _build(number=1, seed=1, goal=(700.0, 500.0)):
        session = GameSession(800, 600, seed=seed)
        install_level(session, make_open_level(number, goal=goal, rng=session.rng))
        session.player.reset_position(400, 300)
        session.start()
        return session

    return _build


@pytest.fixture
def open_level():
    return make_open_level


@pytest.fixture
def install():
    return install_level
