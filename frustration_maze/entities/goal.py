"""
Goal entity - reaching it completes the level
"""

from frustration_maze.utils.constants import GOAL_SIZE


class Goal:
    """Circular goal zone"""
    def __init__(self, x=0.0, y=0.0):
        self.x = x
        self.y = y
        self.size = GOAL_SIZE

    @property
    def radius(self):
        return self.size / 2

    def place(self, x, y):
        self.x = x
        self.y = y

    def to_dict(self):
        return {'x': self.x, 'y': self.y, 'size': self.size}

    def __repr__(self):
        return f"Goal(pos=({self.x:.1f},{self.y:.1f}))"
