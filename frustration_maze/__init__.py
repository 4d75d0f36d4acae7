"""
Frustration Maze - a top-down maze game that gets meaner every level
"""

from .config import GAME_TITLE, GAME_VERSION
from .game.session import GameSession
from .game.game_state import GameState

__version__ = GAME_VERSION

__all__ = ['GameSession', 'GameState', 'GAME_TITLE', 'GAME_VERSION']
