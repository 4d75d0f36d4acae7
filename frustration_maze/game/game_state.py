"""
Game State Machine - Active while the run is being played, Inactive before
the first start and after game over
"""

import logging
from enum import Enum, auto

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Game states"""
    INACTIVE = auto()
    ACTIVE = auto()


class GameStateManager:
    """
    Manages game state transitions
    """
    def __init__(self):
        self.current_state = GameState.INACTIVE
        self.previous_state = None
        self.state_data = {}  # Data attached to the last transition
        self.transitions = 0

    def transition_to(self, new_state, **kwargs):
        """
        Transition to a new state

        Args:
            new_state: GameState enum value
            **kwargs: Additional data to attach to the new state

        Returns:
            True if the state changed
        """
        if new_state == self.current_state:
            return False

        self.previous_state = self.current_state
        self.current_state = new_state
        self.state_data = kwargs
        self.transitions += 1
        logger.debug("State %s -> %s %s", self.previous_state.name, self.current_state.name, self.state_data)
        return True

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    def is_active(self):
        return self.current_state == GameState.ACTIVE

    def can_start(self):
        """Check if a run can be started"""
        return self.current_state == GameState.INACTIVE

    def get_state_name(self):
        """Get current state name"""
        return self.current_state.name

    def __repr__(self):
        return f"GameStateManager(state={self.current_state.name})"
