"""
Game session - owns every piece of game state and exposes the host interface
"""

import logging
import random

from frustration_maze.entities.player import Player
from frustration_maze.game.effects import EffectState, EffectEngine
from frustration_maze.game.game_state import GameState, GameStateManager
from frustration_maze.game.input_state import InputIntent, PointerTrail
from frustration_maze.game.level_manager import LevelManager
from frustration_maze.game.simulation import SimulationStep
from frustration_maze.game.timers import ElapsedTimer
from frustration_maze.maze.difficulty import get_difficulty_description
from frustration_maze.utils.constants import (
    DEFAULT_PLAY_WIDTH, DEFAULT_PLAY_HEIGHT, LEVEL_FAKE_CURSOR
)

logger = logging.getLogger(__name__)


class GameSession:
    """
    The whole game: player, level, effects, counters and clocks

    The host calls tick(dt) once per frame with the frame interval in
    milliseconds, feeds input through press/release/pointer_moved, and draws
    from snapshot(). All randomness comes from one injected random source.
    """
    def __init__(self, play_w=DEFAULT_PLAY_WIDTH, play_h=DEFAULT_PLAY_HEIGHT, rng=None, seed=None):
        """
        Args:
            play_w, play_h: Play area size in pixels
            rng: random.Random instance to draw from
            seed: Seed for a new random.Random when rng is not given
        """
        self.rng = rng or random.Random(seed)
        self.play_w = max(0, play_w)
        self.play_h = max(0, play_h)

        self.player = Player()
        self.level_manager = LevelManager(self.rng)
        self.state_manager = GameStateManager()
        self.effects = EffectState()
        self.effect_engine = EffectEngine(self.rng)
        self.simulation = SimulationStep(self.rng, self.effect_engine)
        self.input = InputIntent()
        self.pointer_trail = PointerTrail()
        self.timer = ElapsedTimer()

        self.deaths = 0
        self.clock = 0
        self.game_over = False

        self.level_manager.generate_first_level(self.player, self.play_w, self.play_h)

    # ========== STATE ==========

    @property
    def level(self):
        return self.level_manager.current_level

    @property
    def level_number(self):
        return self.level_manager.current_level.number

    @property
    def active(self):
        return self.state_manager.is_active()

    @property
    def elapsed_seconds(self):
        return self.timer.seconds

    # ========== CONTROL ==========

    def start(self):
        """
        Begin play (Inactive -> Active)

        A finished run cannot be resumed; use restart().

        Returns:
            True if the game was started
        """
        if self.game_over or not self.state_manager.can_start():
            return False

        self.state_manager.transition_to(GameState.ACTIVE)
        self.timer.start(self.clock)
        self.effects.last_moved_at = self.clock
        logger.info("Run started on level %d", self.level_number)
        return True

    def restart(self):
        """Reset counters, build a fresh level 1 and start playing"""
        self.state_manager.transition_to(GameState.INACTIVE, reason='restart')
        self.deaths = 0
        self.game_over = False
        self.player.reset_speed()
        self.timer.reset()
        self.effects.reset(self.clock)

        self.level_manager.generate(1, self.player, self.play_w, self.play_h)
        return self.start()

    def end_game(self):
        """
        Game over: stop play and freeze the elapsed time

        Returns:
            True if the game was running (so the transition happens once)
        """
        if not self.state_manager.transition_to(GameState.INACTIVE, reason='game_over', deaths=self.deaths):
            return False

        self.game_over = True
        self.timer.stop()
        logger.info("Game over after %d deaths on level %d (%ds)",
                    self.deaths, self.level_number, self.timer.seconds)
        return True

    def resize(self, play_w, play_h):
        """New play area size; clamping uses it at once, generation from the next level"""
        self.play_w = max(0, play_w)
        self.play_h = max(0, play_h)

    # ========== INPUT ==========

    def press(self, key_name):
        return self.input.handle_key(key_name, True)

    def release(self, key_name):
        return self.input.handle_key(key_name, False)

    def pointer_moved(self, x, y):
        self.pointer_trail.push(x, y)

    # ========== FRAME ==========

    def tick(self, dt):
        """
        Advance one frame

        Args:
            dt: Frame interval in milliseconds (negative counts as 0)

        Returns:
            List of event dicts for the host to react to
        """
        dt = max(0, dt)
        self.clock += dt
        active = self.state_manager.is_active()

        self.effect_engine.tick(self.effects, self.level.config, self.player,
                                self.pointer_trail, self.clock, active)

        events = []
        if active:
            events = self.simulation.tick(self, dt)

        self.timer.poll(self.clock)
        return events

    def snapshot(self):
        """
        Read-only view of everything a renderer needs for this frame

        Returns:
            Dictionary of plain values and copies
        """
        level = self.level
        return {
            'player': self.player.to_dict(),
            'goal': level.goal.to_dict(),
            'walls': [wall.as_tuple() for wall in level.walls],
            'obstacles': [obstacle.to_dict() for obstacle in level.obstacles],
            'fake_cursor': tuple(self.effects.fake_cursor),
            'show_fake_cursor': self.active and level.number >= LEVEL_FAKE_CURSOR,
            'shake_offset': self.effect_engine.shake_offset(self.effects),
            'inverted': self.effect_engine.is_inverted(self.effects, level.number, self.clock),
            'level': level.number,
            'description': get_difficulty_description(level.config),
            'deaths': self.deaths,
            'elapsed': self.timer.seconds,
            'state': self.state_manager.get_state_name(),
            'game_over': self.game_over,
            'play_size': (self.play_w, self.play_h),
        }

    def __repr__(self):
        return (f"GameSession(state={self.state_manager.get_state_name()}, level={self.level_number}, "
                f"deaths={self.deaths})")
