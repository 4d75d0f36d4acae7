"""
Per-frame gameplay update: movement, collisions, deaths and level changes
"""

import logging

from frustration_maze.game.collision import CollisionHandler
from frustration_maze.utils.constants import (
    FRAME_MS, DIRECTION_VECTORS, MAX_DEATHS,
    INPUT_RESISTANCE_MIN, INPUT_RESISTANCE_MAX
)

logger = logging.getLogger(__name__)


class SimulationStep:
    """
    Advances an active GameSession by one frame
    """
    def __init__(self, rng, effect_engine, collision_handler=None):
        self.rng = rng
        self.effect_engine = effect_engine
        self.collision_handler = collision_handler or CollisionHandler()

    def tick(self, session, dt):
        """
        Run one gameplay frame

        Args:
            session: GameSession (mutated in place)
            dt: Frame interval in milliseconds

        Returns:
            List of event dicts ('death', 'level_complete', 'game_over')
        """
        events = []
        player = session.player
        level = session.level
        config = level.config

        move_speed = player.speed * (dt / FRAME_MS)
        directions = session.input.active_directions()

        for direction in directions:
            dx, dy = DIRECTION_VECTORS[direction]
            step = move_speed * self._input_factor(config)
            player.move(dx * step, dy * step)

        moved = bool(directions)
        if moved:
            self.effect_engine.note_movement(session.effects, session.clock)

        # Inertia: the player keeps sliding past where they meant to stop
        if moved and config.inertia_factor > 0:
            extra = move_speed * config.inertia_factor
            for direction in directions:
                dx, dy = DIRECTION_VECTORS[direction]
                player.move(dx * extra, dy * extra)

        player.clamp_to(session.play_w, session.play_h)

        result = self.collision_handler.check_player_position(player, level)
        if result['player_died']:
            cause = 'wall' if result['wall'] is not None else 'obstacle'
            events.extend(self.handle_death(session, cause))
        elif result['goal']:
            new_level = session.level_manager.advance(player, session.play_w, session.play_h)
            events.append({'event': 'level_complete', 'level': new_level.number})

        level = session.level
        level.obstacle_field.update(dt, level.number, player, session.play_w, session.play_h)

        return events

    def _input_factor(self, config):
        """Unreliable input from level 5: each pressed key only partly registers"""
        if config.input_resistance:
            return self.rng.uniform(INPUT_RESISTANCE_MIN, INPUT_RESISTANCE_MAX)
        return 1.0

    def handle_death(self, session, cause='wall'):
        """
        Count a death, start the death effects and respawn the player

        Returns:
            List of event dicts
        """
        session.deaths += 1
        self.effect_engine.on_death(session.effects, session.level.config, session.clock)
        session.player.reset_position()

        events = [{'event': 'death', 'deaths': session.deaths, 'cause': cause}]
        logger.debug("Death %d (%s) on level %d", session.deaths, cause, session.level.number)

        if session.deaths >= MAX_DEATHS and session.end_game():
            events.append({'event': 'game_over', 'deaths': session.deaths, 'level': session.level.number})

        return events
