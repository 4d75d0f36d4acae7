"""
Frustration effects - screen shake, inversion, decoy cursor and idle drift
"""

from frustration_maze.game.timers import Deadline
from frustration_maze.utils.constants import (
    SHAKE_ON_DEATH, SHAKE_DECAY, SHAKE_EPSILON,
    FAKE_CURSOR_SMOOTHING, IDLE_DRIFT_DELAY_MS, IDLE_NUDGE_AMOUNT,
    INVERSION_DURATION_MS, DIRECTIONS, DIRECTION_VECTORS,
    LEVEL_INVERSION
)
from frustration_maze.utils.helpers import lerp


class EffectState:
    """
    Mutable state of the frustration effects
    """
    def __init__(self):
        self.shake_intensity = 0.0
        self.shake_offset = (0.0, 0.0)
        self.inversion = Deadline()
        self.fake_cursor = [0.0, 0.0]
        self.last_moved_at = 0

    def reset(self, now=0):
        """Clear shake, inversion and idle timer (the decoy cursor stays put)"""
        self.shake_intensity = 0.0
        self.shake_offset = (0.0, 0.0)
        self.inversion.clear()
        self.last_moved_at = now

    def __repr__(self):
        return (f"EffectState(shake={self.shake_intensity:.2f}, "
                f"inverted_until={self.inversion.expires_at}, cursor={tuple(self.fake_cursor)})")


class EffectEngine:
    """
    Drives the escalating effects once per frame

    Effects are gated on the level's DifficultyConfig; shake and inversion are
    only started by deaths, the engine decays or expires them.
    """
    def __init__(self, rng):
        self.rng = rng

    def tick(self, effects, config, player, pointer_trail, now, active):
        """
        Update effects for one frame (runs whether or not the game is active)

        Args:
            effects: EffectState
            config: DifficultyConfig of the current level
            player: Player object (idle drift target)
            pointer_trail: PointerTrail with recent real cursor positions
            now: Engine clock in milliseconds
            active: True while gameplay is running
        """
        self._update_shake(effects)
        effects.inversion.expire(now)

        if config.fake_cursor:
            self._update_fake_cursor(effects, pointer_trail)

        if config.idle_drift and active and now - effects.last_moved_at > IDLE_DRIFT_DELAY_MS:
            self._nudge(player)

    def _update_shake(self, effects):
        """Pick this frame's offset, then decay"""
        intensity = effects.shake_intensity
        if intensity > 0:
            effects.shake_offset = (
                self.rng.random() * intensity - intensity / 2,
                self.rng.random() * intensity - intensity / 2,
            )
            effects.shake_intensity = intensity * SHAKE_DECAY
        else:
            effects.shake_offset = (0.0, 0.0)

    def _update_fake_cursor(self, effects, pointer_trail):
        """Ease the decoy toward a random recent pointer position"""
        target = pointer_trail.sample(self.rng)
        if target is None:
            return
        effects.fake_cursor[0] = lerp(effects.fake_cursor[0], target[0], FAKE_CURSOR_SMOOTHING)
        effects.fake_cursor[1] = lerp(effects.fake_cursor[1], target[1], FAKE_CURSOR_SMOOTHING)

    def _nudge(self, player):
        """Push the idle player a little in a random cardinal direction"""
        dx, dy = DIRECTION_VECTORS[self.rng.choice(DIRECTIONS)]
        player.move(dx * IDLE_NUDGE_AMOUNT, dy * IDLE_NUDGE_AMOUNT)

    def on_death(self, effects, config, now):
        """Effects started by a death: shake always, inversion from level 3"""
        effects.shake_intensity = SHAKE_ON_DEATH
        if config.inversion_on_death:
            effects.inversion.arm(now, INVERSION_DURATION_MS)

    def note_movement(self, effects, now):
        """Intentional input resets the idle timer"""
        effects.last_moved_at = now

    def shake_offset(self, effects):
        """Offset to draw this frame with; tiny residual shake renders as none"""
        if effects.shake_intensity < SHAKE_EPSILON:
            return (0.0, 0.0)
        return effects.shake_offset

    def is_inverted(self, effects, level, now):
        """Inversion is only drawn from level 3 on"""
        return level >= LEVEL_INVERSION and effects.inversion.is_active(now)
