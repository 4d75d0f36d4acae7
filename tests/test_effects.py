import random

import pytest

from frustration_maze.entities.player import Player
from frustration_maze.game.effects import EffectEngine, EffectState
from frustration_maze.game.input_state import PointerTrail
from frustration_maze.maze.difficulty import get_difficulty_config


def test_shake_decays_each_frame(open_session):
    session = open_session(1)
    session.effects.shake_intensity = 10

    session.tick(16)

    assert session.effects.shake_intensity == pytest.approx(9)
    x, y = session.snapshot()['shake_offset']
    assert -5 <= x <= 5 and -5 <= y <= 5


def test_shake_decays_while_inactive():
    engine = EffectEngine(random.Random(0))
    effects = EffectState()
    effects.shake_intensity = 10
    for _ in range(3):
        engine.tick(effects, get_difficulty_config(1), Player(), PointerTrail(), 0, active=False)
    assert effects.shake_intensity == pytest.approx(7.29)


def test_residual_shake_renders_still(open_session):
    session = open_session(1)
    session.effects.shake_intensity = 0.04
    session.tick(16)
    assert session.effects.shake_intensity > 0
    assert session.snapshot()['shake_offset'] == (0.0, 0.0)


def test_fake_cursor_eases_toward_trail(open_session):
    session = open_session(2)
    session.pointer_moved(100, 200)

    session.tick(16)
    assert session.effects.fake_cursor == [pytest.approx(10), pytest.approx(20)]

    session.tick(16)
    assert session.effects.fake_cursor == [pytest.approx(19), pytest.approx(38)]
    assert session.snapshot()['show_fake_cursor'] is True


def test_fake_cursor_static_with_empty_trail(open_session):
    session = open_session(2)
    session.tick(16)
    assert session.effects.fake_cursor == [0.0, 0.0]


def test_fake_cursor_off_on_level_one(open_session):
    session = open_session(1)
    session.pointer_moved(100, 200)
    session.tick(16)
    assert session.effects.fake_cursor == [0.0, 0.0]
    assert session.snapshot()['show_fake_cursor'] is False


def test_idle_drift_after_two_seconds(open_session):
    session = open_session(4)
    for _ in range(125):
        session.tick(16)
    assert session.clock == 2000
    assert (session.player.x, session.player.y) == (400, 300)

    session.tick(16)
    moved = abs(session.player.x - 400) + abs(session.player.y - 300)
    assert moved == pytest.approx(0.5)
    # Drift does not count as intentional movement
    assert session.effects.last_moved_at == 0

    session.tick(16)
    assert session.effects.last_moved_at == 0


def test_input_resets_idle_timer(open_session):
    session = open_session(4)
    session.tick(1500)
    session.press('left')
    session.tick(16)
    session.release('left')
    assert session.effects.last_moved_at == 1516

    x = session.player.x
    session.tick(1900)
    assert session.player.x == x


def test_no_drift_below_level_four(open_session):
    session = open_session(3)
    session.tick(5000)
    session.tick(16)
    assert (session.player.x, session.player.y) == (400, 300)


def test_no_drift_after_game_over(open_session):
    session = open_session(4)
    session.deaths = 49
    session.level.obstacle_field.add_obstacle(400, 300, 10, 0, 0)
    session.tick(16)
    assert session.game_over

    resting = (session.player.x, session.player.y)
    for _ in range(300):
        session.tick(16)
    assert session.clock - session.effects.last_moved_at > 2000
    assert (session.player.x, session.player.y) == resting


def test_nudge_picks_cardinal_direction(stub_random):
    # choice() over (up, down, left, right) with 0.6 picks 'left'
    engine = EffectEngine(stub_random([0.6]))
    player = Player(100, 100)
    engine._nudge(player)
    assert (player.x, player.y) == (99.5, 100)


def test_inversion_needs_level_three():
    engine = EffectEngine(random.Random(0))
    effects = EffectState()
    effects.inversion.arm(0, 1000)
    assert engine.is_inverted(effects, 2, 10) is False
    assert engine.is_inverted(effects, 3, 10) is True


def test_death_effects():
    engine = EffectEngine(random.Random(0))
    effects = EffectState()

    engine.on_death(effects, get_difficulty_config(2), 100)
    assert effects.shake_intensity == 10
    assert effects.inversion.expires_at is None

    engine.on_death(effects, get_difficulty_config(3), 100)
    assert effects.inversion.expires_at == 1100
