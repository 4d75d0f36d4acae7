import random

import pytest

from frustration_maze.game.game_state import GameState
from frustration_maze.game.session import GameSession


def test_new_session_waits_on_first_level():
    session = GameSession(800, 600, seed=1)
    assert session.state_manager.is_state(GameState.INACTIVE)
    assert session.level_number == 1
    assert session.level.maze.cols == 10
    assert (session.level.goal.x, session.level.goal.y) == (pytest.approx(565.5), pytest.approx(565.5))


def test_start_only_once():
    session = GameSession(seed=1)
    assert session.start() is True
    assert session.start() is False
    assert session.active


def test_restart_after_game_over(open_session):
    session = open_session(3)
    session.player.speed = 4.5
    session.deaths = 49
    session.level.obstacle_field.add_obstacle(400, 300, 10, 0, 0)
    session.tick(1600)
    assert session.game_over
    assert session.start() is False

    assert session.restart() is True

    assert session.active
    assert not session.game_over
    assert session.deaths == 0
    assert session.level_number == 1
    assert session.player.speed == 3
    assert (session.player.x, session.player.y) == (50, 50)
    # Restart builds a random level 1, not the fixed opening maze
    assert session.level.maze.cols == 6
    assert len(session.level.obstacles) == 2
    assert session.elapsed_seconds == 0
    assert session.snapshot()['inverted'] is False


def test_restart_mid_run_keeps_running(open_session):
    session = open_session(2)
    assert session.restart() is True
    assert session.active
    assert session.state_manager.transitions == 3


def test_elapsed_seconds_follow_clock(open_session):
    session = open_session(1)
    session.tick(1000)
    assert session.elapsed_seconds == 1
    session.tick(500)
    assert session.elapsed_seconds == 1
    session.tick(600)
    assert session.elapsed_seconds == 2


def test_elapsed_seconds_freeze_on_game_over(open_session):
    session = open_session(1)
    session.tick(3000)
    session.deaths = 49
    session.level.obstacle_field.add_obstacle(400, 300, 10, 0, 0)
    session.tick(16)
    assert session.game_over

    session.tick(5000)
    assert session.elapsed_seconds == 3


def test_negative_dt_counts_as_zero(open_session):
    session = open_session(1)
    session.press('right')
    session.tick(-50)
    assert session.clock == 0
    assert session.player.x == 400


def test_resize_clamps_negative_sizes():
    session = GameSession(seed=2)
    session.resize(-10, 300)
    assert (session.play_w, session.play_h) == (0, 300)


def test_zero_area_session_is_usable():
    session = GameSession(0, 0, seed=2)
    session.start()
    events = session.tick(16)
    assert len(events) == 1
    assert session.level.maze.cell_size == 1


def test_snapshot_is_a_copy(open_session):
    session = open_session(2)
    session.level.obstacle_field.add_obstacle(600, 100, 12, 0.5, 0)

    snapshot = session.snapshot()
    snapshot['obstacles'][0]['x'] = -1
    snapshot['player']['x'] = -1

    assert session.level.obstacles[0].x == 600
    assert session.player.x == 400
    assert snapshot['walls'][0] == (0, 0, 800, 5)
    assert snapshot['state'] == 'ACTIVE'
    assert snapshot['level'] == 2
    assert snapshot['play_size'] == (800, 600)


def test_snapshot_describes_the_level_being_played():
    session = GameSession(800, 600, seed=1)
    assert session.snapshot()['description'] == "Level 1: maze 10x10, 0 obstacles"

    session.restart()
    assert session.snapshot()['description'] == "Level 1: maze 6x6, 2 obstacles"


def test_snapshot_leaves_inversion_to_the_tick(open_session):
    session = open_session(3)
    session.effects.inversion.arm(0, 100)
    session.clock = 500

    assert session.snapshot()['inverted'] is False
    assert session.effects.inversion.expires_at == 100

    session.tick(0)
    assert session.effects.inversion.expires_at is None


def test_same_seed_same_run():
    def play(seed):
        session = GameSession(800, 600, seed=seed)
        session.start()
        keys = random.Random(seed + 1)
        trace = []
        for _ in range(600):
            key = keys.choice(['up', 'down', 'left', 'right'])
            session.press(key)
            session.tick(16)
            session.release(key)
            trace.append((round(session.player.x, 6), round(session.player.y, 6), session.deaths, session.level_number))
        return trace

    assert play(21) == play(21)


@pytest.mark.parametrize("seed", [5, 6])
def test_deaths_never_decrease_and_game_over_fires_at_most_once(seed):
    session = GameSession(800, 600, seed=seed)
    session.start()
    session.deaths = 40
    keys = random.Random(seed)

    last = session.deaths
    game_overs = 0
    for _ in range(4000):
        for direction in ('up', 'down', 'left', 'right'):
            if keys.random() < 0.3:
                session.press(direction)
            else:
                session.release(direction)
        events = session.tick(16)
        game_overs += sum(1 for e in events if e['event'] == 'game_over')
        assert session.deaths >= last
        last = session.deaths

    assert session.deaths <= 50
    assert game_overs == (1 if session.game_over else 0)
    if session.deaths == 50:
        assert not session.active
