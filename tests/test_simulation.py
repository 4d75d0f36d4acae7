import pytest

from frustration_maze.game.game_state import GameState
from frustration_maze.game.session import GameSession


def test_first_tick_on_opening_level_is_a_wall_death():
    session = GameSession(800, 600, seed=3)
    assert (session.player.x, session.player.y) == (10, 10)
    session.start()

    events = session.tick(16)

    assert events == [{'event': 'death', 'deaths': 1, 'cause': 'wall'}]
    assert session.deaths == 1
    assert (session.player.x, session.player.y) == (50, 50)
    assert session.effects.shake_intensity == 10


def test_movement_normalised_to_reference_frame(open_session):
    session = open_session(1)
    session.press('right')

    session.tick(16)
    assert session.player.x == pytest.approx(403)

    session.tick(32)
    assert session.player.x == pytest.approx(409)
    assert session.player.y == pytest.approx(300)


def test_diagonal_input_moves_both_axes(open_session):
    session = open_session(1)
    session.press('up')
    session.press('left')
    session.tick(16)
    assert (session.player.x, session.player.y) == (pytest.approx(397), pytest.approx(297))


def test_opposite_keys_cancel(open_session):
    session = open_session(1)
    session.press('up')
    session.press('down')
    session.tick(16)
    assert session.player.y == pytest.approx(300)


def test_inertia_overshoot_from_level_three(open_session):
    session = open_session(3)
    session.press('right')
    session.tick(16)
    assert session.player.x == pytest.approx(403.3)

    session = open_session(4)
    session.press('down')
    session.tick(16)
    assert session.player.y == pytest.approx(303.6)


def test_input_resistance_at_level_five(open_session):
    session = open_session(5)
    session.press('up')
    move = session.player.speed
    inertia = move * 0.3

    steps = []
    for _ in range(300):
        session.player.reset_position(400, 300)
        session.tick(16)
        steps.append(300 - session.player.y)

    for step in steps:
        assert 0.5 * move + inertia - 1e-9 <= step <= 1.0 * move + inertia + 1e-9
    # The factor is resampled every tick
    assert min(steps) < 0.6 * move + inertia
    assert max(steps) > 0.9 * move + inertia


def test_player_clamped_to_play_area(open_session):
    session = open_session(1)
    session.player.reset_position(-40, 900)
    session.tick(16)
    # Clamped to (7.5, 592.5) which touches the boundary walls
    assert session.deaths == 1

    session = open_session(1)
    session.resize(200, 150)
    session.tick(16)
    assert session.player.x == pytest.approx(192.5)
    assert session.player.y == pytest.approx(142.5)


def test_reaching_goal_completes_level(open_session):
    session = open_session(1, goal=(410.0, 300.0))

    events = session.tick(16)

    assert events == [{'event': 'level_complete', 'level': 2}]
    assert session.level_number == 2
    assert session.player.speed == pytest.approx(3.5)
    assert (session.player.x, session.player.y) == (50, 50)
    assert len(session.level.obstacles) == 4


def test_obstacle_death_skips_goal_check(open_session):
    session = open_session(2, goal=(400.0, 300.0))
    session.level.obstacle_field.add_obstacle(400, 300, 10, 0, 0)

    events = session.tick(16)

    assert events == [{'event': 'death', 'deaths': 1, 'cause': 'obstacle'}]
    assert session.level_number == 2


def test_inversion_after_death_from_level_three(open_session):
    session = open_session(3)
    obstacle = session.level.obstacle_field.add_obstacle(400, 300, 10, 0, 0)

    session.tick(16)
    assert session.snapshot()['inverted'] is True

    session.tick(984)  # clock 1000
    assert session.snapshot()['inverted'] is True

    session.tick(20)  # clock 1020
    assert session.snapshot()['inverted'] is False
    assert obstacle.x == 400


def test_latest_death_sets_inversion_expiry(open_session):
    session = open_session(3)
    obstacle = session.level.obstacle_field.add_obstacle(400, 300, 10, 0, 0)
    session.tick(16)  # death, inverted until 1016

    obstacle.x, obstacle.y = 50, 50
    session.tick(500)  # death at 516, inverted until 1516
    obstacle.x, obstacle.y = 600, 100
    assert session.deaths == 2

    session.tick(600)  # clock 1116
    assert session.snapshot()['inverted'] is True

    session.tick(500)  # clock 1616
    assert session.snapshot()['inverted'] is False


def test_no_inversion_below_level_three(open_session):
    session = open_session(2)
    session.level.obstacle_field.add_obstacle(400, 300, 10, 0, 0)
    session.tick(16)
    assert session.deaths == 1
    assert session.snapshot()['inverted'] is False
    assert session.effects.inversion.expires_at is None


def test_fifty_deaths_end_the_game_once(open_session):
    session = open_session(1)
    session.deaths = 49
    session.timer.seconds = 7
    session.level.obstacle_field.add_obstacle(50, 50, 10, 0, 0)
    session.level.obstacle_field.add_obstacle(400, 300, 10, 0, 0)

    events = session.tick(16)

    assert [e['event'] for e in events] == ['death', 'game_over']
    assert events[1]['deaths'] == 50
    assert session.state_manager.is_state(GameState.INACTIVE)
    assert session.game_over
    assert not session.timer.running
    assert session.state_manager.previous_state == GameState.ACTIVE
    assert session.state_manager.state_data == {'reason': 'game_over', 'deaths': 50}

    # Respawn point is covered by an obstacle, but nothing runs any more
    for _ in range(10):
        assert session.tick(16) == []
    assert session.deaths == 50


def test_obstacles_keep_moving_while_active(open_session):
    session = open_session(1)
    obstacle = session.level.obstacle_field.add_obstacle(600, 100, 10, 1.0, 0.0)
    session.tick(16)
    assert obstacle.x == pytest.approx(601)


def test_nothing_moves_before_start():
    session = GameSession(800, 600, seed=4)
    session.press('right')
    for _ in range(20):
        assert session.tick(16) == []
    assert (session.player.x, session.player.y) == (10, 10)
    assert session.deaths == 0
