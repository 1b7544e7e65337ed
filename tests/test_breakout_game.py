import pytest

from gamebox.breakout.config import GREEN, RED, YELLOW, GameConfig
from gamebox.breakout.game import BreakoutGame, initial_paddle_position, top_offset
from gamebox.breakout.geometry import Vector
from gamebox.breakout.objects import PADDLE_BOTTOM_OFFSET, initial_ball_position


def make_config(**overrides):
    values = {
        "WINDOW_WIDTH": 800.0,
        "WINDOW_HEIGHT": 800.0,
        "BALL_RADIUS": 10.0,
        "PADDLE_WIDTH": 100.0,
        "PADDLE_HEIGHT": 20.0,
        "PADDLE_MOVE_VELOCITY": 400.0,
        "BRICK_COLUMNS": 8.0,
        "BRICK_HEIGHT": 20.0,
        "SPEED_INCREASE_FACTOR": 1.1,
        "MAX_LIVES": 3.0,
        "LOW_SCORE": 1.0,
        "MEDIUM_SCORE": 3.0,
        "HIGH_SCORE": 5.0,
    }
    values.update(overrides)
    return GameConfig(values=values, rows=[RED, YELLOW, GREEN])


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def game(config):
    return BreakoutGame(config)


def launch(game, position, velocity):
    game.start()
    game.ball.position = position
    game.ball.velocity = velocity


def test_top_offset_is_an_eighth_of_the_height(config):
    assert top_offset(config) == 100


def test_top_offset_truncates():
    assert top_offset(make_config(WINDOW_HEIGHT=801.0)) == top_offset(make_config())


def test_initial_paddle_position_is_centred_above_bottom(config):
    pos = initial_paddle_position(config)
    assert pos.x + config["PADDLE_WIDTH"] / 2 == config["WINDOW_WIDTH"] / 2
    assert pos.y + config["PADDLE_HEIGHT"] + PADDLE_BOTTOM_OFFSET == config["WINDOW_HEIGHT"]


def test_bricks_laid_out_in_configured_rows(game, config):
    assert len(game.bricks) == len(config.rows)
    for row, color in enumerate(config.rows):
        bricks = game.bricks[row]
        assert len(bricks) == int(config["BRICK_COLUMNS"])
        assert {b.color for b in bricks.values()} == {color}


def test_bricks_start_below_top_offset_and_tile_rows(game, config):
    first = game.bricks[0][0]
    assert first.position.y == top_offset(config)
    assert first.position.x == 0
    row = game.bricks[1]
    for col in range(len(row) - 1):
        assert row[col + 1].position.x - row[col].position.x == row[col].width
    assert game.bricks[1][0].position.y - first.position.y == config["BRICK_HEIGHT"]


def test_ball_starts_bound_to_paddle(game, config):
    assert not game.started
    assert game.paddle.bound_ball is game.ball
    assert game.ball.position == initial_ball_position(game.paddle.position, config)


def test_left_input_moves_paddle_and_bound_ball(game, config):
    start_x = game.paddle.position.x
    game.handle_input(0.1, True, False, False)
    assert game.paddle.position.x == pytest.approx(start_x - config["PADDLE_MOVE_VELOCITY"] * 0.1)
    assert game.ball.position == initial_ball_position(game.paddle.position, config)


def test_paddle_stops_at_left_edge(game):
    game.paddle.position = Vector(5.0, game.paddle.position.y)
    game.handle_input(0.1, True, False, False)
    assert game.paddle.position.x == 5.0


def test_paddle_stops_at_right_edge(game, config):
    x = config["WINDOW_WIDTH"] - config["PADDLE_WIDTH"] - 5.0
    game.paddle.position = Vector(x, game.paddle.position.y)
    game.handle_input(0.1, False, True, False)
    assert game.paddle.position.x == x


def test_left_and_right_cancel(game):
    start = game.paddle.position
    game.handle_input(0.1, True, True, False)
    assert game.paddle.position == start


def test_space_launches_ball(game):
    game.handle_input(0.01, False, False, True)
    assert game.started
    assert game.paddle.bound_ball is None
    assert game.ball.velocity == Vector(0.0, 350.0)


def test_space_while_started_does_nothing(game):
    game.handle_input(0.01, False, False, True)
    game.ball.velocity = Vector(5.0, 5.0)
    game.handle_input(0.01, False, False, True)
    assert game.ball.velocity == Vector(5.0, 5.0)


def test_update_before_launch_keeps_ball_still(game):
    before = game.ball.position
    assert game.update(1.0) is False
    assert game.ball.position == before


def test_lost_ball_costs_a_life_and_rebinds(game, config):
    launch(game, Vector(400.0, config["WINDOW_HEIGHT"] - 21.0), Vector(0.0, 350.0))
    game.update(0.05)
    assert game.score.lives == int(config["MAX_LIVES"]) - 1
    assert not game.started
    assert game.paddle.bound_ball is game.ball
    assert game.ball.position == initial_ball_position(game.paddle.position, config)


def test_last_life_lost_ends_game(game, config):
    game.score.lives = 1
    launch(game, Vector(400.0, config["WINDOW_HEIGHT"] - 21.0), Vector(0.0, 350.0))
    assert game.update(0.05) is True
    assert game.is_over()


def test_game_over_without_bricks(game):
    game.bricks.clear()
    assert game.is_over()
    assert game.update(0.01) is True


def test_brick_hit_scores_and_removes_brick(game, config):
    launch(game, Vector(340.0, 163.0), Vector(0.0, -100.0))
    game.update(0.05)
    assert game.score.points == int(config["LOW_SCORE"])
    assert 3 not in game.bricks[2]
    assert len(game.bricks[2]) == int(config["BRICK_COLUMNS"]) - 1
    assert game.ball.velocity.y > 0


def test_paddle_hit_in_centre_sends_ball_straight_up(game):
    launch(game, Vector(390.0, 705.0), Vector(0.0, 200.0))
    game.update(0.05)
    velocity = game.ball.velocity
    assert velocity.y < 0
    assert velocity.x == pytest.approx(0.0, abs=1e-6)
    assert velocity.length() == pytest.approx(200.0)


def test_paddle_hit_right_of_centre_deflects_right(game):
    launch(game, Vector(430.0, 705.0), Vector(0.0, 200.0))
    game.update(0.05)
    velocity = game.ball.velocity
    assert velocity.y < 0
    assert velocity.x > 0
    assert velocity.length() == pytest.approx(200.0)


def test_speed_increases_after_ten_seconds(game, config):
    launch(game, Vector(400.0, 400.0), Vector(1.0, 0.0))
    game.update(5.5)
    assert game.ball.velocity.x == pytest.approx(1.0)
    game.update(5.5)
    assert game.ball.velocity.x == pytest.approx(config["SPEED_INCREASE_FACTOR"])