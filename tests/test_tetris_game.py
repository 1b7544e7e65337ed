import random

import pytest

from gamebox.tetris.game import TetrisGame
from gamebox.tetris.primitives import N_ROWS, Action, Key, Position
from gamebox.tetris.tetromino import Block, BlockColor, Figure, new_tetromino


@pytest.fixture
def game():
    return TetrisGame(random.Random(0))


def positions(game):
    return [b.position for b in game.current.blocks]


def test_starts_with_a_piece(game):
    assert len(game.current.blocks) == 4
    assert game.collision is False
    assert len(game.board) == 0
    assert game.game_over is False


def test_press_is_ignored(game):
    before = positions(game)
    game.on_key(Key.LEFT, Action.PRESS)
    assert positions(game) == before


def test_release_moves_left_and_right(game):
    before = positions(game)
    game.on_key(Key.LEFT, Action.RELEASE)
    assert positions(game) == [p.moved(-1, 0) for p in before]
    game.on_key(Key.RIGHT, Action.REPEAT)
    assert positions(game) == before


def test_up_key_is_ignored(game):
    before = positions(game)
    game.on_key(Key.DOWN, Action.RELEASE)
    game.on_key(Key.UP, Action.RELEASE)
    assert positions(game) == [p.moved(0, -1) for p in before]


def test_escape_ends_game(game):
    game.on_key(Key.ESC, Action.RELEASE)
    assert game.game_over is True


def test_timer_drops_piece(game):
    before = positions(game)
    game.on_timer(1.0)
    assert positions(game) == [p.moved(0, -1) for p in before]


def test_paused_timer_does_nothing(game):
    before = positions(game)
    game.pause_timer = True
    game.on_timer(1.0)
    assert positions(game) == before


def test_space_toggles_pause_only_in_debug(game):
    game.on_key(Key.SPACE, Action.RELEASE)
    assert game.pause_timer is False
    game.debug = True
    game.on_key(Key.SPACE, Action.RELEASE)
    assert game.pause_timer is True


def test_landing_places_piece_and_spawns(game):
    for _ in range(N_ROWS + 1):
        game.on_timer(1.0)
    assert game.collision is True
    landed = positions(game)
    assert min(p.y for p in landed) == 0
    assert game.spawn_if_needed() is True
    assert sorted((p.x, p.y) for p in (b.position for b in game.board)) == sorted(
        (p.x, p.y) for p in landed
    )
    assert game.collision is False


def test_spawn_without_collision_does_nothing(game):
    current = game.current
    assert game.spawn_if_needed() is False
    assert game.current is current


def test_rotation_round_trip(game):
    game.current = new_tetromino(Figure.I, random.Random(1))
    before = positions(game)
    center = before[game.current.center]
    game.on_key(Key.CONTROL, Action.RELEASE)
    after = positions(game)
    assert after != before
    assert {p.y for p in after} == {center.y}
    assert after[game.current.center] == center
    game.on_key(Key.ALT, Action.RELEASE)
    assert positions(game) == before


def test_update_speed_on_multiple_of_ten(game):
    before = game.timer.interval
    game.board.speed_count = 11
    game.update_speed()
    assert game.timer.interval == before
    game.board.speed_count = 10
    game.update_speed()
    assert game.timer.interval < before


def test_paint_lists_falling_piece_first(game):
    game.board.blocks.append(Block(BlockColor.RED, Position(0, 0)))
    blocks = game.paint()
    assert blocks[:4] == game.current.blocks
    assert blocks[4:] == game.board.blocks
    assert game.game_over is False


def test_paint_full_board_ends_game(game):
    game.board.blocks = [Block(BlockColor.RED, Position(0, y)) for y in range(N_ROWS)]
    assert game.paint() == []
    assert game.game_over is True