"""The falling-block game: piece control, speed-up and the main loop."""

from __future__ import annotations

import logging
import random
import sys
from typing import Optional

from gamebox.tetris.board import Board
from gamebox.tetris.primitives import N_COLS, N_ROWS, Action, Key, string_from_duration, string_from_key
from gamebox.tetris.tetromino import Block, Direction, Tetromino, random_tetromino
from gamebox.tetris.timer import Timer

log = logging.getLogger(__name__)

SPEED_STEP = 0.1
ROWS_PER_SPEEDUP = 10
DEBUG = False


class TetrisGame:
    """Game state: the settled board, the falling piece and the drop timer."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng
        self.debug = DEBUG
        self.board = Board()
        self.current: Optional[Tetromino] = None
        self.game_over = False
        self.collision = True
        self.pause_timer = False
        self.timer = Timer(self.on_timer)
        self.spawn_if_needed()

    def update_speed(self) -> None:
        """Shorten the drop interval whenever the cleared-row counter hits a multiple of ten."""
        if self.board.speed_count % ROWS_PER_SPEEDUP == 0:
            self.timer.interval = self.timer.interval - SPEED_STEP

    def spawn_if_needed(self) -> bool:
        """Settle the landed piece and bring in a new one; True if that happened."""
        if not self.collision:
            return False
        if self.current is not None:
            self.board.place(self.current)
        self.current = random_tetromino(self.rng)
        self.collision = False
        self.update_speed()
        return True

    def _handle_key(self, key: Key, action: Action) -> None:
        if self.current is None:
            return
        log.debug("Handle Key Event %s", string_from_key(key, action))
        if action is Action.PRESS:
            return

        valid = self.board.is_valid_position
        if key is Key.LEFT:
            self.current.move(-1, 0, valid)
        elif key is Key.RIGHT:
            self.current.move(1, 0, valid)
        elif key is Key.DOWN:
            self.collision = not self.current.move(0, -1, valid)
        elif key is Key.UP:
            self.current.move(0, 1, valid)
        elif key is Key.ESC:
            self.game_over = True
        elif key is Key.CONTROL:
            self.current.rotate(Direction.CLOCKWISE, valid)
        elif key is Key.ALT:
            self.current.rotate(Direction.COUNTERCLOCKWISE, valid)
        elif key is Key.SPACE and self.debug:
            self.pause_timer = not self.pause_timer

    def on_key(self, key: Key, action: Action) -> None:
        """React to a key; presses are ignored, releases and repeats act. UP is ignored."""
        if key is Key.UP:
            return
        self._handle_key(key, action)

    def on_timer(self, elapsed: float) -> None:
        """Drop the falling piece by one row unless the timer is paused."""
        if self.pause_timer:
            return
        log.debug("Handle Time %s", string_from_duration(elapsed))
        self._handle_key(Key.DOWN, Action.RELEASE)

    def paint(self) -> list[Block]:
        """The blocks to draw; once no row is free the game is over and nothing is drawn."""
        if not self.board.has_free_row():
            self.game_over = True
            return []
        self.game_over = False
        return self.board.visible_blocks(self.current)


def main(argv: Optional[list[str]] = None) -> int:
    """Open a window and play until the board fills up or the window closes."""
    from gamebox.tetris.window import Renderer

    game = TetrisGame()
    renderer = Renderer(N_ROWS, N_COLS, game.on_key)
    game.timer.reset()

    while True:
        game.timer.drive()
        renderer.begin_frame()
        game.spawn_if_needed()
        for block in game.paint():
            renderer.render_block(block.position, block.color)
        renderer.end_frame()
        if not renderer.is_open():
            game.game_over = True
        if game.game_over:
            break

    game.current = None
    game.board.clear()
    renderer.close()
    sys.stdout.write("game over\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())