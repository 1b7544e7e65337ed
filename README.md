# gamebox

gamebox contains three small games:

- **Chess**: a two-player chess game that runs in the terminal.
- **Tetris**: a falling-block game that runs in a pygame window.
- **Breakout**: a paddle-and-bricks game that runs in a pygame window. It comes
  with a short "intro" demo, which is a circle you move with the arrow keys.

## Installation

```
pip install .
```

To install the test dependencies too:

```
pip install ".[test]"
```

## Playing

### Chess

```
gamebox-chess
```

The board is printed with columns `a` to `h` and rows `1` to `8`. Row `1` is
the top line of the printout. Uppercase letters are one player's pieces and
lowercase letters are the other player's. The uppercase side moves first.

Each turn has two steps:

1. Type the square of one of your own pieces, for example `a2`. The squares that
   piece can reach are then shown in `[ ]`, and the selected square is shown in
   `( )`.
2. Type one of the marked squares to move there. If you type the selected square
   again, the piece stays where it is and you can choose a different piece.

If you type something that is not a valid square, you are asked again.

A move that would put your own king in check is refused, unless your king was
already in check before the move. The game ends when a king is captured, and the
winning side is then announced. If the input ends (end of file or Ctrl-C), the
command exits with status 1.

### Tetris

```
gamebox-tetris
```

| Key          | Effect                  |
|--------------|-------------------------|
| Left / Right | move the piece sideways |
| Down         | drop the piece one row  |
| Left Ctrl    | rotate clockwise        |
| Left Alt     | rotate counterclockwise |
| Escape       | quit                    |

A key acts when you release it or when it repeats. Pressing it down does nothing
on its own.

The piece drops one row per timer interval, and the interval starts at one
second. A full row is cleared. Each cleared row raises a counter that starts at
1. A new piece that arrives while this counter is a multiple of ten shortens the
interval by 0.1 s. The interval never goes below 0.05 s.

The game ends when every row holds at least one block, when you press Escape, or
when you close the window.

### Breakout

```
gamebox-breakout [CONFIG]
```

Move the paddle with Left and Right. Press Space to launch the ball. Every ten
seconds of play, the ball's speed is multiplied by `SPEED_INCREASE_FACTOR`. If
the ball reaches the bottom of the window, you lose a life and the ball goes
back onto the paddle.

The game ends when every brick is gone or no lives are left. The total score is
then printed.

Settings are read from `CONFIG`. If you give no path, the game reads
`resources/gameconfig.cfg` relative to the current directory. If the file cannot
be read, or a setting is missing or malformed, the command prints an error and
exits with status 1.

Each line of the settings file has the form `NAME = value`. A line that starts
with `--` is a comment, and spaces are ignored. Every one of these settings is
required:

```
-- window
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 800
-- ball and paddle
BALL_RADIUS = 10
PADDLE_WIDTH = 120
PADDLE_HEIGHT = 15
PADDLE_MOVE_VELOCITY = 400
SPEED_INCREASE_FACTOR = 1.1
-- bricks
BRICK_COLUMNS = 10
BRICK_HEIGHT = 25
BRICK_ROWS = RED;RED;YELLOW;YELLOW;GREEN;GREEN;
-- scoring
LOW_SCORE = 1
MEDIUM_SCORE = 3
HIGH_SCORE = 5
MAX_LIVES = 3
```

`BRICK_ROWS` lists one colour per row, from the top row down. Each colour must
be followed by `;`, and text after the last `;` is ignored. Only `RED`, `YELLOW`
and `GREEN` are allowed. They score `HIGH_SCORE`, `MEDIUM_SCORE` and `LOW_SCORE`
points respectively.

### Intro

```
gamebox-intro
```

This opens a resizable window with a green circle that you move with the arrow
keys. Only one arrow key counts at a time, checked in the order up, down, left,
right. The view keeps the world from being stretched when the window is resized.

## Using the game logic from Python

The rules of each game can be used without a window:

- `gamebox.chess.board.Chessboard` holds a game of chess that you can drive one
  step at a time. It has `select_pos`, `move_to_pos`, `switch_turns`,
  `check_win_condition` and `winner`. `render()` returns the board as text.
  `gamebox.chess.board.parse_coordinate` turns text such as `"a2"` into a
  `BoardCoordinate`.
- `gamebox.tetris.tetromino.new_tetromino` and `random_tetromino` build pieces.
  A piece is moved with `Tetromino.move` and turned with `Tetromino.rotate`.
  `gamebox.tetris.board.Board` checks positions, settles pieces with `place` and
  clears full rows. `gamebox.tetris.game.TetrisGame` ties these together with a
  `Timer` and no window.
- `gamebox.breakout.config.parse_config` turns settings text into a
  `GameConfig`, and `load_config` reads it from a file. A
  `gamebox.breakout.game.BreakoutGame` built from that config advances with
  `handle_input` and `update`, and `is_over` reports when the game has ended.

## Limitations

- Chess does not detect checkmate or stalemate, and a game ends only when a king
  is captured. There is no castling, en passant or pawn promotion. There is no
  computer opponent.
- Tetris keeps no score and shows no preview of the next piece.
- No game saves high scores or game state.