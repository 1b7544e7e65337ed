"""The paddle-and-bricks game: rules, state and the window loop."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from gamebox.breakout.config import (
    CYAN,
    DEFAULT_CONFIG_PATH,
    WHITE,
    ConfigError,
    GameConfig,
    load_config,
)
from gamebox.breakout.geometry import Rect, Vector
from gamebox.breakout.objects import (
    MAX_BALL_ROTATION,
    OUTLINE_WIDTH,
    PADDLE_BOTTOM_OFFSET,
    UPWARDS_ANGLE,
    Ball,
    Brick,
    Paddle,
    initial_ball_position,
)
from gamebox.breakout.score import SCORE_SIDE_PADDING, Score

WINDOW_TITLE = "Breakout"
TOP_OFFSET_DIVISOR = 8
LAUNCH_VELOCITY = Vector(0.0, 350.0)
SPEEDUP_PERIOD = 10.0
BRICK_HIT_PUSH = 4.0

BrickMap = dict[int, dict[int, Brick]]


def top_offset(config: GameConfig) -> int:
    """Pixels left free above the bricks for the score line."""
    return int(config["WINDOW_HEIGHT"] / TOP_OFFSET_DIVISOR)


def _window_size(config: GameConfig) -> Vector:
    return Vector(config["WINDOW_WIDTH"], config["WINDOW_HEIGHT"])


def initial_paddle_position(config: GameConfig) -> Vector:
    """The paddle's start: centred horizontally, a fixed distance above the bottom."""
    window = _window_size(config)
    return Vector(
        window.x / 2 - config["PADDLE_WIDTH"] / 2,
        window.y - config["PADDLE_HEIGHT"] - PADDLE_BOTTOM_OFFSET,
    )


class BreakoutGame:
    """The state of one game: paddle, ball, bricks and score.

    Until the player launches the ball it rests on the paddle and moves with it.
    """

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self.score = Score(lives=int(config["MAX_LIVES"]))
        self.paddle = Paddle(initial_paddle_position(config), config)
        self.ball = Ball(initial_ball_position(self.paddle.position, config), config)
        self.paddle.bind_ball(self.ball)
        self.started = False
        self.column_width = 0
        self.bricks: BrickMap = {}
        self._speedup_timer = 0.0
        self._init_bricks()

    def _init_bricks(self) -> None:
        columns = int(self.config["BRICK_COLUMNS"])
        self.column_width = int(self.config["WINDOW_WIDTH"]) // columns
        height = float(top_offset(self.config))
        for row, color in enumerate(self.config.rows):
            self.bricks[row] = {
                col: Brick(
                    Vector(float(col * self.column_width), height),
                    float(self.column_width),
                    color,
                    self.config,
                )
                for col in range(columns)
            }
            height += self.config["BRICK_HEIGHT"]

    def start(self) -> None:
        """Launch the ball from the paddle."""
        self.started = True
        self.paddle.unbind_ball()
        self.ball.velocity = LAUNCH_VELOCITY

    def handle_input(self, dt: float, left: bool, right: bool, space: bool) -> None:
        """Move the paddle for held arrow keys; space launches the ball."""
        speed = self.config["PADDLE_MOVE_VELOCITY"]
        vx = 0.0
        if left:
            vx -= speed
        if right:
            vx += speed
        if space and not self.started:
            self.start()

        offset = Vector(vx, 0.0) * dt
        new_x = self.paddle.position.x + offset.x
        if new_x > 0 and new_x + self.config["PADDLE_WIDTH"] < self.config["WINDOW_WIDTH"]:
            self.paddle.move(offset)

    def update(self, dt: float) -> bool:
        """Advance the game by ``dt`` seconds; returns True once the game is over."""
        if self.started:
            self._speedup_timer += dt
            self._handle_ball_movement(dt)
            if self._speedup_timer > SPEEDUP_PERIOD:
                self._speedup_timer = 0.0
                factor = self.config["SPEED_INCREASE_FACTOR"]
                self.ball.velocity = self.ball.velocity.scaled(factor, factor)

        if self.is_over():
            self.started = False
            return True
        return False

    def is_over(self) -> bool:
        """True when every brick is gone or no life is left."""
        return not self.bricks or self.score.no_lives_left()

    def _handle_ball_movement(self, dt: float) -> None:
        self.ball.move(dt, _window_size(self.config))

        if self.ball.velocity == Vector(0.0, 0.0):
            self.paddle.bind_ball(self.ball)
            self.ball.position = initial_ball_position(self.paddle.position, self.config)
            self.score.remove_life()
            self.started = False
            return

        self._check_paddle_collision(dt)
        self._check_brick_collision(dt)

    def _check_paddle_collision(self, dt: float) -> None:
        ball, paddle = self.ball, self.paddle
        if not ball.collides_with(paddle.bounds, False):
            return

        ball.position = ball.position - ball.velocity * dt
        ball.adjust_direction(paddle.bounds.intersection(ball.bounds), False)

        velocity = ball.velocity
        if velocity == Vector(0.0, 0.0):
            return
        half_width = paddle.width / 2
        ball_center = ball.position.x + ball.radius
        paddle_center = paddle.position.x + half_width
        hit_offset = (ball_center - paddle_center) / half_width

        velocity = velocity.rotated_by(UPWARDS_ANGLE - velocity.angle_degrees())
        ball.velocity = velocity.rotated_by(MAX_BALL_ROTATION * hit_offset)

    def _check_brick_collision(self, dt: float) -> None:
        if not self.bricks:
            return
        ball = self.ball
        position = ball.position
        rows = max(self.bricks) + 1
        brick_height = int(self.config["BRICK_HEIGHT"])
        offset = top_offset(self.config)

        if position.y > float(offset + brick_height * rows):
            return

        pos_col = int(position.x / self.column_width) + 1
        pos_row = min(int((position.y - offset) / brick_height), len(self.bricks))

        for row in range(pos_row - 1, pos_row + 2):
            row_bricks = self.bricks.get(row)
            if row_bricks is None:
                continue
            for col in range(pos_col - 1, pos_col + 2):
                brick = row_bricks.get(col)
                if brick is None or not ball.collides_with(brick.bounds, False):
                    continue

                ball.adjust_direction(brick.bounds.intersection(ball.bounds), False)
                self.score.add(brick.score(self.config))
                del row_bricks[col]
                if not row_bricks:
                    del self.bricks[row]
                ball.position = ball.position + ball.velocity * dt * BRICK_HIT_PUSH
                return


def _draw(pygame, surface, font, game: BreakoutGame) -> None:
    def to_rect(rect: Rect):
        return pygame.Rect(round(rect.left), round(rect.top), round(rect.width), round(rect.height))

    surface.fill((0, 0, 0))
    pygame.draw.rect(surface, CYAN, to_rect(game.paddle.bounds))

    ball = game.ball
    center = (ball.position.x + ball.radius, ball.position.y + ball.radius)
    pygame.draw.circle(surface, WHITE, center, ball.radius)

    for row in game.bricks.values():
        for brick in row.values():
            pygame.draw.rect(surface, WHITE, to_rect(brick.bounds))
            inner = Rect(brick.position.x, brick.position.y, brick.width, brick.height)
            pygame.draw.rect(surface, brick.color, to_rect(inner))

    score_image = font.render(game.score.score_text(), True, WHITE)
    surface.blit(score_image, (SCORE_SIDE_PADDING, 0))
    lives_image = font.render(game.score.lives_text(), True, WHITE)
    lives_x = game.config["WINDOW_WIDTH"] - lives_image.get_width() - SCORE_SIDE_PADDING
    surface.blit(lives_image, (lives_x, 0))


def main(argv: Optional[list[str]] = None) -> int:
    """Open a window and play until the bricks are gone, the lives run out or it closes."""
    parser = argparse.ArgumentParser(prog="breakout", description="Break all the bricks.")
    parser.add_argument(
        "config", nargs="?", default=str(DEFAULT_CONFIG_PATH), help="settings file to read"
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        game = BreakoutGame(config)
    except (ConfigError, KeyError) as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    import pygame

    pygame.init()
    try:
        size = _window_size(config)
        surface = pygame.display.set_mode((int(size.x), int(size.y)))
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, 32)
        clock = pygame.time.Clock()

        while True:
            dt = clock.tick(240) / 1000.0
            keys = pygame.key.get_pressed()
            game.handle_input(dt, keys[pygame.K_LEFT], keys[pygame.K_RIGHT], keys[pygame.K_SPACE])

            if game.update(dt):
                sys.stdout.write("Game Over!\n")
                sys.stdout.write(f"Total Score: {game.score.points}\n")
                return 0

            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                return 0

            _draw(pygame, surface, font, game)
            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())