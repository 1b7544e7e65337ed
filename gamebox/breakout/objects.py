"""The ball, the paddle and the bricks, with their movement and collisions."""

from __future__ import annotations

import math
from typing import Optional

from gamebox.breakout.config import Color, GameConfig
from gamebox.breakout.geometry import Rect, Vector
from gamebox.breakout.score import score_for_color

BALL_PADDLE_OFFSET = 75.0
MAX_BALL_ROTATION = 45.0
UPWARDS_ANGLE = -90.0
PADDLE_BOTTOM_OFFSET = 50.0
OUTLINE_WIDTH = 2.5

_MAX_BOUNCES = 8


def _round(value: float) -> int:
    """Round halves away from zero, for the non-negative sizes used here."""
    return math.floor(value + 0.5)


def initial_ball_position(paddle_position: Vector, config: GameConfig) -> Vector:
    """Where the ball rests above a paddle at ``paddle_position``, centred on it."""
    return Vector(
        paddle_position.x + config["PADDLE_WIDTH"] / 2 - config["BALL_RADIUS"],
        paddle_position.y - BALL_PADDLE_OFFSET,
    )


class Brick:
    """A brick; its bounds include the outline drawn around it."""

    def __init__(self, position: Vector, width: float, color: Color, config: GameConfig) -> None:
        self.position = position
        self.width = width
        self.height = config["BRICK_HEIGHT"]
        self.color = color

    @property
    def bounds(self) -> Rect:
        return Rect(
            self.position.x - OUTLINE_WIDTH,
            self.position.y - OUTLINE_WIDTH,
            self.width + 2 * OUTLINE_WIDTH,
            self.height + 2 * OUTLINE_WIDTH,
        )

    def score(self, config: GameConfig) -> int:
        """Points awarded for breaking this brick."""
        return score_for_color(self.color, config)


class Ball:
    """The ball; ``position`` is the top-left corner of its bounding square."""

    def __init__(self, position: Vector, config: GameConfig) -> None:
        self.position = position
        self.radius = config["BALL_RADIUS"]
        self.velocity = Vector(0.0, 0.0)

    @property
    def diameter(self) -> float:
        return self.radius * 2

    @property
    def bounds(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.diameter, self.diameter)

    def move(self, dt: float, window_size: Vector) -> None:
        """Advance by ``dt`` seconds, bouncing off the window's sides and top.

        Touching the bottom edge stops the ball: its velocity becomes zero.
        """
        window = Rect(0.0, 0.0, window_size.x, window_size.y)
        for _ in range(_MAX_BOUNCES):
            step = self.velocity * dt
            self.position = self.position + step
            if self.collides_with(window, True):
                return

            overlap = window.intersection(self.bounds)
            if (
                overlap is not None
                and self.position.y >= window.height - self.diameter
                and _round(overlap.height) < self.diameter
            ):
                self.velocity = Vector(0.0, 0.0)
                return

            self.adjust_direction(overlap, True)
            self.position = self.position - step

    def collides_with(self, box: Rect, inverted: bool) -> bool:
        """Overlap with ``box``; when ``inverted``, whether the ball lies wholly inside it."""
        overlap = box.intersection(self.bounds)
        if overlap is None:
            return False
        if inverted:
            return _round(overlap.width) == self.diameter and _round(overlap.height) == self.diameter
        return _round(overlap.width) > 0 or _round(overlap.height) > 0

    def adjust_direction(self, intersection: Optional[Rect], inverted: bool) -> None:
        """Reflect the velocity according to the overlap with what was hit.

        Without an overlap the ball turns back. A horizontal hit flips the x
        component, a vertical one the y component; when both apply, only y is
        flipped, and when neither does the ball stops.
        """
        if intersection is None:
            self.velocity = -self.velocity
            return
        new_velocity = Vector(0.0, 0.0)
        if self._hits(intersection.width, inverted):
            new_velocity = self.velocity.scaled(-1, 1)
        if self._hits(intersection.height, inverted):
            new_velocity = self.velocity.scaled(1, -1)
        self.velocity = new_velocity

    def _hits(self, size: float, inverted: bool) -> bool:
        if inverted:
            return _round(size) < self.diameter
        return _round(size) > 0


class Paddle:
    """The player's paddle; a bound ball rides along on top of it."""

    def __init__(self, position: Vector, config: GameConfig) -> None:
        self.position = position
        self.config = config
        self.width = config["PADDLE_WIDTH"]
        self.height = config["PADDLE_HEIGHT"]
        self.bound_ball: Optional[Ball] = None

    @property
    def size(self) -> Vector:
        return Vector(self.width, self.height)

    @property
    def bounds(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.width, self.height)

    def bind_ball(self, ball: Ball) -> None:
        self.bound_ball = ball

    def unbind_ball(self) -> None:
        self.bound_ball = None

    def move(self, offset: Vector) -> None:
        """Shift the paddle, carrying a bound ball with it."""
        self.position = self.position + offset
        if self.bound_ball is not None:
            self.bound_ball.position = initial_ball_position(self.position, self.config)