"""Points and remaining lives."""

from __future__ import annotations

from dataclasses import dataclass

from gamebox.breakout.config import GREEN, RED, YELLOW, Color, GameConfig

SCORE_SIDE_PADDING = 5.0

LOW_COLOR: Color = GREEN
MEDIUM_COLOR: Color = YELLOW
HIGH_COLOR: Color = RED

_SCORE_KEYS = {
    LOW_COLOR: "LOW_SCORE",
    MEDIUM_COLOR: "MEDIUM_SCORE",
    HIGH_COLOR: "HIGH_SCORE",
}


@dataclass
class Score:
    """The player's points and the lives left."""

    lives: int
    points: int = 0

    def add(self, points: int) -> None:
        self.points += points

    def remove_life(self) -> None:
        self.lives -= 1

    def no_lives_left(self) -> bool:
        return self.lives == 0

    def score_text(self) -> str:
        return f"Score: {self.points}"

    def lives_text(self) -> str:
        return "Lives: " + "*" * self.lives


def score_for_color(color: Color, config: GameConfig) -> int:
    """Points for a brick of ``color``; colors without a score raise KeyError."""
    return int(config[_SCORE_KEYS[color]])