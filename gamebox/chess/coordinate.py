"""Squares on the chess board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

COL_WIDTH = 8
ROW_HEIGHT = 8


@dataclass(frozen=True)
class BoardCoordinate:
    """A square on the board: ``x`` is the column, ``y`` the row, both from zero."""

    x: int
    y: int

    def __add__(self, other: object) -> BoardCoordinate:
        if not isinstance(other, BoardCoordinate):
            return NotImplemented
        return BoardCoordinate(self.x + other.x, self.y + other.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def is_in_board(self) -> bool:
        """Return True if the square lies on the 8x8 board."""
        return 0 <= self.x < COL_WIDTH and 0 <= self.y < ROW_HEIGHT