"""Chess pieces and the squares they can reach."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Iterator, Optional, Sequence

from gamebox.chess.coordinate import BoardCoordinate


class Color(Enum):
    """The two sides, named after how their pieces are printed."""

    UPPERCASE = "UPPERCASE"
    LOWERCASE = "LOWERCASE"


Grid = Sequence[Sequence[Optional["Chessman"]]]
"""A board indexed as ``board[y][x]``; empty squares hold None."""


def _square(board: Grid, coord: BoardCoordinate) -> Optional["Chessman"]:
    return board[coord.y][coord.x]


class Chessman(ABC):
    """A piece on the board with a position and a color."""

    letter: ClassVar[str] = "?"
    essential: ClassVar[bool] = False

    def __init__(self, position: BoardCoordinate, color: Color) -> None:
        self.position = position
        self.color = color

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.position!r}, {self.color.name})"

    @property
    def symbol(self) -> str:
        """The printed letter: upper case for the UPPERCASE side."""
        if self.color is Color.UPPERCASE:
            return self.letter.upper()
        return self.letter

    def update_position(self, new_pos: BoardCoordinate) -> None:
        self.position = new_pos

    @abstractmethod
    def relative_moves(self, board: Grid) -> list[BoardCoordinate]:
        """Offsets from the current position that the piece may move by."""

    def can_move_to_position(self, dest: BoardCoordinate, board: Grid) -> bool:
        return any(self.position + rel == dest for rel in self.relative_moves(board))

    def possible_positions(self, board: Grid) -> list[BoardCoordinate]:
        """Absolute squares the piece may move to."""
        return [self.position + rel for rel in self.relative_moves(board)]

    def _is_enemy(self, piece: Optional[Chessman]) -> bool:
        return piece is not None and piece.color is not self.color

    def _free_or_enemy(self, board: Grid, dest: BoardCoordinate) -> bool:
        if not dest.is_in_board():
            return False
        piece = _square(board, dest)
        return piece is None or piece.color is not self.color

    def _ray(self, board: Grid, step: BoardCoordinate) -> Iterator[BoardCoordinate]:
        """Offsets along ``step`` up to the first piece, including it if it is an enemy."""
        rel = step
        while (self.position + rel).is_in_board() and _square(board, self.position + rel) is None:
            yield rel
            rel = rel + step
        target = self.position + rel
        if target.is_in_board() and self._is_enemy(_square(board, target)):
            yield rel


_STRAIGHT = tuple(BoardCoordinate(dx, dy) for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)))
_DIAGONAL = tuple(BoardCoordinate(dx, dy) for dx, dy in ((1, 1), (-1, 1), (1, -1), (-1, -1)))


class Bishop(Chessman):
    letter = "b"

    def relative_moves(self, board: Grid) -> list[BoardCoordinate]:
        return [rel for step in _DIAGONAL for rel in self._ray(board, step)]


class Rook(Chessman):
    letter = "r"

    def relative_moves(self, board: Grid) -> list[BoardCoordinate]:
        return [rel for step in _STRAIGHT for rel in self._ray(board, step)]


class Queen(Chessman):
    letter = "q"

    def relative_moves(self, board: Grid) -> list[BoardCoordinate]:
        return [rel for step in _STRAIGHT + _DIAGONAL for rel in self._ray(board, step)]


class King(Chessman):
    letter = "k"
    essential = True

    def relative_moves(self, board: Grid) -> list[BoardCoordinate]:
        return [
            BoardCoordinate(col, row)
            for row in (-1, 0, 1)
            for col in (-1, 0, 1)
            if self._free_or_enemy(board, self.position + BoardCoordinate(col, row))
        ]


class Knight(Chessman):
    letter = "n"

    _JUMPS: ClassVar[tuple[BoardCoordinate, ...]] = tuple(
        BoardCoordinate(dx, dy)
        for base_x, base_y in ((2, 1), (-2, 1), (2, -1), (-2, -1))
        for dx, dy in ((base_x, base_y), (base_y, base_x))
    )

    def relative_moves(self, board: Grid) -> list[BoardCoordinate]:
        return [rel for rel in self._JUMPS if self._free_or_enemy(board, self.position + rel)]


class Pawn(Chessman):
    letter = "p"

    def __init__(self, position: BoardCoordinate, color: Color) -> None:
        super().__init__(position, color)
        self.first_move = True

    def update_position(self, new_pos: BoardCoordinate) -> None:
        super().update_position(new_pos)
        self.first_move = False

    def relative_moves(self, board: Grid) -> list[BoardCoordinate]:
        dy = 1 if self.color is Color.UPPERCASE else -1
        forward = self.position + BoardCoordinate(0, dy)
        if not forward.is_in_board():
            return []

        moves = []
        if _square(board, forward) is None:
            moves.append(BoardCoordinate(0, dy))
            if self.first_move:
                moves.append(BoardCoordinate(0, 2 * dy))

        for dx in (-1, 1):
            target = forward + BoardCoordinate(dx, 0)
            if target.is_in_board() and self._is_enemy(_square(board, target)):
                moves.append(BoardCoordinate(dx, dy))
        return moves