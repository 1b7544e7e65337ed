"""Tetrominoes: their shapes, colors, movement and rotation."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Callable, Optional

from gamebox.tetris.primitives import N_COLS, N_ROWS, Position

_DROP_X = N_COLS // 2
_DROP_Y = N_ROWS - 1
_BRICKS = 4

PositionCheck = Callable[[Position], bool]


class BlockColor(IntEnum):
    """Block colors as packed 0xBBGGRR values."""

    BLACK = 0x000000
    RED = 0x0000FF
    GREEN = 0x00FF00
    BLUE = 0xFF0000
    YELLOW = 0x00FFFF
    MAGENTA = 0xFF00FF
    CYAN = 0xFFFF00
    WHITE = 0xFFFFFF


_PALETTE = tuple(c for c in BlockColor if c is not BlockColor.BLACK)


class Direction(Enum):
    CLOCKWISE = 0
    COUNTERCLOCKWISE = 1


class Figure(Enum):
    I = "I"  # noqa: E741
    O = "O"  # noqa: E741
    L = "L"
    J = "J"
    T = "T"
    S = "S"
    Z = "Z"


def _normalize(color: int, channel: BlockColor) -> float:
    return (int(color) & channel) / channel


def normalize_red(color: int) -> float:
    """The red share of ``color`` between 0 and 1."""
    return _normalize(color, BlockColor.RED)


def normalize_green(color: int) -> float:
    """The green share of ``color`` between 0 and 1."""
    return _normalize(color, BlockColor.GREEN)


def normalize_blue(color: int) -> float:
    """The blue share of ``color`` between 0 and 1."""
    return _normalize(color, BlockColor.BLUE)


def string_from_color(color: int) -> str:
    """The lower-case name of a color, or ``"unknown"``."""
    try:
        return BlockColor(color).name.lower()
    except ValueError:
        return "unknown"


def random_color(rng: Optional[random.Random] = None) -> BlockColor:
    """Any color except black."""
    return (rng or random).choice(_PALETTE)


@dataclass(frozen=True)
class Block:
    color: BlockColor
    position: Position


@dataclass
class Tetromino:
    """A falling piece; ``center`` indexes the block it rotates around, -1 for none."""

    blocks: list[Block]
    center: int

    def move(self, dx: int, dy: int, is_valid: PositionCheck) -> bool:
        """Shift every block; nothing changes unless all new positions are valid."""
        moved = [replace(b, position=b.position.moved(dx, dy)) for b in self.blocks]
        if not all(is_valid(b.position) for b in moved):
            return False
        self.blocks = moved
        return True

    def rotate(self, direction: Direction, is_valid: PositionCheck) -> bool:
        """Turn the piece a quarter around its center block if the result fits."""
        if not 0 <= self.center < len(self.blocks):
            return False

        pivot = self.blocks[self.center].position
        rotated = []
        valid = True
        for index, block in enumerate(self.blocks):
            if index == self.center:
                rotated.append(block)
                continue
            x_radius = block.position.x - pivot.x
            y_radius = block.position.y - pivot.y
            if direction is Direction.CLOCKWISE:
                y_radius = -y_radius
            else:
                x_radius = -x_radius
            position = Position(pivot.x + y_radius, pivot.y + x_radius)
            valid = is_valid(position) and valid
            rotated.append(replace(block, position=position))

        if valid:
            self.blocks = rotated
        return valid


def _fill_i(i: int) -> Position:
    return Position(_DROP_X, _DROP_Y - i)


def _fill_o(i: int) -> Position:
    return Position(_DROP_X + i % 2, _DROP_Y - i // 2)


def _fill_l(i: int) -> Position:
    return Position(_DROP_X + i % 3 - 1, _DROP_Y - i // 3)


def _fill_j(i: int) -> Position:
    return Position(_DROP_X - i % 3 + 1, _DROP_Y - i // 3)


def _fill_t(i: int) -> Position:
    x = _DROP_X + i % 3 - 1 if i < _BRICKS - 1 else _DROP_X
    return Position(x, _DROP_Y - i // 3)


def _fill_s(i: int) -> Position:
    x = _DROP_X + i % 2 if i < _BRICKS - 1 else _DROP_X - 1
    return Position(x, _DROP_Y - i // 2)


def _fill_z(i: int) -> Position:
    x = _DROP_X + i % 2 if i < _BRICKS - 2 else _DROP_X + 1 + i % 2
    return Position(x, _DROP_Y - i // 2)


_SHAPES: dict[Figure, tuple[Callable[[int], Position], int]] = {
    Figure.I: (_fill_i, 1),
    Figure.O: (_fill_o, -1),
    Figure.L: (_fill_l, 1),
    Figure.J: (_fill_j, 1),
    Figure.T: (_fill_t, 1),
    Figure.S: (_fill_s, 0),
    Figure.Z: (_fill_z, 1),
}


def new_tetromino(figure: Figure, rng: Optional[random.Random] = None) -> Tetromino:
    """A new piece of the given shape at the top of the board, in one random color."""
    fill, center = _SHAPES[figure]
    color = random_color(rng)
    return Tetromino([Block(color, fill(i)) for i in range(_BRICKS)], center)


def random_tetromino(rng: Optional[random.Random] = None) -> Tetromino:
    """A new piece of a random shape."""
    return new_tetromino((rng or random).choice(list(Figure)), rng)