"""The well that fallen blocks settle in."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator, Optional

from gamebox.tetris.primitives import N_COLS, N_ROWS, Position
from gamebox.tetris.tetromino import Block, Tetromino


class Board:
    """Settled blocks on an N_COLS x N_ROWS grid.

    ``speed_count`` starts at 1 and grows by one for every cleared row.
    """

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self.speed_count = 1

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def _is_occupied(self, position: Position) -> bool:
        return any(block.position == position for block in self.blocks)

    def is_valid_position(self, position: Position) -> bool:
        """True if ``position`` is on the board and not taken by a settled block."""
        if self._is_occupied(position):
            return False
        return 0 <= position.x < N_COLS and 0 <= position.y < N_ROWS

    def place(self, tetromino: Tetromino) -> int:
        """Settle a piece's blocks and clear full rows; returns how many were cleared."""
        self.blocks.extend(tetromino.blocks)
        cleared = 0
        row = 0
        while row < N_ROWS:
            if sum(1 for b in self.blocks if b.position.y == row) == N_COLS:
                self._remove_row(row)
                cleared += 1
            else:
                row += 1
        return cleared

    def _remove_row(self, row: int) -> None:
        self.speed_count += 1
        self.blocks = [
            block if block.position.y < row else replace(block, position=block.position.moved(0, -1))
            for block in self.blocks
            if block.position.y != row
        ]

    def has_free_row(self) -> bool:
        """True while some row holds no block; the game ends once this turns False."""
        used_rows = {block.position.y for block in self.blocks}
        return any(row not in used_rows for row in range(N_ROWS))

    def visible_blocks(self, tetromino: Optional[Tetromino] = None) -> list[Block]:
        """The blocks to draw: the falling piece first, then the settled ones."""
        falling = list(tetromino.blocks) if tetromino is not None else []
        return falling + self.blocks

    def clear(self) -> None:
        """Remove every settled block."""
        self.blocks.clear()