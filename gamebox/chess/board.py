"""The chess board, its turn logic and the command-line game."""

from __future__ import annotations

import sys
from typing import Callable, Optional

from gamebox.chess.coordinate import COL_WIDTH, ROW_HEIGHT, BoardCoordinate
from gamebox.chess.pieces import (
    Bishop,
    Chessman,
    Color,
    King,
    Knight,
    Pawn,
    Queen,
    Rook,
)

_HEADER = "  | a  b  c  d  e  f  g  h |  \n"
_SEPARATOR = "--+------------------------+--\n"

_BACK_RANK: tuple[type[Chessman], ...] = (Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook)

_SELECT_PROMPT = "Spieler {}: Wähle eine deiner Figuren aus (Format Bsp. a2)!\n"
_SELECT_ERROR = "und eine Figur des Spielers enthalten"
_MOVE_PROMPT = (
    "Spieler {}: Wähle die Zielposition der Figur aus! (mit [] markiert)\n"
    "Verwende die selektierte Position um die Figur zurückzustellen\n"
)
_MOVE_ERROR = "und muss zu den markierten Feldern gehören!"


def parse_coordinate(text: str) -> BoardCoordinate:
    """Turn input such as ``a2`` into a board square.

    Row labels count from the bottom of the printed board, so ``a1`` is
    ``(0, 7)``. The result may lie off the board; a malformed text raises
    ValueError.
    """
    if len(text) != 2 or not text[1].isdigit():
        raise ValueError(f"not a coordinate: {text!r}")
    return BoardCoordinate(ord(text[0]) - ord("a"), ROW_HEIGHT - int(text[1]))


def _say(message: str) -> None:
    sys.stdout.write(message)


class Chessboard:
    """An 8x8 board in its starting position, with the UPPERCASE side to move."""

    def __init__(self) -> None:
        self.grid: list[list[Optional[Chessman]]] = [
            [None] * COL_WIDTH for _ in range(ROW_HEIGHT)
        ]
        self.selected: Optional[BoardCoordinate] = None
        self.current_turn = Color.UPPERCASE
        self.king_map: dict[Color, Optional[King]] = {}
        self._setup()

    def _setup(self) -> None:
        for x, piece_type in enumerate(_BACK_RANK):
            for color, back_row, pawn_row in ((Color.UPPERCASE, 0, 1), (Color.LOWERCASE, 7, 6)):
                piece = piece_type(BoardCoordinate(x, back_row), color)
                self.grid[back_row][x] = piece
                if isinstance(piece, King):
                    self.king_map[color] = piece
                self.grid[pawn_row][x] = Pawn(BoardCoordinate(x, pawn_row), color)

    # ------------------------------------------------------------------ display

    def render(self) -> str:
        """The board as text, with the selection in () and its targets in []."""
        targets: list[BoardCoordinate] = []
        if self.selected is not None:
            figure = self.figure_at(self.selected)
            if figure is not None:
                targets = figure.possible_positions(self.grid)

        lines = [_HEADER, _SEPARATOR]
        for y in reversed(range(ROW_HEIGHT)):
            label = ROW_HEIGHT - y
            cells = []
            for x in range(COL_WIDTH):
                piece = self.grid[y][x]
                out = piece.symbol if piece is not None else ("*" if (x + y) % 2 else ".")
                coord = BoardCoordinate(x, y)
                if coord == self.selected:
                    cells.append(f"({out})")
                elif coord in targets:
                    cells.append(f"[{out}]")
                else:
                    cells.append(f" {out} ")
            lines.append(f"{label} |{''.join(cells)}| {label}\n")
        lines += [_SEPARATOR, _HEADER]
        return "".join(lines)

    # ---------------------------------------------------------------- selection

    def select_pos(self, coord: BoardCoordinate) -> None:
        self.selected = coord

    def _unselect(self) -> None:
        self.selected = None

    def figure_at(self, coord: BoardCoordinate) -> Optional[Chessman]:
        """The piece on ``coord``, or None; off-board squares raise IndexError."""
        if not coord.is_in_board():
            raise IndexError(f"{coord} is not on the board")
        return self.grid[coord.y][coord.x]

    def _selected_figure(self) -> Optional[Chessman]:
        if self.selected is None:
            return None
        return self.figure_at(self.selected)

    # ------------------------------------------------------------------- moving

    def move_to_pos(self, dest: BoardCoordinate) -> bool:
        """Move the selected piece to ``dest``.

        Returns True when the move was made or nothing is selected, False when
        the piece cannot go there or the move would put its own king in check.
        """
        if self.selected is None:
            return True

        initially_in_check = self.check_check_condition()
        figure = self._selected_figure()
        if figure is None or not figure.can_move_to_position(dest, self.grid):
            return False

        old = figure.position
        captured = self.figure_at(dest)
        self.grid[dest.y][dest.x] = figure
        self.grid[old.y][old.x] = None

        # Without checkmate detection a player already in check may move freely.
        if not self.check_check_condition() or initially_in_check:
            figure.update_position(dest)
            if captured is not None:
                _say(f"Die Figur {captured.symbol} wurde geschlagen!\n")
                if captured.essential:
                    self.king_map[captured.color] = None
            return True

        self.grid[old.y][old.x] = figure
        self.grid[dest.y][dest.x] = captured
        _say("Warnung: Spieler hätte sich selbst in ein Check-State gebracht!\n")
        return False

    def check_check_condition(self) -> bool:
        """True if an opposing piece can reach the king of the side to move."""
        for row in self.grid:
            for piece in row:
                if piece is None or piece.color is self.current_turn:
                    continue
                for target in piece.possible_positions(self.grid):
                    victim = self.grid[target.y][target.x]
                    if (
                        victim is not None
                        and victim.essential
                        and victim.color is self.current_turn
                    ):
                        return True
        return False

    def check_win_condition(self) -> bool:
        """True once the opponent of the side to move has lost its king."""
        for color, king in self.king_map.items():
            if color is not self.current_turn and king is None:
                self._unselect()
                return True
        return False

    def switch_turns(self) -> None:
        """Hand the move to the other side, unless the selection was withdrawn."""
        if self.selected is None:
            return
        self.current_turn = (
            Color.LOWERCASE if self.current_turn is Color.UPPERCASE else Color.UPPERCASE
        )
        self._unselect()

    def winner(self) -> str:
        """The name of the side that won, or an empty string."""
        if self.king_map.get(Color.UPPERCASE, True) is None:
            return Color.LOWERCASE.name
        if self.king_map.get(Color.LOWERCASE, True) is None:
            return Color.UPPERCASE.name
        return ""

    # -------------------------------------------------------------------- input

    def _valid_selection(self, coord: BoardCoordinate) -> bool:
        if not coord.is_in_board():
            return False
        piece = self.figure_at(coord)
        return piece is not None and piece.color is self.current_turn

    def _valid_destination(self, coord: BoardCoordinate) -> bool:
        if coord == self.selected:
            return True
        figure = self._selected_figure()
        return figure is not None and coord in figure.possible_positions(self.grid)

    def _request_input(
        self,
        prompt: str,
        error_append: str,
        is_valid: Callable[[BoardCoordinate], bool],
        read: Callable[[], str],
        write: Callable[[str], object],
    ) -> BoardCoordinate:
        player = (
            "Grossbuchstaben" if self.current_turn is Color.UPPERCASE else "Kleinbuchstaben"
        )
        while True:
            write(prompt.format(player))
            try:
                coord = parse_coordinate(read().strip())
            except ValueError:
                coord = None
            if coord is not None and is_valid(coord):
                return coord
            write(
                "Die eingegebene Position ist ungültig!\n"
                f"Die Position muss im Format ColRow (zB. a2) sein {error_append}\n"
            )

    def request_selection_input(
        self, read: Callable[[], str], write: Callable[[str], object]
    ) -> BoardCoordinate:
        """Ask until the player names a square holding one of their pieces."""
        return self._request_input(
            _SELECT_PROMPT, _SELECT_ERROR, self._valid_selection, read, write
        )

    def request_movement_input(
        self, read: Callable[[], str], write: Callable[[str], object]
    ) -> BoardCoordinate:
        """Ask for a destination; naming the selected square withdraws the selection."""
        dest = self._request_input(
            _MOVE_PROMPT, _MOVE_ERROR, self._valid_destination, read, write
        )
        if dest == self.selected:
            self._unselect()
        return dest


def main(argv: Optional[list[str]] = None) -> int:
    """Play a game of chess on the terminal."""
    board = Chessboard()

    def read() -> str:
        return input()

    write = sys.stdout.write
    try:
        while True:
            board.switch_turns()
            write(board.render())
            board.select_pos(board.request_selection_input(read, write))

            while True:
                write(board.render())
                dest = board.request_movement_input(read, write)
                if board.move_to_pos(dest):
                    break
                write("Die Figur kann sich nicht auf dieses Feld bewegen! Gib ein anderes an.\n")

            if board.check_win_condition():
                break
    except (EOFError, KeyboardInterrupt):
        return 1

    write(board.render())
    write(f"Spieler {board.winner()} hat gewonnen!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())