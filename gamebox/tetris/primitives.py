"""Positions, input events and their text forms for the falling-block game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

N_COLS = 11
N_ROWS = 22


@dataclass(frozen=True)
class Position:
    """A cell on the board: ``x`` is the column, ``y`` the row counted from the bottom."""

    x: int
    y: int

    def moved(self, dx: int, dy: int) -> Position:
        """The position shifted by ``dx`` columns and ``dy`` rows."""
        return Position(self.x + dx, self.y + dy)


class Action(Enum):
    """What happened to a key."""

    UNKNOWN = "unknown"
    PRESS = "press"
    RELEASE = "release"
    REPEAT = "repeat"


class Key(Enum):
    """The keys the game reacts to."""

    UNKNOWN = "unknown"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    ESC = "esc"
    CONTROL = "control"
    ALT = "alt"
    SPACE = "space"


_KEY_NAMES = {
    Key.UNKNOWN: "<unknown>",
    Key.DOWN: "down",
    Key.LEFT: "left",
    Key.RIGHT: "right",
    Key.UP: "up",
    Key.ESC: "escape",
    Key.SPACE: "space",
    Key.CONTROL: "strg",
    Key.ALT: "alt",
}

_ACTION_NAMES = {
    Action.UNKNOWN: "<unknown>",
    Action.PRESS: "pressed",
    Action.RELEASE: "released",
    Action.REPEAT: "repeated",
}


def string_from_duration(duration: float) -> str:
    """A duration in seconds with two decimals, e.g. ``"0.25 s"``."""
    return f"{duration:1.2f} s"


def string_from_key(key: Key, action: Action) -> str:
    """A readable description of a key event, e.g. ``"left pressed"``."""
    return f"{_KEY_NAMES[key]} {_ACTION_NAMES[action]}"