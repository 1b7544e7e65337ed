"""Reading the paddle game's settings file."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

Color = tuple[int, int, int]

RED: Color = (255, 0, 0)
YELLOW: Color = (255, 255, 0)
GREEN: Color = (0, 255, 0)
WHITE: Color = (255, 255, 255)
CYAN: Color = (0, 255, 255)

DEFAULT_CONFIG_PATH = Path("resources") / "gameconfig.cfg"

_COLORS = {"RED": RED, "YELLOW": YELLOW, "GREEN": GREEN}
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class ConfigError(Exception):
    """The settings file is missing or holds something that cannot be used."""


@dataclass
class GameConfig:
    """Numeric settings by name, and the colors of the brick rows from top to bottom."""

    values: dict[str, float] = field(default_factory=dict)
    rows: list[Color] = field(default_factory=list)

    def __getitem__(self, name: str) -> float:
        return self.values[name]

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def get(self, name: str, default: float = 0.0) -> float:
        return self.values.get(name, default)


def parse_color(name: str) -> Color:
    """The color for RED, YELLOW or GREEN."""
    try:
        return _COLORS[name]
    except KeyError:
        raise ConfigError(
            f"Für die Farbe {name} wurde kein Mapping definiert, "
            "bitte nur RED YELLOW oder GREEN mit ; getrennt verwenden!"
        ) from None


def _parse_number(name: str, text: str) -> float:
    match = _NUMBER.match(text)
    if match is None:
        raise ConfigError(f"{name}: {text!r} is not a number")
    return float(match.group())


def parse_config(text: str) -> GameConfig:
    """Parse ``NAME = value`` lines; lines starting with ``--`` are comments.

    Spaces are ignored. ``BRICK_ROWS`` lists colors, each ended by ``;``.
    """
    config = GameConfig()
    for line in text.splitlines():
        if line.startswith("--"):
            continue
        line = line.replace(" ", "")
        name, sep, value = line.partition("=")
        if not sep:
            continue
        if name == "BRICK_ROWS":
            *colors, _rest = value.split(";")
            config.rows.extend(parse_color(color) for color in colors)
        else:
            config.values[name] = _parse_number(name, value)
    return config


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> GameConfig:
    """Read and parse the settings file at ``path``."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f'Die Config-Datei "{path}" konnte nicht ausgelesen werden!') from exc
    return parse_config(text)