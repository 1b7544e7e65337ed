"""A pygame window that draws board cells and reports key events."""

from __future__ import annotations

import os
from typing import Callable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from gamebox.tetris.primitives import Action, Key, Position  # noqa: E402
from gamebox.tetris.tetromino import (  # noqa: E402
    normalize_blue,
    normalize_green,
    normalize_red,
)

WINDOW_WIDTH = 400
WINDOW_HEIGHT = 800
WINDOW_TITLE = "Tetris"
EVENT_WAIT_MS = 250

KeyHandler = Callable[[Key, Action], object]

_KEYS = {
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_LCTRL: Key.CONTROL,
    pygame.K_LALT: Key.ALT,
    pygame.K_SPACE: Key.SPACE,
}


def key_from_pygame(key: int) -> Key:
    """The game key for a pygame key code, or Key.UNKNOWN."""
    return _KEYS.get(key, Key.UNKNOWN)


def action_from_pygame(event_type: int) -> Action:
    """PRESS for a key-down event, RELEASE for key-up, UNKNOWN otherwise."""
    if event_type == pygame.KEYDOWN:
        return Action.PRESS
    if event_type == pygame.KEYUP:
        return Action.RELEASE
    return Action.UNKNOWN


class Renderer:
    """A window showing a ``rows`` x ``cols`` grid, row 0 at the bottom."""

    def __init__(self, rows: int, cols: int, on_key: Optional[KeyHandler] = None) -> None:
        self.rows = rows
        self.cols = cols
        self.on_key = on_key
        pygame.init()
        self.surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self._open = True
        self._held: set[int] = set()

    def is_open(self) -> bool:
        """False once the window has been asked to close."""
        return self._open

    def _cell_rect(self, position: Position) -> pygame.Rect:
        width, height = self.surface.get_size()
        cell_w = width / self.cols
        cell_h = height / self.rows
        left = round(position.x * cell_w)
        right = round((position.x + 1) * cell_w)
        bottom = round(height - position.y * cell_h)
        top = round(height - (position.y + 1) * cell_h)
        return pygame.Rect(left, top, right - left, bottom - top)

    def render_block(self, position: Position, color: int) -> None:
        """Fill the cell at ``position`` with a packed 0xBBGGRR color."""
        rgb = tuple(
            round(channel(color) * 255) for channel in (normalize_red, normalize_green, normalize_blue)
        )
        self.surface.fill(rgb, self._cell_rect(position))

    def begin_frame(self) -> None:
        """Clear the window to black."""
        self.surface.fill((0, 0, 0))

    def end_frame(self) -> None:
        """Show the frame, then wait briefly for input and dispatch it."""
        pygame.display.flip()
        first = pygame.event.wait(EVENT_WAIT_MS)
        for event in [first, *pygame.event.get()]:
            self._dispatch(event)

    def _dispatch(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self._open = False
            return
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return

        action = action_from_pygame(event.type)
        if event.type == pygame.KEYDOWN:
            if event.key in self._held:
                action = Action.REPEAT
            self._held.add(event.key)
        else:
            self._held.discard(event.key)

        if self.on_key is not None:
            self.on_key(key_from_pygame(event.key), action)

    def close(self) -> None:
        """Close the window and shut pygame down."""
        self._open = False
        pygame.quit()