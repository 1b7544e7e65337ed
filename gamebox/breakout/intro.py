"""A small demo: a circle steered with the arrow keys in a resizable window."""

from __future__ import annotations

import sys
from typing import Optional

from gamebox.breakout.geometry import Rect, Vector

WORLD_SIZE = 1000.0
WINDOW_SIZE = (1000, 800)
WINDOW_TITLE = "Intro"
CIRCLE_RADIUS = 50.0
MOVE_SPEED = 100.0
CIRCLE_COLOR = (0, 255, 0)


def centered_view(width: float, height: float) -> Rect:
    """The world area to show in a window of this size.

    The 1000x1000 world around the origin is widened along the longer window
    side so that nothing is stretched.
    """
    if width <= 0 or height <= 0:
        raise ValueError("window size must be positive")
    ratio = width / height
    if ratio >= 1.0:
        view_w, view_h = WORLD_SIZE * ratio, WORLD_SIZE
    else:
        view_w, view_h = WORLD_SIZE, WORLD_SIZE / ratio
    return Rect(-view_w / 2, -view_h / 2, view_w, view_h)


def velocity_for_keys(up: bool, down: bool, left: bool, right: bool) -> Vector:
    """The circle's velocity; only one key counts, in the order up, down, left, right."""
    if up:
        return Vector(0.0, -MOVE_SPEED)
    if down:
        return Vector(0.0, MOVE_SPEED)
    if left:
        return Vector(-MOVE_SPEED, 0.0)
    if right:
        return Vector(MOVE_SPEED, 0.0)
    return Vector(0.0, 0.0)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the demo until the window is closed."""
    import pygame

    pygame.init()
    try:
        surface = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        view = centered_view(*surface.get_size())
        position = Vector(0.0, 0.0)
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    view = centered_view(event.w, event.h)

            keys = pygame.key.get_pressed()
            velocity = velocity_for_keys(
                keys[pygame.K_UP], keys[pygame.K_DOWN], keys[pygame.K_LEFT], keys[pygame.K_RIGHT]
            )
            dt = clock.tick(240) / 1000.0
            position = position + velocity * dt

            width, _height = surface.get_size()
            scale = width / view.width
            center = (
                (position.x + CIRCLE_RADIUS - view.left) * scale,
                (position.y + CIRCLE_RADIUS - view.top) * scale,
            )
            surface.fill((0, 0, 0))
            pygame.draw.circle(surface, CIRCLE_COLOR, center, CIRCLE_RADIUS * scale)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())