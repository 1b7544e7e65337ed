"""Plane vectors and axis-aligned rectangles for the paddle game."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class Vector:
    """A point or a displacement in window coordinates; ``y`` grows downwards."""

    x: float
    y: float

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: object) -> Vector:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def scaled(self, fx: float, fy: float) -> Vector:
        """The vector with each component multiplied by its own factor."""
        return Vector(self.x * fx, self.y * fy)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def angle_degrees(self) -> float:
        """The direction in degrees, wrapped into [0, 360); the zero vector has none."""
        if self.x == 0 and self.y == 0:
            raise ValueError("the zero vector has no angle")
        return math.degrees(math.atan2(self.y, self.x)) % 360.0

    def rotated_by(self, degrees: float) -> Vector:
        """The vector turned by ``degrees`` in the direction of increasing angle."""
        radians = math.radians(degrees)
        cos, sin = math.cos(radians), math.sin(radians)
        return Vector(self.x * cos - self.y * sin, self.x * sin + self.y * cos)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def position(self) -> Vector:
        return Vector(self.left, self.top)

    @property
    def size(self) -> Vector:
        return Vector(self.width, self.height)

    def intersection(self, other: Rect) -> Optional[Rect]:
        """The overlapping area, or None when the rectangles only touch or are apart."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if left < right and top < bottom:
            return Rect(left, top, right - left, bottom - top)
        return None

    def moved(self, offset: Vector) -> Rect:
        """The same rectangle shifted by ``offset``."""
        return Rect(self.left + offset.x, self.top + offset.y, self.width, self.height)