"""Two-dimensional vector maths used by the ball and the wall segments."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector or point."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: Vec2) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.hypot(self.x, self.y)


def wall_normal(start: Vec2, end: Vec2) -> Vec2:
    """Return the unit normal of the segment from ``start`` to ``end``."""
    normal = Vec2(-(end.y - start.y), end.x - start.x)
    length = normal.length()
    if length == 0:
        raise ValueError("a segment of zero length has no normal")
    return Vec2(normal.x / length, normal.y / length)


def projected_amount(point: Vec2, start: Vec2, direction: Vec2, length_squared: float) -> float:
    """Return where ``point`` projects onto the line, as a fraction of ``direction``."""
    if length_squared == 0:
        raise ValueError("cannot project onto a segment of zero length")
    return (point - start).dot(direction) / length_squared


def closest_point_on_line(start: Vec2, direction: Vec2, position: float) -> Vec2:
    """Return the point at fraction ``position`` along ``direction`` from ``start``."""
    return start + direction * position


def distance(a: Vec2, b: Vec2) -> float:
    """Return the distance between two points."""
    return (a - b).length()


def reflect(velocity: Vec2, normal: Vec2) -> Vec2:
    """Return ``velocity`` mirrored about the unit ``normal``."""
    along = velocity.dot(normal)
    return velocity - normal * (2 * along)